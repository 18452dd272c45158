"""Modes, the mode manager, and the event bus."""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .edit_mode import EditMode
from .prompt_mode import PromptMode

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "EditMode",
    "PromptMode",
]
