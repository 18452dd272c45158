"""Declarative keymap registry and default bindings."""

from .models import ActionRef, Binding, ResolutionMatch
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_BINDINGS, default_actions, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "ResolutionMatch",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "DEFAULT_BINDINGS",
    "default_actions",
    "load_default_keymaps",
]
