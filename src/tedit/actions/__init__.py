"""Action handlers bound to command tokens by the keymaps."""

from . import editing, motion, prompt, session

__all__ = ["editing", "motion", "prompt", "session"]
