"""Single-buffer terminal text editor."""

__all__ = [
    "actions",
    "buffer",
    "cli",
    "config",
    "input",
    "keymaps",
    "loop",
    "modes",
    "runtime",
    "terminal",
    "view",
]

__version__ = "0.1.0"
