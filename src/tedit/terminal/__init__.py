"""Terminal driver collaborator."""

from .driver import DEFAULT_SIZE, RawTerminal, Terminal, TerminalError, TerminalSize

__all__ = ["DEFAULT_SIZE", "RawTerminal", "Terminal", "TerminalError", "TerminalSize"]
