"""Logical editing commands produced by the input decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandKind(str, Enum):
    """Classification of one decoded key press."""

    INSERT_CHAR = "insert_char"
    INSERT_NEWLINE = "insert_newline"
    INSERT_TAB = "insert_tab"
    DELETE_BACKWARD = "delete_backward"
    DELETE_FORWARD = "delete_forward"
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ESCAPE = "escape"
    KEY = "key"  # control chord; the letter lives in ``Command.char``


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    char: Optional[str] = None
    modifiers: tuple[str, ...] = ()

    @property
    def token(self) -> str:
        """Keymap lookup token, e.g. ``insert_char`` or ``ctrl+s``."""

        key = self.char if self.kind is CommandKind.KEY else self.kind.value
        if self.modifiers:
            return f"{'+'.join(self.modifiers)}+{key}"
        return str(key)

    @classmethod
    def insert(cls, ch: str) -> "Command":
        return cls(CommandKind.INSERT_CHAR, char=ch)

    @classmethod
    def ctrl(cls, letter: str) -> "Command":
        return cls(CommandKind.KEY, char=letter.lower(), modifiers=("ctrl",))


__all__ = ["Command", "CommandKind"]
