"""Cursor position and movement arithmetic.

Horizontal moves record the column as the sticky column; vertical moves read
it back so the cursor returns to its column after crossing shorter lines.
"""

from __future__ import annotations

from dataclasses import dataclass

from .document import TextBuffer
from .errors import Position
from .validation import ensure_position


@dataclass(slots=True)
class Cursor:
    row: int = 0
    col: int = 0
    sticky_col: int = 0

    @property
    def position(self) -> Position:
        return (self.row, self.col)


class CursorModel:
    """Owns a ``Cursor`` and applies moves against a ``TextBuffer``."""

    def __init__(self, cursor: Cursor | None = None) -> None:
        self.cursor = cursor or Cursor()

    @property
    def row(self) -> int:
        return self.cursor.row

    @property
    def col(self) -> int:
        return self.cursor.col

    @property
    def position(self) -> Position:
        return self.cursor.position

    def place(self, buffer: TextBuffer, row: int, col: int) -> None:
        """Move to an explicit position, e.g. after an edit."""

        ensure_position(buffer.lines(), (row, col))
        self.cursor.row = row
        self._set_col(col)

    # -- horizontal ---------------------------------------------------------

    def move_left(self, buffer: TextBuffer) -> None:
        del buffer
        if self.cursor.col > 0:
            self._set_col(self.cursor.col - 1)

    def move_right(self, buffer: TextBuffer) -> None:
        if self.cursor.col < buffer.line_length(self.cursor.row):
            self._set_col(self.cursor.col + 1)

    def move_line_start(self, buffer: TextBuffer) -> None:
        del buffer
        self._set_col(0)

    def move_line_end(self, buffer: TextBuffer) -> None:
        self._set_col(buffer.line_length(self.cursor.row))

    # -- vertical -----------------------------------------------------------

    def move_up(self, buffer: TextBuffer) -> None:
        self._move_vertically(buffer, self.cursor.row - 1)

    def move_down(self, buffer: TextBuffer) -> None:
        self._move_vertically(buffer, self.cursor.row + 1)

    def page_up(self, buffer: TextBuffer, top_row: int, height: int) -> None:
        self._move_vertically(buffer, top_row)
        for _ in range(height):
            self.move_up(buffer)

    def page_down(self, buffer: TextBuffer, top_row: int, height: int) -> None:
        self._move_vertically(buffer, top_row + height - 1)
        for _ in range(height):
            self.move_down(buffer)

    # -- invariants ---------------------------------------------------------

    def clamp_to(self, buffer: TextBuffer) -> None:
        """Pull the cursor back inside ``buffer`` after a mutation."""

        self.cursor.row = max(0, min(self.cursor.row, buffer.line_count - 1))
        self.cursor.col = max(
            0, min(self.cursor.col, buffer.line_length(self.cursor.row))
        )

    def _move_vertically(self, buffer: TextBuffer, target_row: int) -> None:
        row = max(0, min(target_row, buffer.line_count - 1))
        self.cursor.row = row
        self.cursor.col = min(self.cursor.sticky_col, buffer.line_length(row))

    def _set_col(self, col: int) -> None:
        self.cursor.col = col
        self.cursor.sticky_col = col


__all__ = ["Cursor", "CursorModel"]
