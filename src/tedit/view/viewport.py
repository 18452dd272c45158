"""Window of buffer rows and display columns currently on screen."""

from __future__ import annotations

from dataclasses import dataclass

from tedit.buffer import Cursor, TextBuffer, display_column
from tedit.terminal.driver import TerminalSize

FOOTER_ROWS = 2  # status bar + message bar


@dataclass(slots=True)
class Viewport:
    """Scroll offsets and text-area size, recomputed before every frame.

    ``left_col`` and ``width`` are in display columns, so tabs count for the
    cells they occupy rather than one.
    """

    top_row: int = 0
    left_col: int = 0
    height: int = 1
    width: int = 1

    def resize(self, terminal_size: TerminalSize) -> None:
        self.height = max(1, terminal_size.rows - FOOTER_ROWS)
        self.width = max(1, terminal_size.columns)

    def recompute(
        self, cursor: Cursor, buffer: TextBuffer, terminal_size: TerminalSize
    ) -> None:
        """Scroll by the smallest amount that brings ``cursor`` into view."""

        self.resize(terminal_size)

        if cursor.row < self.top_row:
            self.top_row = cursor.row
        elif cursor.row >= self.top_row + self.height:
            self.top_row = cursor.row - self.height + 1

        render_col = display_column(buffer.line(cursor.row), cursor.col)
        if render_col < self.left_col:
            self.left_col = render_col
        elif render_col >= self.left_col + self.width:
            self.left_col = render_col - self.width + 1

    def to_screen_coords(self, cursor: Cursor, buffer: TextBuffer) -> tuple[int, int]:
        render_col = display_column(buffer.line(cursor.row), cursor.col)
        return (cursor.row - self.top_row, render_col - self.left_col)

    def visible_rows(self) -> range:
        return range(self.top_row, self.top_row + self.height)


__all__ = ["Viewport", "FOOTER_ROWS"]
