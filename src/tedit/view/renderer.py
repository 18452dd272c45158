"""ANSI frame composition.

A frame is one ``bytes`` blob: hide the cursor, clear, paint every visible
row, paint the status bar and message bar, park the hardware cursor, show it.
Document text is encoded byte-for-byte; footer chrome is UTF-8.
"""

from __future__ import annotations

from tedit.buffer import Cursor, TextBuffer, render_line
from tedit.buffer.document import ENCODING

from .viewport import Viewport

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CLEAR_SCREEN = b"\x1b[2J"
CURSOR_HOME = b"\x1b[H"
ERASE_LINE = b"\x1b[K"
REVERSE_ON = b"\x1b[7m"
REVERSE_OFF = b"\x1b[m"
NEWLINE = b"\r\n"
EMPTY_ROW = b"~"


def move_to(row: int, col: int) -> bytes:
    """Cursor-position sequence for 0-indexed ``(row, col)``."""

    return f"\x1b[{row + 1};{col + 1}H".encode("ascii")


class Renderer:
    def compose(
        self,
        buffer: TextBuffer,
        cursor: Cursor,
        viewport: Viewport,
        message: str = "",
    ) -> bytes:
        frame = bytearray()
        frame += HIDE_CURSOR + CLEAR_SCREEN + CURSOR_HOME
        self._draw_rows(frame, buffer, viewport)
        self._draw_status_bar(frame, buffer, cursor, viewport.width)
        self._draw_message_bar(frame, message, viewport.width)
        screen_row, screen_col = viewport.to_screen_coords(cursor, buffer)
        frame += move_to(screen_row, screen_col) + SHOW_CURSOR
        return bytes(frame)

    def _draw_rows(
        self, frame: bytearray, buffer: TextBuffer, viewport: Viewport
    ) -> None:
        for row in viewport.visible_rows():
            if row < buffer.line_count:
                text = render_line(buffer.line(row))
                visible = text[viewport.left_col : viewport.left_col + viewport.width]
                frame += visible.encode(ENCODING)
            else:
                frame += EMPTY_ROW
            frame += ERASE_LINE + NEWLINE

    def _draw_status_bar(
        self, frame: bytearray, buffer: TextBuffer, cursor: Cursor, width: int
    ) -> None:
        info = f"{buffer.display_name} [{buffer.line_count} lines]"
        if buffer.dirty:
            info += " (modified)"
        position = f"{cursor.row + 1}/{buffer.line_count}"
        info = info[:width]
        gap = width - len(info)
        if gap >= len(position):
            bar = info + " " * (gap - len(position)) + position
        else:
            bar = info + " " * gap
        frame += REVERSE_ON + bar.encode("utf-8", errors="replace") + REVERSE_OFF
        frame += NEWLINE

    def _draw_message_bar(self, frame: bytearray, message: str, width: int) -> None:
        frame += ERASE_LINE
        frame += message[:width].encode("utf-8", errors="replace")


__all__ = ["Renderer", "move_to"]
