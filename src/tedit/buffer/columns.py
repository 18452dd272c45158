"""Display-width arithmetic shared by every component that maps to screen cells.

A tab is stored as one character but advances the display to the next
multiple of ``TAB_STOP``. Other control characters (``0x00-0x1F`` and
``0x7F``) are drawn in caret notation, ``\\r`` as ``^M`` and ESC as ``^[``,
so they occupy two cells and never reach the terminal raw. Nothing else in
the package expands or escapes characters.
"""

from __future__ import annotations

TAB_STOP = 8
CARET_WIDTH = 2


def is_control(ch: str) -> bool:
    code = ord(ch)
    return (code < 0x20 and ch != "\t") or code == 0x7F


def caret(ch: str) -> str:
    """Caret notation for a control character: ``^M``, ``^[``, ``^?``."""

    return "^" + chr(ord(ch) ^ 0x40)


def advance(display_col: int, ch: str) -> int:
    """Return the display column reached after drawing ``ch`` at ``display_col``."""

    if ch == "\t":
        return display_col + TAB_STOP - (display_col % TAB_STOP)
    if is_control(ch):
        return display_col + CARET_WIDTH
    return display_col + 1


def display_column(line: str, col: int) -> int:
    """Screen column of storage index ``col`` within ``line``."""

    width = 0
    for ch in line[:col]:
        width = advance(width, ch)
    return width


def display_width(line: str) -> int:
    return display_column(line, len(line))


def render_line(line: str) -> str:
    """Expand tabs to spaces and control characters to caret notation."""

    if line.isprintable():
        return line
    parts: list[str] = []
    width = 0
    for ch in line:
        next_width = advance(width, ch)
        if ch == "\t":
            parts.append(" " * (next_width - width))
        elif is_control(ch):
            parts.append(caret(ch))
        else:
            parts.append(ch)
        width = next_width
    return "".join(parts)


__all__ = [
    "TAB_STOP",
    "CARET_WIDTH",
    "advance",
    "caret",
    "display_column",
    "display_width",
    "is_control",
    "render_line",
]
