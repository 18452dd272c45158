"""Document model, cursor arithmetic, and persistence."""

from .columns import TAB_STOP, display_column, display_width, render_line
from .cursor import Cursor, CursorModel
from .document import TextBuffer
from .errors import BufferError, BufferIOError, OutOfBounds, Position
from .storage import open_buffer, save_buffer
from .validation import ensure_position

__all__ = [
    "TAB_STOP",
    "display_column",
    "display_width",
    "render_line",
    "Cursor",
    "CursorModel",
    "TextBuffer",
    "BufferError",
    "BufferIOError",
    "OutOfBounds",
    "Position",
    "open_buffer",
    "save_buffer",
    "ensure_position",
]
