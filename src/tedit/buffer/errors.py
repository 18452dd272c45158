"""Error taxonomy for buffer arithmetic and file persistence."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

Position = Tuple[int, int]  # (row, column)


class BufferError(RuntimeError):
    """Base class for failures raised by the buffer layer."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


class OutOfBounds(BufferError):
    """A row/column pair violates the buffer's bounds invariant.

    Raised only when clamp discipline has been broken somewhere; callers treat
    it as an internal assertion failure.
    """


class BufferIOError(BufferError):
    """Reading or writing the backing file failed."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["Position", "BufferError", "OutOfBounds", "BufferIOError"]
