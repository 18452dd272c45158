"""Line-sequence document model with a dirty flag and optional backing path."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from .errors import Position
from .validation import ensure_position

ENCODING = "latin-1"  # one stored character per file byte
NEWLINE = b"\n"


def _decode_lines(content: bytes) -> List[str]:
    return [chunk.decode(ENCODING) for chunk in content.split(NEWLINE)]


class TextBuffer:
    """Ordered sequence of lines; never empty.

    An empty document is a single empty line. ``load``/``serialize`` split and
    join on ``\\n`` with no normalization, so a trailing newline survives as a
    trailing empty line.
    """

    def __init__(
        self, lines: Optional[Sequence[str]] = None, *, path: Optional[Path] = None
    ) -> None:
        self._lines: List[str] = list(lines) if lines else [""]
        self.path = Path(path) if path is not None else None
        self.dirty = False
        self.version = 0

    @classmethod
    def from_bytes(
        cls, content: bytes, *, path: Optional[Path] = None
    ) -> "TextBuffer":
        buffer = cls(path=path)
        buffer.load(content)
        return buffer

    # -- queries ------------------------------------------------------------

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> str:
        return self._lines[row]

    def line_length(self, row: int) -> int:
        return len(self._lines[row])

    def lines(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def display_name(self) -> str:
        return self.path.name if self.path is not None else "[No Name]"

    # -- persistence --------------------------------------------------------

    def load(self, content: bytes) -> None:
        """Replace the content with ``content`` split on ``\\n``."""

        self._lines = _decode_lines(content)
        self.dirty = False
        self.version += 1

    def serialize(self) -> bytes:
        return NEWLINE.join(line.encode(ENCODING) for line in self._lines)

    def bind_path(self, path: Optional[Path]) -> None:
        self.path = Path(path) if path is not None else None

    def mark_clean(self) -> None:
        """Clear the dirty flag; only called after a confirmed write."""

        self.dirty = False

    # -- mutations ----------------------------------------------------------

    def insert_char(self, row: int, col: int, ch: str) -> None:
        if len(ch) != 1 or ch == "\n":
            raise ValueError(f"insert_char expects one non-newline character, got {ch!r}")
        ensure_position(self._lines, (row, col))
        line = self._lines[row]
        self._lines[row] = line[:col] + ch + line[col:]
        self._touch()

    def insert_tab(self, row: int, col: int) -> None:
        self.insert_char(row, col, "\t")

    def insert_newline(self, row: int, col: int) -> None:
        """Split line ``row`` at ``col``; the suffix becomes line ``row + 1``."""

        ensure_position(self._lines, (row, col))
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        self._touch()

    def delete_char_before(self, row: int, col: int) -> Optional[Position]:
        """Backspace at ``(row, col)``.

        Returns the position the cursor should take, or ``None`` when
        ``(0, 0)`` leaves nothing to delete.
        """

        ensure_position(self._lines, (row, col))
        if col > 0:
            line = self._lines[row]
            self._lines[row] = line[: col - 1] + line[col:]
            self._touch()
            return (row, col - 1)
        if row == 0:
            return None
        previous_length = len(self._lines[row - 1])
        self._lines[row - 1] += self._lines.pop(row)
        self._touch()
        return (row - 1, previous_length)

    def delete_char_after(self, row: int, col: int) -> bool:
        """Forward-delete at ``(row, col)``; ``False`` at the end of the document."""

        ensure_position(self._lines, (row, col))
        line = self._lines[row]
        if col < len(line):
            self._lines[row] = line[:col] + line[col + 1 :]
        elif row + 1 < len(self._lines):
            self._lines[row] = line + self._lines.pop(row + 1)
        else:
            return False
        self._touch()
        return True

    def _touch(self) -> None:
        self.dirty = True
        self.version += 1


__all__ = ["TextBuffer", "ENCODING"]
