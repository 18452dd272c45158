"""Bounds checks shared by buffer and cursor operations."""

from __future__ import annotations

from typing import Sequence

from .errors import OutOfBounds, Position


def ensure_row(lines: Sequence[str], row: int) -> int:
    if row < 0 or row >= len(lines):
        raise OutOfBounds(f"Row {row} out of range", position=(row, 0))
    return row


def ensure_position(lines: Sequence[str], position: Position) -> Position:
    row, col = position
    ensure_row(lines, row)
    if col < 0 or col > len(lines[row]):
        raise OutOfBounds(f"Column {col} out of range", position=position)
    return position


__all__ = ["ensure_row", "ensure_position"]
