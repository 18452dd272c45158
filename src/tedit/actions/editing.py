"""Text mutations applied at the cursor."""

from __future__ import annotations

from tedit.input import Command
from tedit.modes.base_mode import ModeContext, ModeResult


def insert_char(context: ModeContext, command: Command) -> ModeResult:
    if not command.char:
        return ModeResult(consumed=False, status="miss")
    row, col = context.cursor.position
    context.buffer.insert_char(row, col, command.char)
    context.cursor.place(context.buffer, row, col + 1)
    return ModeResult(consumed=True, status="edited")


def insert_tab(context: ModeContext, command: Command) -> ModeResult:
    del command
    row, col = context.cursor.position
    context.buffer.insert_tab(row, col)
    context.cursor.place(context.buffer, row, col + 1)
    return ModeResult(consumed=True, status="edited")


def insert_newline(context: ModeContext, command: Command) -> ModeResult:
    del command
    row, col = context.cursor.position
    context.buffer.insert_newline(row, col)
    context.cursor.place(context.buffer, row + 1, 0)
    return ModeResult(consumed=True, status="edited")


def delete_backward(context: ModeContext, command: Command) -> ModeResult:
    del command
    target = context.buffer.delete_char_before(*context.cursor.position)
    if target is None:
        return ModeResult(consumed=True, status="boundary")
    context.cursor.place(context.buffer, *target)
    return ModeResult(consumed=True, status="edited")


def delete_forward(context: ModeContext, command: Command) -> ModeResult:
    del command
    if not context.buffer.delete_char_after(*context.cursor.position):
        return ModeResult(consumed=True, status="boundary")
    return ModeResult(consumed=True, status="edited")


__all__ = [
    "insert_char",
    "insert_tab",
    "insert_newline",
    "delete_backward",
    "delete_forward",
]
