"""Cursor motions."""

from __future__ import annotations

from tedit.input import Command
from tedit.modes.base_mode import ModeContext, ModeResult


def _moved() -> ModeResult:
    return ModeResult(consumed=True, status="moved")


def cursor_left(context: ModeContext, command: Command) -> ModeResult:
    del command
    context.cursor.move_left(context.buffer)
    return _moved()


def cursor_right(context: ModeContext, command: Command) -> ModeResult:
    del command
    context.cursor.move_right(context.buffer)
    return _moved()


def cursor_up(context: ModeContext, command: Command) -> ModeResult:
    del command
    context.cursor.move_up(context.buffer)
    return _moved()


def cursor_down(context: ModeContext, command: Command) -> ModeResult:
    del command
    context.cursor.move_down(context.buffer)
    return _moved()


def line_start(context: ModeContext, command: Command) -> ModeResult:
    del command
    context.cursor.move_line_start(context.buffer)
    return _moved()


def line_end(context: ModeContext, command: Command) -> ModeResult:
    del command
    context.cursor.move_line_end(context.buffer)
    return _moved()


def page_up(context: ModeContext, command: Command) -> ModeResult:
    del command
    viewport = context.viewport
    context.cursor.page_up(context.buffer, viewport.top_row, viewport.height)
    return _moved()


def page_down(context: ModeContext, command: Command) -> ModeResult:
    del command
    viewport = context.viewport
    context.cursor.page_down(context.buffer, viewport.top_row, viewport.height)
    return _moved()


__all__ = [
    "cursor_left",
    "cursor_right",
    "cursor_up",
    "cursor_down",
    "line_start",
    "line_end",
    "page_up",
    "page_down",
]
