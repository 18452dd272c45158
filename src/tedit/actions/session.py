"""Save and quit."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, cast

from tedit.buffer import BufferIOError, save_buffer
from tedit.config import SAVE_AS_PROMPT
from tedit.input import Command
from tedit.modes.base_mode import ModeContext, ModeResult
from tedit.runtime import telemetry

SAVE_AS = "save_as"


def save(context: ModeContext, command: Command) -> ModeResult:
    del command
    if context.buffer.path is None:
        context.extras["prompt_state"] = {
            "label": SAVE_AS_PROMPT,
            "text": "",
            "purpose": SAVE_AS,
        }
        return ModeResult(consumed=True, switch_to="prompt", status="prompt")
    return write_buffer(context)


def write_buffer(context: ModeContext) -> ModeResult:
    """Write the buffer and report the outcome on the status line."""

    buffer = context.buffer
    try:
        written = save_buffer(buffer)
    except BufferIOError as exc:
        context.status.set(f"Can't save! {exc}")
        return ModeResult(consumed=True, status="save_failed", message=str(exc))
    context.status.set(f'"{buffer.display_name}" written ({written} bytes)')
    return ModeResult(consumed=True, status="saved")


def quit_editor(context: ModeContext, command: Command) -> ModeResult:
    del command
    context.quit_requested = True
    telemetry.record_event(
        "session.quit", data={"dirty": context.buffer.dirty}
    )
    return ModeResult(consumed=True, status="quit")


def complete_save_as(context: ModeContext, payload: object) -> None:
    """Bus handler for ``prompt.submit``: bind the answer as the path and save."""

    data = cast(Mapping[str, object], payload)
    if data.get("purpose") != SAVE_AS:
        return
    context.buffer.bind_path(Path(str(data["text"])))
    result = write_buffer(context)
    if result.status == "save_failed":
        context.buffer.bind_path(None)


def abort_save_as(context: ModeContext, payload: object) -> None:
    """Bus handler for ``prompt.cancel``."""

    data = cast(Mapping[str, object], payload)
    if data.get("purpose") == SAVE_AS:
        context.status.set("Save aborted")


__all__ = [
    "save",
    "write_buffer",
    "quit_editor",
    "complete_save_as",
    "abort_save_as",
]
