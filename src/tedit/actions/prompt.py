"""Line editing inside the message-bar prompt."""

from __future__ import annotations

from typing import MutableMapping, cast

from tedit.input import Command
from tedit.modes.base_mode import ModeContext, ModeResult


def prompt_state(context: ModeContext) -> MutableMapping[str, object]:
    state = cast(
        MutableMapping[str, object], context.extras.setdefault("prompt_state", {})
    )
    state.setdefault("label", "{}")
    state.setdefault("text", "")
    state.setdefault("purpose", "")
    return state


def append(context: ModeContext, command: Command) -> ModeResult:
    if not command.char:
        return ModeResult(consumed=False, status="miss")
    state = prompt_state(context)
    state["text"] = f"{state['text']}{command.char}"
    return ModeResult(consumed=True, status="editing")


def erase(context: ModeContext, command: Command) -> ModeResult:
    del command
    state = prompt_state(context)
    state["text"] = str(state["text"])[:-1]
    return ModeResult(consumed=True, status="editing")


def submit(context: ModeContext, command: Command) -> ModeResult:
    del command
    state = prompt_state(context)
    text = str(state["text"])
    if not text:
        return ModeResult(consumed=True, status="prompt_empty")
    context.bus.emit("prompt.submit", {"purpose": state["purpose"], "text": text})
    return ModeResult(
        consumed=True, switch_to="edit", status="prompt_submit", message=text
    )


def cancel(context: ModeContext, command: Command) -> ModeResult:
    del command
    state = prompt_state(context)
    context.bus.emit("prompt.cancel", {"purpose": state["purpose"]})
    return ModeResult(consumed=True, switch_to="edit", status="prompt_cancel")


__all__ = ["prompt_state", "append", "erase", "submit", "cancel"]
