"""One-line prompt shown in the message bar (e.g. "Save as")."""

from __future__ import annotations

from typing import Optional

from tedit.actions.prompt import prompt_state
from tedit.input import Command
from tedit.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, require_keymap_registry


class PromptMode(Mode):
    name = "prompt"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("tedit.modes.prompt")
        self._registry = require_keymap_registry(context)

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        prompt_state(self.context)["text"] = ""

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self.context.extras.pop("prompt_state", None)

    @property
    def text(self) -> str:
        return str(prompt_state(self.context)["text"])

    def footer_text(self) -> Optional[str]:
        state = prompt_state(self.context)
        return str(state["label"]).format(state["text"])

    def handle_key(self, command: Command) -> ModeResult:
        match = self._registry.resolve(self.name, command.token)
        if match is None:
            self.logger.debug(f"no {self.name} binding for {command.token}")
            return ModeResult(consumed=False, status="miss")
        return execute_match(self.context, match, command)
