"""Default mode: every command goes through the keymap."""

from __future__ import annotations

from tedit.input import Command
from tedit.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, require_keymap_registry


class EditMode(Mode):
    name = "edit"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("tedit.modes.edit")
        self._registry = require_keymap_registry(context)

    def handle_key(self, command: Command) -> ModeResult:
        match = self._registry.resolve(self.name, command.token)
        if match is None:
            self.logger.debug(f"no {self.name} binding for {command.token}")
            return ModeResult(consumed=False, status="miss")
        return execute_match(self.context, match, command)
