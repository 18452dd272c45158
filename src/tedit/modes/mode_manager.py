"""Routes decoded commands to whichever mode currently owns the keyboard."""

from __future__ import annotations

from typing import Dict, Optional, Type

from tedit.input import Command
from tedit.keymaps import KeymapRegistry, load_default_keymaps
from tedit.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult


class ModeManager:
    """Holds the registered modes and the name of the active one.

    The first registered mode becomes active. A ``ModeResult`` carrying
    ``switch_to`` moves the keyboard to that mode after the handler returns,
    running ``on_exit`` on the old mode before ``on_enter`` on the new one.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self.logger = telemetry.get_logger("tedit.modes")
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None

        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name="tedit.keymaps")
            if load_defaults:
                load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry
        context.extras.setdefault("keymap_registry", keymap_registry)
        context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._modes.get(self._active) if self._active else None

    @property
    def mode_names(self) -> tuple[str, ...]:
        return tuple(self._modes)

    def register_mode(self, mode_cls: Type[Mode], /, **mode_kwargs: object) -> Mode:
        mode = mode_cls(self.context, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        target = self._modes.get(name)
        if target is None:
            raise KeyError(f"Unknown mode '{name}'")
        current = self.active_mode
        if current is target:
            return
        previous_name = current.name if current else None
        if current is not None:
            current.on_exit(name)
        self._active = name
        target.on_enter(previous_name)
        self.logger.debug(f"keyboard moved from {previous_name} to {name}")
        telemetry.record_event(
            "mode.switch", level="debug", data={"from": previous_name, "to": name}
        )

    def handle_key(self, command: Command) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"token": command.token, "mode": mode.name},
        ) as handle:
            result = mode.handle_key(command)
            handle.add_metadata("status", result.status)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["ModeManager"]
