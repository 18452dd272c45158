"""Shared state and the ``Mode`` base class.

A mode turns one ``Command`` into a ``ModeResult``. Everything it may touch
for the turn lives on ``ModeContext``; signals that other parts of the
session react to (the prompt finishing, for instance) travel over ``ModeBus``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from tedit.buffer import CursorModel, TextBuffer
from tedit.config import EditorSettings
from tedit.input import Command
from tedit.view import StatusMessage, Viewport

Listener = Callable[[object], None]


@dataclass(slots=True)
class ModeResult:
    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Synchronous publish/subscribe keyed by event name."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def subscribe(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def emit(self, event: str, payload: object | None = None) -> None:
        for listener in tuple(self._listeners.get(event, ())):
            listener(payload)


@dataclass(slots=True)
class ModeContext:
    """The session's editing state as seen by modes and actions."""

    buffer: TextBuffer
    cursor: CursorModel
    viewport: Viewport
    status: StatusMessage
    bus: ModeBus
    settings: EditorSettings = field(default_factory=EditorSettings)
    extras: Dict[str, object] = field(default_factory=dict)
    quit_requested: bool = False


class Mode:
    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:
        """Called when the keyboard moves here from ``previous``."""

    def on_exit(self, next_mode: Optional[str]) -> None:
        """Called before the keyboard moves on to ``next_mode``."""

    def footer_text(self) -> Optional[str]:
        """Message-bar text owned by this mode; ``None`` leaves it to the session."""

        return None

    def handle_key(self, command: Command) -> ModeResult:  # pragma: no cover - abstract
        raise NotImplementedError


__all__ = ["ModeResult", "ModeBus", "ModeContext", "Mode"]
