"""Main edit loop: read, decode, dispatch, scroll, redraw."""

from __future__ import annotations

from functools import partial
from typing import Optional

from tedit.actions.session import abort_save_as, complete_save_as
from tedit.buffer import CursorModel, TextBuffer
from tedit.config import EditorSettings
from tedit.input import Command, InputDecoder
from tedit.modes import EditMode, ModeBus, ModeContext, PromptMode
from tedit.modes.mode_manager import ModeManager
from tedit.runtime import telemetry
from tedit.terminal import Terminal
from tedit.view import Renderer, StatusMessage, Viewport


class EditLoop:
    """Drives one editing session against a ``Terminal``.

    Every turn blocks for input, feeds the bytes through the decoder (waiting
    up to ``escape_timeout_ms`` for the rest of an escape sequence), dispatches
    the resulting commands to the active mode, then recomputes the viewport
    and writes a full frame. The loop ends once a command requests quit or
    the terminal reports end of input.
    """

    def __init__(
        self,
        context: ModeContext,
        manager: ModeManager,
        terminal: Terminal,
        *,
        decoder: Optional[InputDecoder] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.context = context
        self.manager = manager
        self.terminal = terminal
        self.decoder = decoder or InputDecoder()
        self.renderer = renderer or Renderer()
        self.logger = telemetry.get_logger("tedit.loop")

    def run(self) -> int:
        telemetry.record_event(
            "session.start",
            data={
                "path": self.context.buffer.path,
                "lines": self.context.buffer.line_count,
            },
        )
        self.refresh()
        while not self.context.quit_requested:
            data = self.terminal.read()
            if not data:
                self.logger.info("input closed; leaving the editor")
                self.context.quit_requested = True
                break
            for command in self._decode(data):
                self.dispatch(command)
                if self.context.quit_requested:
                    break
            if not self.context.quit_requested:
                self.refresh()
        telemetry.record_event(
            "session.end", data={"dirty": self.context.buffer.dirty}
        )
        return 0

    def dispatch(self, command: Command) -> None:
        self.manager.handle_key(command)
        self.context.cursor.clamp_to(self.context.buffer)

    def refresh(self) -> None:
        context = self.context
        context.viewport.recompute(
            context.cursor.cursor, context.buffer, self.terminal.size()
        )
        frame = self.renderer.compose(
            context.buffer,
            context.cursor.cursor,
            context.viewport,
            self.footer_message(),
        )
        self.terminal.write(frame)

    def footer_message(self) -> str:
        mode = self.manager.active_mode
        if mode is not None:
            text = mode.footer_text()
            if text is not None:
                return text
        message = self.context.status.current()
        if message is not None:
            return message
        return self.context.settings.help_message

    def _decode(self, data: bytes) -> list[Command]:
        commands = self.decoder.feed(data)
        timeout = self.context.settings.escape_timeout_ms / 1000.0
        while self.decoder.pending:
            more = self.terminal.read(timeout=timeout)
            if more:
                commands.extend(self.decoder.feed(more))
                continue
            expired = self.decoder.expire()
            if expired is not None:
                commands.append(expired)
        return commands


def create_session(
    buffer: TextBuffer,
    terminal: Terminal,
    settings: Optional[EditorSettings] = None,
) -> EditLoop:
    """Wire a buffer, modes, keymaps and the save-as prompt into an ``EditLoop``."""

    settings = settings or EditorSettings()
    context = ModeContext(
        buffer=buffer,
        cursor=CursorModel(),
        viewport=Viewport(),
        status=StatusMessage(settings.status_timeout_s),
        bus=ModeBus(),
        settings=settings,
    )
    manager = ModeManager(context)
    manager.register_mode(EditMode)
    manager.register_mode(PromptMode)
    context.bus.subscribe("prompt.submit", partial(complete_save_as, context))
    context.bus.subscribe("prompt.cancel", partial(abort_save_as, context))
    return EditLoop(context, manager, terminal)


__all__ = ["EditLoop", "create_session"]
