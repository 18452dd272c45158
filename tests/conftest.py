from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

from tedit.buffer import CursorModel, TextBuffer
from tedit.config import EditorSettings
from tedit.modes import ModeBus, ModeContext
from tedit.terminal import TerminalSize
from tedit.view import StatusMessage, Viewport


class FakeTerminal:
    """Scripted terminal: blocking reads pop the next chunk, timed reads see silence."""

    def __init__(
        self,
        chunks: Iterable[bytes] = (),
        *,
        size: TerminalSize = TerminalSize(columns=80, rows=24),
    ) -> None:
        self.chunks: List[bytes] = list(chunks)
        self.frames: List[bytes] = []
        self._size = size
        self.entered = False
        self.exited = False

    @contextmanager
    def session(self) -> Iterator[None]:
        self.entered = True
        try:
            yield
        finally:
            self.exited = True

    def read(self, timeout: Optional[float] = None) -> bytes:
        if timeout is not None or not self.chunks:
            return b""
        return self.chunks.pop(0)

    def write(self, data: bytes) -> None:
        self.frames.append(data)

    def size(self) -> TerminalSize:
        return self._size


def make_context(
    buffer: Optional[TextBuffer] = None,
    *,
    settings: Optional[EditorSettings] = None,
) -> ModeContext:
    settings = settings or EditorSettings()
    return ModeContext(
        buffer=buffer or TextBuffer(),
        cursor=CursorModel(),
        viewport=Viewport(),
        status=StatusMessage(settings.status_timeout_s),
        bus=ModeBus(),
        settings=settings,
    )
