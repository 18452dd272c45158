"""Terminal driver: raw mode, byte reads, and frame writes.

Raw mode is process-wide state, so ``RawTerminal.session`` is the only way in:
it saves the current termios attributes, switches to raw mode, and restores
the original attributes (and clears the screen) on every way out.
"""

from __future__ import annotations

import os
import select
import sys
import termios
from contextlib import contextmanager
from typing import ContextManager, Iterator, NamedTuple, Optional, Protocol

from tedit.runtime import telemetry

CLEAR_SCREEN = b"\x1b[2J\x1b[H"
READ_CHUNK = 1024


class TerminalError(RuntimeError):
    """The input descriptor cannot be put into raw mode (e.g. it is not a tty)."""


class TerminalSize(NamedTuple):
    columns: int
    rows: int


DEFAULT_SIZE = TerminalSize(columns=80, rows=24)


class Terminal(Protocol):
    """Interface the edit loop relies on."""

    def session(self) -> ContextManager[None]: ...

    def read(self, timeout: Optional[float] = None) -> bytes: ...

    def write(self, data: bytes) -> None: ...

    def size(self) -> TerminalSize: ...


class RawTerminal:
    """``Terminal`` backed by file descriptors, normally stdin/stdout."""

    def __init__(self, stdin_fd: Optional[int] = None, stdout_fd: Optional[int] = None) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self.logger = telemetry.get_logger("tedit.terminal")
        self._original: list | None = None

    @contextmanager
    def session(self) -> Iterator[None]:
        self._enable_raw_mode()
        try:
            yield
        finally:
            self._disable_raw_mode()
            self.write(CLEAR_SCREEN)

    def read(self, timeout: Optional[float] = None) -> bytes:
        """Block for input; with ``timeout`` return ``b""`` if none arrives."""

        if timeout is not None:
            ready, _, _ = select.select([self.stdin_fd], [], [], timeout)
            if not ready:
                return b""
        while True:
            try:
                return os.read(self.stdin_fd, READ_CHUNK)
            except InterruptedError:
                continue

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    def size(self) -> TerminalSize:
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            return DEFAULT_SIZE
        if size.columns <= 0 or size.lines <= 0:
            return DEFAULT_SIZE
        return TerminalSize(columns=size.columns, rows=size.lines)

    def _enable_raw_mode(self) -> None:
        try:
            self._original = termios.tcgetattr(self.stdin_fd)
        except termios.error as exc:
            raise TerminalError("stdin is not a terminal") from exc
        raw = termios.tcgetattr(self.stdin_fd)
        raw[0] &= ~(
            termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON
        )
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw)
        self.logger.debug("raw mode enabled")

    def _disable_raw_mode(self) -> None:
        if self._original is None:
            return
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._original)
        self._original = None
        self.logger.debug("raw mode restored")


__all__ = ["Terminal", "TerminalError", "RawTerminal", "TerminalSize", "DEFAULT_SIZE", "CLEAR_SCREEN"]
