"""Two-state decoder turning raw terminal bytes into ``Command`` values.

``NORMAL`` classifies single bytes. The escape byte switches to ``ESCAPE``,
which accumulates a CSI (``ESC [``) or SS3 (``ESC O``) sequence until a final
byte arrives and is looked up in ``SEQUENCES``. Anything unrecognised is
dropped; it never leaks through as literal text.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from tedit.runtime import telemetry

from .commands import Command, CommandKind

ESC = 0x1B
BACKSPACE = 0x7F
CTRL_H = 0x08
TAB = 0x09
LINE_FEED = 0x0A
CARRIAGE_RETURN = 0x0D

CSI = ord("[")
SS3 = ord("O")

# CSI sequences never need more than a handful of parameter bytes here.
MAX_SEQUENCE_LENGTH = 16

SEQUENCES: Dict[bytes, Command] = {
    b"[A": Command(CommandKind.ARROW_UP),
    b"[B": Command(CommandKind.ARROW_DOWN),
    b"[C": Command(CommandKind.ARROW_RIGHT),
    b"[D": Command(CommandKind.ARROW_LEFT),
    b"OA": Command(CommandKind.ARROW_UP),
    b"OB": Command(CommandKind.ARROW_DOWN),
    b"OC": Command(CommandKind.ARROW_RIGHT),
    b"OD": Command(CommandKind.ARROW_LEFT),
    b"[H": Command(CommandKind.HOME),
    b"OH": Command(CommandKind.HOME),
    b"[1~": Command(CommandKind.HOME),
    b"[7~": Command(CommandKind.HOME),
    b"[F": Command(CommandKind.END),
    b"OF": Command(CommandKind.END),
    b"[4~": Command(CommandKind.END),
    b"[8~": Command(CommandKind.END),
    b"[3~": Command(CommandKind.DELETE_FORWARD),
    b"[5~": Command(CommandKind.PAGE_UP),
    b"[6~": Command(CommandKind.PAGE_DOWN),
    b"[1;5A": Command(CommandKind.ARROW_UP, modifiers=("ctrl",)),
    b"[1;5B": Command(CommandKind.ARROW_DOWN, modifiers=("ctrl",)),
}


class DecoderState(str, Enum):
    NORMAL = "normal"
    ESCAPE = "escape"


class InputDecoder:
    """Stateful byte classifier; feed it whatever the terminal returned."""

    def __init__(self) -> None:
        self.logger = telemetry.get_logger("tedit.input")
        self._state = DecoderState.NORMAL
        self._partial = bytearray()

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def pending(self) -> bool:
        """``True`` while an escape sequence is still open."""

        return self._state is DecoderState.ESCAPE

    def feed(self, data: bytes) -> List[Command]:
        commands: List[Command] = []
        for byte in data:
            command = self.feed_byte(byte)
            if command is not None:
                commands.append(command)
        return commands

    def feed_byte(self, byte: int) -> Optional[Command]:
        if self._state is DecoderState.ESCAPE:
            return self._feed_escape(byte)
        return self._feed_normal(byte)

    def expire(self) -> Optional[Command]:
        """Resolve an open sequence after the terminal went quiet.

        A bare escape byte becomes ``ESCAPE``; a half-read sequence is dropped.
        """

        if self._state is not DecoderState.ESCAPE:
            return None
        bare = not self._partial
        if not bare:
            self._discard("timeout")
        self._reset()
        return Command(CommandKind.ESCAPE) if bare else None

    def _feed_normal(self, byte: int) -> Optional[Command]:
        if byte == ESC:
            self._state = DecoderState.ESCAPE
            self._partial.clear()
            return None
        if byte in (CARRIAGE_RETURN, LINE_FEED):
            return Command(CommandKind.INSERT_NEWLINE)
        if byte == TAB:
            return Command(CommandKind.INSERT_TAB)
        if byte in (BACKSPACE, CTRL_H):
            return Command(CommandKind.DELETE_BACKWARD)
        if 0x20 <= byte <= 0x7E:
            return Command.insert(chr(byte))
        if 0x01 <= byte <= 0x1A:
            return Command.ctrl(chr(byte + 0x60))
        return None

    def _feed_escape(self, byte: int) -> Optional[Command]:
        if not self._partial:
            if byte == ESC:
                # Escape pressed twice: the first one stands on its own.
                return Command(CommandKind.ESCAPE)
            if byte in (CSI, SS3):
                self._partial.append(byte)
                return None
            self._partial.append(byte)
            self._discard("alt")
            self._reset()
            return None

        self._partial.append(byte)
        introducer = self._partial[0]
        if introducer == SS3 or 0x40 <= byte <= 0x7E:
            return self._complete()
        if 0x20 <= byte <= 0x3F and len(self._partial) < MAX_SEQUENCE_LENGTH:
            return None
        self._discard("malformed")
        self._reset()
        return None

    def _complete(self) -> Optional[Command]:
        sequence = bytes(self._partial)
        command = SEQUENCES.get(sequence)
        if command is None:
            self._discard("unknown")
        self._reset()
        return command

    def _discard(self, reason: str) -> None:
        self.logger.debug(f"discarded escape sequence {bytes(self._partial)!r} ({reason})")

    def _reset(self) -> None:
        self._state = DecoderState.NORMAL
        self._partial.clear()


__all__ = ["InputDecoder", "DecoderState", "SEQUENCES"]
