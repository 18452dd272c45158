"""Raw key bytes to logical commands."""

from .commands import Command, CommandKind
from .decoder import DecoderState, InputDecoder

__all__ = ["Command", "CommandKind", "DecoderState", "InputDecoder"]
