"""File-system collaborator: load a buffer from disk and store it back."""

from __future__ import annotations

import os
from pathlib import Path

from tedit.runtime import telemetry

from .document import TextBuffer
from .errors import BufferIOError


def _describe(exc: OSError) -> str:
    return exc.strerror or exc.__class__.__name__


def open_buffer(path: str | os.PathLike[str]) -> TextBuffer:
    """Load ``path`` into a new buffer bound to it.

    A missing file yields an empty buffer bound to ``path``; any other read
    failure raises ``BufferIOError``.
    """

    target = Path(path)
    try:
        content = target.read_bytes()
    except FileNotFoundError:
        telemetry.record_event("buffer.load", data={"path": target, "new": True})
        return TextBuffer(path=target)
    except OSError as exc:
        raise BufferIOError(
            f"cannot open {target}: {_describe(exc)}", path=target
        ) from exc

    buffer = TextBuffer.from_bytes(content, path=target)
    telemetry.record_event(
        "buffer.load",
        data={"path": target, "bytes": len(content), "lines": buffer.line_count},
    )
    return buffer


def save_buffer(buffer: TextBuffer) -> int:
    """Write ``buffer`` to its path and clear the dirty flag.

    Returns the number of bytes written. The buffer is left untouched (and
    dirty) when the write fails.
    """

    if buffer.path is None:
        raise BufferIOError("no file name")

    payload = buffer.serialize()
    try:
        buffer.path.write_bytes(payload)
    except OSError as exc:
        telemetry.record_event(
            "buffer.save_failed",
            level="warning",
            data={"path": buffer.path, "reason": _describe(exc)},
        )
        raise BufferIOError(
            f"I/O error: {_describe(exc)}", path=buffer.path
        ) from exc

    buffer.mark_clean()
    telemetry.record_event(
        "buffer.save", data={"path": buffer.path, "bytes": len(payload)}
    )
    return len(payload)


__all__ = ["open_buffer", "save_buffer"]
