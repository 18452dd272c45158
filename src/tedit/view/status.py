"""Transient status-line message."""

from __future__ import annotations

import time
from typing import Callable, Optional


class StatusMessage:
    """Message shown in the footer until it is ``timeout_s`` seconds old."""

    def __init__(
        self,
        timeout_s: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.timeout_s = timeout_s
        self._clock = clock
        self._text: Optional[str] = None
        self._set_at: Optional[float] = None

    def set(self, text: str) -> None:
        self._text = text
        self._set_at = self._clock()

    def clear(self) -> None:
        self._text = None
        self._set_at = None

    def current(self) -> Optional[str]:
        if self._text is None or self._set_at is None:
            return None
        if self._clock() - self._set_at > self.timeout_s:
            self.clear()
            return None
        return self._text


__all__ = ["StatusMessage"]
