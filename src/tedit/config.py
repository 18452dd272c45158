"""Editor settings and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "TEDIT_"

DEFAULT_HELP_MESSAGE = (
    "HELP: Ctrl-S save | Ctrl-Q quit | Ctrl-A/Ctrl-D line start/end"
    " | Ctrl-Up/Down page"
)
SAVE_AS_PROMPT = "Save as: {} (ENTER to save | ESC to cancel)"


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Tunables for a single editing session."""

    status_timeout_s: float = 300.0
    escape_timeout_ms: int = 50
    help_message: str = DEFAULT_HELP_MESSAGE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            status_timeout_s=_env_float(
                env, "STATUS_TIMEOUT", defaults.status_timeout_s
            ),
            escape_timeout_ms=_env_int(
                env, "ESCAPE_TIMEOUT_MS", defaults.escape_timeout_ms
            ),
            help_message=env.get(f"{ENV_PREFIX}HELP", defaults.help_message),
        )


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


def _env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = float(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


__all__ = ["EditorSettings", "DEFAULT_HELP_MESSAGE", "SAVE_AS_PROMPT"]
