"""Diagnostics for the editor, routed through telelog.

The editor paints the whole terminal, so a log line on stdout would corrupt
the screen. Console output therefore stays off unless ``TEDIT_LOG_CONSOLE``
is set; the normal sink is a file named by ``TEDIT_LOG_FILE`` or
``--log-file``.

``configure(...)`` -- install settings (explicit config, preset, or env)
``get_logger(name)`` -- cached telelog logger under the active settings
``record_event(name, ...)`` -- one structured ``event::<name>`` record
``span(name, ...)`` -- profile a block, optionally as a tracked component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TEDIT_"
DEFAULT_LOGGER_NAME = "tedit"
_TRUTHY = {"1", "true", "yes", "on"}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


@dataclass(frozen=True, slots=True)
class LogSettings:
    """Where diagnostics go and how much of them."""

    level: str = "INFO"
    log_file: Optional[str] = None
    console: bool = False
    colored: bool = True
    json: bool = False
    buffered: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LogSettings":
        env = os.environ if environ is None else environ

        def flag(key: str) -> bool:
            return env.get(f"{ENV_PREFIX}{key}", "").lower() in _TRUTHY

        return cls(
            level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO"),
            log_file=env.get(f"{ENV_PREFIX}LOG_FILE") or None,
            console=flag("LOG_CONSOLE"),
            colored=not flag("NO_COLOR"),
            json=flag("LOG_JSON"),
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level.upper())
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
        return config


def _preset(name: str, environ: Optional[Mapping[str, str]] = None) -> LogSettings:
    base = LogSettings.from_env(environ)
    key = name.lower()
    if key == "development":
        return replace(
            base, level="DEBUG", log_file=base.log_file or "tedit-debug.log"
        )
    if key == "production":
        return replace(base, level="WARNING", buffered=base.log_file is not None)
    raise ValueError(f"Unknown preset '{name}'.")


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    log_file: Optional[str] = None,
    level: Optional[str] = None,
) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    Parameters
    ----------
    config:
        A ready ``telelog.Config``; used as-is.
    preset:
        ``"development"`` (DEBUG to ``tedit-debug.log``) or ``"production"``
        (WARNING and above). Mutually exclusive with ``config``.
    log_file, level:
        Overrides applied on top of the environment (``--log-file`` and
        ``--log-level`` arrive here).
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if config is None:
        settings = _preset(preset) if preset else LogSettings.from_env()
        if log_file:
            settings = replace(settings, log_file=log_file)
        if level:
            settings = replace(settings, level=level)
        config = settings.to_config()

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` called ``name``."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = LogSettings.from_env().to_config()
    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _emit(log: Any, level: str, message: str, payload: Mapping[str, Any]) -> None:
    """Write ``message`` with ``payload`` via ``<level>_with`` when telelog has it."""

    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(key), _text(value)) for key, value in payload.items()])
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(payload)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by ``span``; lets the block annotate or fail the span."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def _logger_context(log: Any, values: Mapping[str, str]) -> Iterator[None]:
    for key, value in values.items():
        log.add_context(key, value)
    try:
        yield
    finally:
        for key in values:
            log.remove_context(key)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``.

    ``component=True`` also tracks it as a component named ``name``; a string
    names the component. ``metadata`` is bound as logger context while the
    block runs. An exception escaping the block is logged and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata=dict(context),
    )

    with ExitStack() as stack:
        stack.enter_context(_logger_context(log, context))
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


configure()
logger = get_logger()

__all__ = [
    "LogSettings",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
