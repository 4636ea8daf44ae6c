"""Telelog wiring for the tracking algebra.

Trackers report two things: ``tracking::split`` spans, profiled and tracked
as the ``tracking`` component, and ``positioned::rebase`` debug events. Both
go through loggers built from a telelog config read from ``POSITIONED_*``
environment variables:

``LOGGER``           default logger name (``positioned``)
``LOG_LEVEL``        minimum level (``INFO``)
``LOG_FILE``         also write to this file
``LOG_JSON``         JSON records instead of text
``DISABLE_CONSOLE``  no console output
``NO_COLOR``         plain console output

Span fields travel with the emitted events and are never pushed onto the
shared loggers, so concurrent spans do not see each other's data.
"""

from __future__ import annotations

import os
import threading
from contextlib import ExitStack, contextmanager
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "POSITIONED_"
_TRUTHY = frozenset({"1", "true", "yes", "on"})

_lock = threading.Lock()
_config: Optional[Any] = None
_loggers: Dict[str, Any] = {}


def env_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool = False) -> bool:
    raw = env_setting(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def build_config() -> Any:
    """Telelog config described by the ``POSITIONED_*`` environment."""

    config = tl.Config()
    config.with_min_level((env_setting("LOG_LEVEL") or "INFO").upper())

    console = not env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not env_flag("NO_COLOR"))
    config.with_json_format(env_flag("LOG_JSON"))

    log_file = env_setting("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    config.with_profiling(True)
    return config


def configure(config: Optional[Any] = None) -> None:
    """Install ``config``, or a fresh environment config, for new loggers.

    Loggers handed out earlier are dropped from the cache.
    """

    global _config
    with _lock:
        _config = config if config is not None else build_config()
        _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _config
    logger_name = name or env_setting("LOGGER") or "positioned"
    with _lock:
        if _config is None:
            _config = build_config()
        if logger_name not in _loggers:
            _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
        return _loggers[logger_name]


def _fields(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [
        (str(key), value if isinstance(value, str) else repr(value))
        for key, value in data.items()
    ]


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as structured fields."""

    emit = getattr(get_logger(logger_name), f"{level.lower()}_with", None)
    if emit is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    emit(f"event::{name}", _fields({"event": name, **(data or {})}))


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[Dict[str, Any]]:
    """Profile the enclosed block as ``name``.

    Yields a dict private to this call; whatever the block puts in it is
    logged with the ``name`` event when the block ends, or with
    ``<name>::failed`` and the error text when it raises.
    """

    log = get_logger(logger_name)
    fields: Dict[str, Any] = dict(data or {})
    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield fields
        except Exception as exc:
            record_event(
                f"{name}::failed",
                level="error",
                data={**fields, "error": str(exc)},
                logger_name=logger_name,
            )
            raise
    record_event(name, level="debug", data=fields, logger_name=logger_name)


__all__ = [
    "ENV_PREFIX",
    "build_config",
    "configure",
    "env_flag",
    "env_setting",
    "get_logger",
    "record_event",
    "span",
]
