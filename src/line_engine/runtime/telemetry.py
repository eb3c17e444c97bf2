"""Telemetry services built directly on telelog.

The engine logs exclusively through this module:

``configure(...)`` -- adopt a preset, a profile or a raw telelog config
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured ``event::<name>`` record
``span(name, ...)`` -- profile a block, optionally tracked as a component

Editing happens while the host terminal is in raw mode, so console output
is off unless ``LINE_ENGINE_CONSOLE`` asks for it.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "LINE_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "line_engine")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


@dataclass(frozen=True, slots=True)
class LogProfile:
    """Declarative description of a telelog configuration."""

    min_level: str = "WARNING"
    console: bool = False
    colored: bool = True
    json: bool = False
    log_file: Optional[str] = None
    buffered: bool = False
    buffer_size: Optional[int] = None

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.min_level.upper())
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
            if self.buffer_size:
                config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LogProfile":
        source = os.environ if environ is None else environ

        def flag(name: str) -> bool:
            raw = source.get(f"{ENV_PREFIX}{name}")
            return raw is not None and raw.lower() in {"1", "true", "yes", "on"}

        buffer_size = source.get(f"{ENV_PREFIX}LOG_BUFFER_SIZE")
        return cls(
            min_level=source.get(f"{ENV_PREFIX}LOG_LEVEL", "WARNING"),
            console=flag("CONSOLE") and not flag("DISABLE_CONSOLE"),
            colored=not flag("NO_COLOR"),
            json=flag("LOG_JSON"),
            log_file=source.get(f"{ENV_PREFIX}LOG_FILE") or None,
            buffered=flag("LOG_BUFFERED"),
            buffer_size=int(buffer_size) if buffer_size else None,
        )


PRESETS: Mapping[str, LogProfile] = {
    "development": LogProfile(min_level="DEBUG", console=True),
    "production": LogProfile(
        min_level="INFO", log_file="line_engine.log", buffered=True
    ),
    "performance": LogProfile(
        min_level="DEBUG",
        json=True,
        log_file="line_engine-performance.log",
        buffered=True,
    ),
}


def preset_profile(name: str) -> LogProfile:
    try:
        profile = PRESETS[name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown preset '{name}'.") from exc
    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if log_file and profile.log_file:
        profile = replace(profile, log_file=log_file)
    return profile


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    profile: Optional[LogProfile] = None,
) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    At most one of ``config`` (a raw ``telelog.Config``), ``preset`` (a key
    of ``PRESETS``) or ``profile`` may be given; with none of them the
    profile is read from ``LINE_ENGINE_*`` environment variables.
    """

    global _ACTIVE_CONFIG
    if sum(option is not None for option in (config, preset, profile)) > 1:
        raise ValueError("Provide only one of `config`, `preset` or `profile`.")

    if preset is not None:
        config = preset_profile(preset).build()
    elif profile is not None:
        config = profile.build()
    elif config is None:
        config = LogProfile.from_env().build()
    else:
        config.with_profiling(True)

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active configuration."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = LogProfile.from_env().build()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for attaching metadata to failures."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``.

    ``component=True`` tracks the block as a component of the same name; a
    string tracks it under that component instead. ``metadata`` is attached
    as logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(context),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context:
                log.remove_context(key)


configure()

__all__ = [
    "LogProfile",
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "preset_profile",
    "record_event",
    "span",
]
