"""Structured logging and profiling on top of telelog.

Callers use four functions:

``configure(...)`` -- install a preset or an explicit ``telelog.Config``
``get_logger(name)`` -- cached logger bound to the active configuration
``record_event(name, ...)`` -- one ``event::<name>`` record with key/value data
``span(name, ...)`` -- profile a block, optionally as a tracked component
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

from .settings import env, env_flag, env_int

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = env("LOGGER") or "vim_drill"

# Option names map onto ``Config.with_<name>`` builder calls.
_PRESETS: Dict[str, Dict[str, Any]] = {
    "development": {
        "min_level": "DEBUG",
        "console_output": True,
        "colored_output": True,
        "json_format": False,
    },
    "production": {
        "min_level": "INFO",
        "console_output": False,
        "file_output": "vim_drill.log",
        "buffering": True,
    },
    "performance": {
        "min_level": "DEBUG",
        "console_output": False,
        "json_format": True,
        "buffering": True,
        "file_output": "vim_drill-performance.log",
    },
}

_loggers: MutableMapping[str, Any] = {}
_active_config: Optional[Any] = None


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _build(options: Mapping[str, Any]) -> Any:
    config = tl.Config()
    for option, value in options.items():
        getattr(config, f"with_{option}")(value)
    # Spans rely on ``logger.profile``.
    config.with_profiling(True)
    return config


def _preset_options(preset: str) -> Dict[str, Any]:
    try:
        options = dict(_PRESETS[preset.lower()])
    except KeyError:
        raise ValueError(f"Unknown preset '{preset}'.") from None
    log_file = env("LOG_FILE")
    if log_file and "file_output" in options:
        options["file_output"] = log_file
    return options


def _env_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "min_level": (env("LOG_LEVEL") or "INFO").upper(),
        # Console output would draw over the Textual screen, so it is opt-in.
        "console_output": env_flag("LOG_CONSOLE", False),
    }
    if options["console_output"]:
        options["colored_output"] = not env_flag("NO_COLOR", False)
    if env_flag("LOG_JSON", False):
        options["json_format"] = True
    log_file = env("LOG_FILE")
    if log_file:
        options["file_output"] = log_file
    if env_flag("LOG_BUFFERED", False):
        options["buffering"] = True
        options["buffer_size"] = env_int("LOG_BUFFER_SIZE", 2048)
    return options


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active configuration and drop cached loggers.

    With no arguments the configuration is rebuilt from the ``VIM_DRILL_*``
    environment. ``preset`` is one of ``"development"``, ``"production"`` or
    ``"performance"``; passing both ``config`` and ``preset`` is an error.
    """

    global _active_config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        _active_config = _build(_preset_options(preset))
    elif config is not None:
        config.with_profiling(True)
        _active_config = config
    else:
        _active_config = _build(_env_options())
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _active_config
    if _active_config is None:
        _active_config = _build(_env_options())
    key = name or DEFAULT_LOGGER_NAME
    logger = _loggers.get(key)
    if logger is None:
        logger = _loggers[key] = tl.Logger.with_config(key, _active_config)
    return logger


def _log(logger: Any, level: str, message: str, data: Mapping[str, Any]) -> None:
    """Write ``message`` with ``data`` through the richest level method available."""

    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in data.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(data)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    payload = {"event": name, **(data or {})}
    _log(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach results before the block ends."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        data: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            data["component"] = self.component
        _log(self.logger, "error", "span::fail", data)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the enclosed block as ``name``.

    ``component=True`` also tracks the block as a component called ``name``;
    a string names the component explicitly. ``metadata`` is added to the
    logger context for the duration of the block. An exception escaping the
    block is logged as ``span::fail`` and re-raised.
    """

    logger = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(logger, name, component_name, dict(context))

    with ExitStack() as stack:
        for key, value in context.items():
            logger.add_context(key, value)
            stack.callback(logger.remove_context, key)
        if component_name:
            stack.enter_context(logger.track_component(component_name))
        stack.enter_context(logger.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


configure()
logger = get_logger()

__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "logger",
    "record_event",
    "span",
]
