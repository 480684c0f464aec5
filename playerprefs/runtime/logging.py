"""Logging pipeline for the `playerprefs` logger namespace.

Handlers attach to the `playerprefs` logger rather than the root logger, so a
host application keeps control of its own logging. A file sink is fed through
a `QueueListener` thread so store and queue calls never block on log I/O.
"""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from playerprefs.api.logging import JsonFormatter, PrefsLoggingConfig
from playerprefs.runtime.config import get_prefs_config

PREFS_LOGGER_NAME = "playerprefs"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_QUEUE_LISTENER: QueueListener | None = None
_ATTACHED: list[logging.Handler] = []
_SINKS: list[logging.Handler] = []


def configure_prefs_logging(config: PrefsLoggingConfig) -> logging.Logger:
    """Route `playerprefs.*` records to a console sink and an optional JSON file sink."""
    global _QUEUE_LISTENER

    stop_prefs_logging()
    prefs_logger = logging.getLogger(PREFS_LOGGER_NAME)
    prefs_logger.setLevel(logging.getLevelNamesMapping().get(config.level_name.strip().upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    _SINKS.append(console)
    if config.file_path:
        _SINKS.append(_file_sink(Path(config.file_path), config.file_format))

    if len(_SINKS) == 1:
        _ATTACHED.append(console)
    else:
        records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
        _ATTACHED.append(QueueHandler(records))
        _QUEUE_LISTENER = QueueListener(records, *_SINKS, respect_handler_level=True)
        _QUEUE_LISTENER.start()

    for handler in _ATTACHED:
        prefs_logger.addHandler(handler)
    prefs_logger.propagate = False
    return prefs_logger


def stop_prefs_logging() -> None:
    """Flush pending records and detach every handler installed by `configure_prefs_logging`."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None
    prefs_logger = logging.getLogger(PREFS_LOGGER_NAME)
    for handler in _ATTACHED:
        prefs_logger.removeHandler(handler)
    for handler in _SINKS:
        handler.close()
    if _ATTACHED:
        prefs_logger.propagate = True
        prefs_logger.setLevel(logging.NOTSET)
    _ATTACHED.clear()
    _SINKS.clear()


def setup_prefs_logging(*, level_name: str | None = None) -> bool:
    """Install the pipeline from prefs config unless logging is already set up.

    Returns True when handlers were installed. Nothing happens when the root
    logger or the `playerprefs` logger already has handlers.
    """
    if logging.getLogger().handlers or logging.getLogger(PREFS_LOGGER_NAME).handlers:
        return False
    log_config = get_prefs_config().log
    configure_prefs_logging(
        PrefsLoggingConfig(
            level_name=level_name or log_config.level_name,
            console_format=log_config.console_format,
            file_path=str(log_config.file_path) if log_config.file_path is not None else None,
            file_format="json",
        )
    )
    return True


def _file_sink(path: Path, kind: str) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(_formatter(kind))
    return handler


def _formatter(kind: str) -> logging.Formatter:
    return JsonFormatter() if kind.strip().lower() == "json" else logging.Formatter(_TEXT_FORMAT)


__all__ = ["PREFS_LOGGER_NAME", "configure_prefs_logging", "setup_prefs_logging", "stop_prefs_logging"]
