"""Public prefs logging API.

Prefs modules log snake_case events with `key=value` arguments, for example
`logger.debug("prefs_queue_enqueue prefix=%s slot=%d count=%d", ...)`.
`JsonFormatter` turns such a record into one JSON line with the event name and
its typed fields.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime

from playerprefs.store.json_codec import dumps_text

_EVENT_NAME = re.compile(r"[a-z][a-z0-9_]*")
_EVENT_FIELD = re.compile(r"([a-z][a-z0-9_]*)=%[sdrf]")
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


@dataclass(frozen=True, slots=True)
class PrefsLoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def event_fields(record: logging.LogRecord) -> tuple[str | None, dict[str, object]]:
    """Split a `event key=%s ...` record into its event name and field values."""
    head, _, tail = str(record.msg).partition(" ")
    if not _EVENT_NAME.fullmatch(head):
        return None, {}
    args = record.args if isinstance(record.args, tuple) else ()
    tokens = tail.split()
    matches = [_EVENT_FIELD.fullmatch(token) for token in tokens]
    if len(tokens) != len(args) or not all(matches):
        return head, {}
    return head, {match.group(1): value for match, value in zip(matches, args) if match is not None}


class JsonFormatter(logging.Formatter):
    """One JSON object per record: event name, rendered message and fields.

    Fields come from the event's `key=value` arguments and from `extra`.
    """

    def format(self, record: logging.LogRecord) -> str:
        event, fields = event_fields(record)
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }
        if event is not None:
            payload["event"] = event
        payload["msg"] = record.getMessage()
        fields.update((k, v) for k, v in vars(record).items() if k not in _RECORD_ATTRIBUTES)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the `playerprefs` namespace."""
    if name == "playerprefs" or name.startswith("playerprefs."):
        return logging.getLogger(name)
    return logging.getLogger(f"playerprefs.{name}")


def configure_logging(config: PrefsLoggingConfig) -> logging.Logger:
    """Configure the `playerprefs` logger through the prefs logging pipeline."""
    from playerprefs.runtime.logging import configure_prefs_logging

    return configure_prefs_logging(config)


__all__ = ["JsonFormatter", "PrefsLoggingConfig", "configure_logging", "event_fields", "get_logger"]
