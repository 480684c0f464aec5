from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from playerprefs.api.logging import (
    JsonFormatter,
    PrefsLoggingConfig,
    configure_logging,
    event_fields,
    get_logger,
)
from playerprefs.runtime.config import load_prefs_config, set_prefs_config
from playerprefs.runtime.logging import (
    PREFS_LOGGER_NAME,
    configure_prefs_logging,
    setup_prefs_logging,
    stop_prefs_logging,
)


def _record(msg: str, *args: object, **extra: object) -> logging.LogRecord:
    logger = logging.getLogger("playerprefs.test")
    return logger.makeRecord(logger.name, logging.INFO, __file__, 1, msg, args, None, extra=extra or None)


@contextmanager
def _bare_root() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    root.handlers.clear()
    try:
        yield root
    finally:
        stop_prefs_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)


def test_event_fields_pairs_keys_with_arguments() -> None:
    event, fields = event_fields(_record("prefs_queue_enqueue prefix=%s slot=%d count=%d", "outbox", 2, 3))

    assert event == "prefs_queue_enqueue"
    assert fields == {"prefix": "outbox", "slot": 2, "count": 3}


def test_event_fields_ignores_free_text() -> None:
    assert event_fields(_record("Hello %s", "world")) == (None, {})
    assert event_fields(_record("prefs_note %s and more", "x")) == ("prefs_note", {})


def test_json_formatter_emits_event_fields_and_extras() -> None:
    payload = json.loads(
        JsonFormatter().format(_record("prefs_store_saved path=%s keys=%d", Path("/tmp/p.json"), 2, source="cli"))
    )

    assert payload["event"] == "prefs_store_saved"
    assert payload["msg"] == "prefs_store_saved path=/tmp/p.json keys=2"
    assert payload["fields"] == {"path": "/tmp/p.json", "keys": 2, "source": "cli"}
    assert payload["logger"] == "playerprefs.test"


def test_get_logger_stays_in_prefs_namespace() -> None:
    assert get_logger("playerprefs.queue").name == "playerprefs.queue"
    assert get_logger("tools.prefs_inspector").name == "playerprefs.tools.prefs_inspector"


def test_setup_prefs_logging_uses_config_when_unconfigured(tmp_path) -> None:
    set_prefs_config(
        load_prefs_config(env={"PLAYERPREFS_DATA_DIR": str(tmp_path), "PLAYERPREFS_LOG_LEVEL": "DEBUG"})
    )

    with _bare_root() as root:
        assert setup_prefs_logging() is True

        prefs_logger = logging.getLogger(PREFS_LOGGER_NAME)
        assert prefs_logger.handlers
        assert prefs_logger.level == logging.DEBUG
        assert prefs_logger.propagate is False
        assert root.handlers == []


def test_setup_prefs_logging_defers_to_existing_root_handlers() -> None:
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        assert setup_prefs_logging() is False
        assert logging.getLogger(PREFS_LOGGER_NAME).handlers == []
    finally:
        root.removeHandler(sentinel)


def test_stop_prefs_logging_restores_propagation() -> None:
    configured = configure_logging(PrefsLoggingConfig(level_name="warning"))
    assert configured.name == PREFS_LOGGER_NAME
    assert configured.level == logging.WARNING
    stop_prefs_logging()

    prefs_logger = logging.getLogger(PREFS_LOGGER_NAME)
    assert prefs_logger.handlers == []
    assert prefs_logger.propagate is True
    assert prefs_logger.level == logging.NOTSET


def test_configure_prefs_logging_streams_json_to_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "prefs.jsonl"
    try:
        configure_prefs_logging(PrefsLoggingConfig(level_name="INFO", file_path=str(log_file)))
        logging.getLogger("playerprefs.store").info("prefs_store_saved keys=%d", 2)
        logging.getLogger("other.library").info("unrelated")
    finally:
        stop_prefs_logging()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["event"] == "prefs_store_saved"
    assert payload["fields"] == {"keys": 2}
