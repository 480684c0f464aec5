"""Process-wide default prefs store."""

from __future__ import annotations

import logging
import threading

from playerprefs.api.store import PrefsStore, create_prefs_store
from playerprefs.runtime.config import get_prefs_config

logger = logging.getLogger(__name__)

# Shared by every thread and task; a store rewrites its whole file on save, so
# two instances over one file would drop each other's writes.
_DEFAULT_STORE: PrefsStore | None = None
_DEFAULT_STORE_LOCK = threading.Lock()


def get_default_store() -> PrefsStore:
    global _DEFAULT_STORE

    store = _DEFAULT_STORE
    if store is not None:
        return store
    with _DEFAULT_STORE_LOCK:
        if _DEFAULT_STORE is None:
            config = get_prefs_config().store
            _DEFAULT_STORE = create_prefs_store(
                backend=config.backend,
                path=config.file_path,
                autosave=config.autosave,
            )
            logger.info("prefs_default_store backend=%s path=%s", config.backend, config.file_path)
        return _DEFAULT_STORE


def set_default_store(store: PrefsStore) -> PrefsStore:
    global _DEFAULT_STORE

    with _DEFAULT_STORE_LOCK:
        _DEFAULT_STORE = store
    return store


def reset_default_store() -> None:
    global _DEFAULT_STORE

    with _DEFAULT_STORE_LOCK:
        _DEFAULT_STORE = None
