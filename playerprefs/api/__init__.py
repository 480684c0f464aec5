"""Public prefs API contracts."""

from playerprefs.api.errors import (
    NotInitializedError,
    PrefsError,
    PrefsStoreCorruptedError,
    QueueEmptyError,
    QueueFullError,
)
from playerprefs.api.logging import (
    JsonFormatter,
    PrefsLoggingConfig,
    configure_logging,
    event_fields,
    get_logger,
)
from playerprefs.api.queue import create_prefs_queue
from playerprefs.api.store import (
    PrefsEntry,
    PrefsScalar,
    PrefsStore,
    PrefsValueKind,
    create_prefs_store,
    get_prefs_store,
    reset_prefs_store,
    set_prefs_store,
)
from playerprefs.api.values import PrefsValue

__all__ = [
    "JsonFormatter",
    "NotInitializedError",
    "PrefsEntry",
    "PrefsError",
    "PrefsLoggingConfig",
    "PrefsScalar",
    "PrefsStore",
    "PrefsStoreCorruptedError",
    "PrefsValue",
    "PrefsValueKind",
    "QueueEmptyError",
    "QueueFullError",
    "configure_logging",
    "event_fields",
    "create_prefs_queue",
    "create_prefs_store",
    "get_logger",
    "get_prefs_store",
    "reset_prefs_store",
    "set_prefs_store",
]
