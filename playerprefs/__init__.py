"""Typed game-settings persistence over a flat key-value prefs store."""

from playerprefs.api import (
    NotInitializedError,
    PrefsError,
    PrefsStore,
    QueueEmptyError,
    QueueFullError,
    create_prefs_queue,
    create_prefs_store,
    get_prefs_store,
    set_prefs_store,
)
from playerprefs.queue import PrefsQueue
from playerprefs.values import (
    PrefsBool,
    PrefsDouble,
    PrefsFloat,
    PrefsInt,
    PrefsString,
    SimplePrefsValue,
)

__all__ = [
    "NotInitializedError",
    "PrefsBool",
    "PrefsDouble",
    "PrefsError",
    "PrefsFloat",
    "PrefsInt",
    "PrefsQueue",
    "PrefsStore",
    "PrefsString",
    "QueueEmptyError",
    "QueueFullError",
    "SimplePrefsValue",
    "create_prefs_queue",
    "create_prefs_store",
    "get_prefs_store",
    "set_prefs_store",
]
