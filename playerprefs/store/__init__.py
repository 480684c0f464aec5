"""Prefs store implementations."""

from playerprefs.store.json_file import PREFS_FILE_SCHEMA_VERSION, JsonFilePrefsStore
from playerprefs.store.memory import InMemoryPrefsStore

__all__ = ["InMemoryPrefsStore", "JsonFilePrefsStore", "PREFS_FILE_SCHEMA_VERSION"]
