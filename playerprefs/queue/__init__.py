"""Prefs-backed collections."""

from playerprefs.queue.circular import INSERT_INDEX_FULL, PrefsQueue

__all__ = ["INSERT_INDEX_FULL", "PrefsQueue"]
