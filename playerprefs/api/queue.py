"""Public prefs-queue API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from playerprefs.api.store import PrefsStore

if TYPE_CHECKING:
    from playerprefs.queue.circular import PrefsQueue
    from playerprefs.values.simple import SimplePrefsValue


def create_prefs_queue[K](
    value_type: type[SimplePrefsValue[K]],
    key_prefix: str,
    length: int,
    *,
    store: PrefsStore | None = None,
) -> PrefsQueue[K]:
    """Create a persisted circular queue of `length` slots under `key_prefix`."""
    from playerprefs.queue.circular import PrefsQueue

    return PrefsQueue(value_type, key_prefix, length, store=store)


__all__ = ["create_prefs_queue"]
