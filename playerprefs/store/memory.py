"""In-process prefs store."""

from __future__ import annotations

from collections.abc import Mapping

from playerprefs.api.store import PrefsEntry, PrefsScalar, PrefsStore, PrefsValueKind
from playerprefs.store.numeric import to_float32, to_int32


class InMemoryPrefsStore(PrefsStore):
    """Prefs store that keeps every entry in a process-local dict.

    Subclasses persist through `_commit`, which runs after every mutation. A
    mutation whose commit raises is undone before the error propagates.
    """

    def __init__(self, entries: dict[str, PrefsEntry] | None = None) -> None:
        self._entries: dict[str, PrefsEntry] = dict(entries or {})

    def get_int(self, key: str, default: int = 0) -> int:
        return int(self._typed(key, PrefsValueKind.INT, default))

    def set_int(self, key: str, value: int) -> None:
        self._put(key, PrefsEntry(PrefsValueKind.INT, to_int32(value)))

    def get_float(self, key: str, default: float = 0.0) -> float:
        return float(self._typed(key, PrefsValueKind.FLOAT, default))

    def set_float(self, key: str, value: float) -> None:
        self._put(key, PrefsEntry(PrefsValueKind.FLOAT, to_float32(value)))

    def get_string(self, key: str, default: str = "") -> str:
        return str(self._typed(key, PrefsValueKind.STRING, default))

    def set_string(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")
        self._put(key, PrefsEntry(PrefsValueKind.STRING, value))

    def has_key(self, key: str) -> bool:
        return _validate_key(key) in self._entries

    def delete_key(self, key: str) -> None:
        key = _validate_key(key)
        previous = self._entries.pop(key, None)
        if previous is not None:
            self._commit_or_restore({key: previous})

    def delete_all(self) -> None:
        previous = dict(self._entries)
        self._entries.clear()
        self._commit_or_restore(previous)

    def keys(self) -> tuple[str, ...]:
        return tuple(sorted(self._entries))

    def entry(self, key: str) -> PrefsEntry | None:
        return self._entries.get(_validate_key(key))

    def save(self) -> None:
        return None

    def _typed(self, key: str, kind: PrefsValueKind, default: PrefsScalar) -> PrefsScalar:
        entry = self._entries.get(_validate_key(key))
        if entry is None or entry.kind is not kind:
            return default
        return entry.value

    def _put(self, key: str, entry: PrefsEntry) -> None:
        key = _validate_key(key)
        previous = self._entries.get(key)
        self._entries[key] = entry
        self._commit_or_restore({key: previous})

    def _commit_or_restore(self, previous: Mapping[str, PrefsEntry | None]) -> None:
        """Commit a mutation, putting `previous` entries back if the commit fails."""
        try:
            self._commit()
        except BaseException:
            for key, entry in previous.items():
                if entry is None:
                    self._entries.pop(key, None)
                else:
                    self._entries[key] = entry
            raise

    def _commit(self) -> None:
        """Hook run after each mutation."""


def _validate_key(key: str) -> str:
    if not isinstance(key, str) or not key:
        raise ValueError("prefs key must be a non-empty string")
    return key
