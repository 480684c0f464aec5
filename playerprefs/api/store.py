"""Public prefs key-value store API contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

type PrefsScalar = int | float | str


class PrefsValueKind(StrEnum):
    """Primitive kinds a prefs key can hold."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class PrefsEntry:
    """One stored prefs value with its kind tag."""

    kind: PrefsValueKind
    value: PrefsScalar


class PrefsStore(ABC):
    """Flat, string-keyed store of 32-bit ints, 32-bit floats and strings.

    Each key holds exactly one entry. Typed getters return their default when the
    key is missing or holds a different kind. Every call is synchronous; durable
    implementations persist before a mutating call returns.
    """

    @abstractmethod
    def get_int(self, key: str, default: int = 0) -> int:
        """Return stored int or default."""

    @abstractmethod
    def set_int(self, key: str, value: int) -> None:
        """Store a signed 32-bit int."""

    @abstractmethod
    def get_float(self, key: str, default: float = 0.0) -> float:
        """Return stored float or default."""

    @abstractmethod
    def set_float(self, key: str, value: float) -> None:
        """Store a value narrowed to 32-bit float."""

    @abstractmethod
    def get_string(self, key: str, default: str = "") -> str:
        """Return stored string or default."""

    @abstractmethod
    def set_string(self, key: str, value: str) -> None:
        """Store a string."""

    @abstractmethod
    def has_key(self, key: str) -> bool:
        """Return whether key holds any entry."""

    @abstractmethod
    def delete_key(self, key: str) -> None:
        """Remove key if present."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every key."""

    @abstractmethod
    def keys(self) -> tuple[str, ...]:
        """Return stored keys in sorted order."""

    @abstractmethod
    def entry(self, key: str) -> PrefsEntry | None:
        """Return raw entry for key, if any."""

    @abstractmethod
    def save(self) -> None:
        """Flush pending state to durable storage."""


def create_prefs_store(
    *,
    backend: str = "memory",
    path: Path | None = None,
    autosave: bool = True,
) -> PrefsStore:
    """Create a prefs store for the named backend (`memory` or `json`)."""
    normalized = backend.strip().lower()
    if normalized == "memory":
        from playerprefs.store.memory import InMemoryPrefsStore

        return InMemoryPrefsStore()
    if normalized == "json":
        if path is None:
            raise ValueError("json prefs backend requires a file path")
        from playerprefs.store.json_file import JsonFilePrefsStore

        return JsonFilePrefsStore(path, autosave=autosave)
    raise ValueError(f"unknown prefs store backend: {backend!r}")


def get_prefs_store() -> PrefsStore:
    """Return the process-wide default store, creating it from config on first use."""
    from playerprefs.runtime.context import get_default_store

    return get_default_store()


def set_prefs_store(store: PrefsStore) -> PrefsStore:
    """Install the process-wide default store."""
    from playerprefs.runtime.context import set_default_store

    return set_default_store(store)


def reset_prefs_store() -> None:
    """Drop the process-wide default store so the next access rebuilds it."""
    from playerprefs.runtime.context import reset_default_store

    reset_default_store()


__all__ = [
    "PrefsEntry",
    "PrefsScalar",
    "PrefsStore",
    "PrefsValueKind",
    "create_prefs_store",
    "get_prefs_store",
    "reset_prefs_store",
    "set_prefs_store",
]
