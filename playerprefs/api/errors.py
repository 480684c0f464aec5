"""Public prefs error taxonomy."""

from __future__ import annotations

from pathlib import Path


class PrefsError(RuntimeError):
    """Base class for prefs failures."""


class NotInitializedError(PrefsError):
    """Prefs value used before a key was bound."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"{type_name} is not initialized: bind a key before use")
        self.type_name = type_name


class QueueFullError(PrefsError):
    """Enqueue attempted with no free slot."""

    def __init__(self, key_prefix: str, length: int) -> None:
        super().__init__(f"queue '{key_prefix}' is full (length={length})")
        self.key_prefix = key_prefix
        self.length = length


class QueueEmptyError(PrefsError):
    """Dequeue attempted on a queue holding no elements."""

    def __init__(self, key_prefix: str, length: int) -> None:
        super().__init__(f"queue '{key_prefix}' is empty (length={length})")
        self.key_prefix = key_prefix
        self.length = length


class PrefsStoreCorruptedError(PrefsError):
    """Persisted prefs document cannot be decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"prefs file '{path}' is corrupted: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "NotInitializedError",
    "PrefsError",
    "PrefsStoreCorruptedError",
    "QueueEmptyError",
    "QueueFullError",
]
