"""Public typed prefs-value API contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PrefsValue[T](ABC):
    """One named, typed value persisted in a prefs store."""

    @property
    @abstractmethod
    def value(self) -> T:
        """Current value, or the default when the key is unset."""

    @value.setter
    @abstractmethod
    def value(self, value: T) -> None:
        """Persist a new value."""

    @property
    @abstractmethod
    def is_set(self) -> bool:
        """Whether the backing key is present in the store."""

    @abstractmethod
    def delete(self) -> None:
        """Remove the backing key from the store."""

    @abstractmethod
    def read_value(self) -> T:
        """Decode the stored value, bypassing any cache."""


__all__ = ["PrefsValue"]
