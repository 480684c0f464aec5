"""Single-key prefs values with a default and an instance cache."""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar

from playerprefs.api.errors import NotInitializedError
from playerprefs.api.store import PrefsStore, get_prefs_store
from playerprefs.api.values import PrefsValue


class SimplePrefsValue[T](PrefsValue[T]):
    """Prefs value bound to one key, read lazily and cached per instance.

    The cache is only invalidated through this instance. Two instances bound to
    the same key can disagree once one of them writes; callers that share keys
    across instances should build a fresh instance per operation.

    A value with an empty key is uninitialized: every operation raises
    `NotInitializedError` until `initialize` binds a key. The store defaults to
    the process-wide prefs store, resolved on each access.
    """

    zero_value: ClassVar[object]

    def __init__(
        self,
        key_name: str = "",
        default_value: T | None = None,
        *,
        store: PrefsStore | None = None,
    ) -> None:
        self._store = store
        self._key_name = ""
        self._default_value: T = self._coerce_default(default_value)
        self._cached_value: T = self._default_value
        self._is_cached = False
        if key_name:
            self.initialize(key_name, default_value)

    @property
    def key_name(self) -> str:
        return self._key_name

    @property
    def default_value(self) -> T:
        return self._default_value

    @property
    def store(self) -> PrefsStore:
        return self._store if self._store is not None else get_prefs_store()

    @property
    def value(self) -> T:
        self._require_initialized()
        if not self._is_cached:
            self._cached_value = self.read_value() if self.is_set else self._default_value
            self._is_cached = True
        return self._cached_value

    @value.setter
    def value(self, value: T) -> None:
        self._require_initialized()
        self._cached_value = self._write_value(value)
        self._is_cached = True

    @property
    def is_set(self) -> bool:
        self._require_initialized()
        return self._has_stored_value()

    def initialize(self, key_name: str, default_value: T | None = None) -> None:
        """Bind this value to a key and default without touching the store."""
        self._key_name = key_name
        self._default_value = self._coerce_default(default_value)

    def delete(self) -> None:
        self._require_initialized()
        self._delete_stored_value()
        self._cached_value = self._default_value

    def read_value(self) -> T:
        self._require_initialized()
        return self._read_stored_value()

    def _has_stored_value(self) -> bool:
        return self.store.has_key(self._key_name)

    def _delete_stored_value(self) -> None:
        self.store.delete_key(self._key_name)

    @abstractmethod
    def _write_value(self, value: T) -> T:
        """Encode value into the store and return the value as stored."""

    @abstractmethod
    def _read_stored_value(self) -> T:
        """Decode value from the store."""

    def _require_initialized(self) -> None:
        if not self._key_name:
            raise NotInitializedError(type(self).__name__)

    def _coerce_default(self, default_value: T | None) -> T:
        if default_value is None:
            return self.zero_value  # type: ignore[return-value]
        return default_value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key_name={self._key_name!r}, default_value={self._default_value!r})"
