"""Prefs values for the store's native primitive kinds."""

from __future__ import annotations

from playerprefs.store.numeric import to_float32
from playerprefs.values.simple import SimplePrefsValue


class PrefsString(SimplePrefsValue[str]):
    """String prefs value."""

    zero_value = ""

    def _write_value(self, value: str) -> str:
        self.store.set_string(self.key_name, value)
        return value

    def _read_stored_value(self) -> str:
        return self.store.get_string(self.key_name, "")


class PrefsBool(SimplePrefsValue[bool]):
    """Bool prefs value stored as int 1/0."""

    zero_value = False

    def _write_value(self, value: bool) -> bool:
        self.store.set_int(self.key_name, 1 if value else 0)
        return bool(value)

    def _read_stored_value(self) -> bool:
        return self.store.get_int(self.key_name, 0) > 0


class PrefsInt(SimplePrefsValue[int]):
    """Signed 32-bit int prefs value."""

    zero_value = 0

    def _write_value(self, value: int) -> int:
        self.store.set_int(self.key_name, value)
        return int(value)

    def _read_stored_value(self) -> int:
        return self.store.get_int(self.key_name, 0)


class PrefsFloat(SimplePrefsValue[float]):
    """32-bit float prefs value.

    Writes narrow to float32, so the cached value matches what a fresh read of
    the key returns.
    """

    zero_value = 0.0

    def _write_value(self, value: float) -> float:
        stored = to_float32(value)
        self.store.set_float(self.key_name, stored)
        return stored

    def _read_stored_value(self) -> float:
        return self.store.get_float(self.key_name, 0.0)
