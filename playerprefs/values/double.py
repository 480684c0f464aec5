"""64-bit float prefs value split across two int32 keys."""

from __future__ import annotations

import numpy as np

from playerprefs.values.simple import SimplePrefsValue


def split_double(value: float) -> tuple[int, int]:
    """Return the (low, high) signed 32-bit words of a float64 bit pattern."""
    words = np.array([value], dtype="<f8").view("<i4")
    return int(words[0]), int(words[1])


def join_double(low: int, high: int) -> float:
    """Rebuild a float64 from its (low, high) signed 32-bit words."""
    return float(np.array([low, high], dtype="<i4").view("<f8")[0])


class PrefsDouble(SimplePrefsValue[float]):
    """Double-precision prefs value.

    The store only holds 32-bit numbers, so the IEEE-754 bit pattern is kept as
    two ints: the low word at `<key>-0` and the high word at `<key>-1`. The value
    counts as set only when both words are present.

    Example:
        best_time = PrefsDouble("best_time", 0.0)
        best_time.value = best_time.value + 0.111
    """

    zero_value = 0.0

    @property
    def low_key_name(self) -> str:
        return f"{self.key_name}-0"

    @property
    def high_key_name(self) -> str:
        return f"{self.key_name}-1"

    def _has_stored_value(self) -> bool:
        store = self.store
        return store.has_key(self.low_key_name) and store.has_key(self.high_key_name)

    def _delete_stored_value(self) -> None:
        store = self.store
        store.delete_key(self.low_key_name)
        store.delete_key(self.high_key_name)

    def _write_value(self, value: float) -> float:
        low, high = split_double(value)
        store = self.store
        store.set_int(self.low_key_name, low)
        store.set_int(self.high_key_name, high)
        return join_double(low, high)

    def _read_stored_value(self) -> float:
        store = self.store
        return join_double(store.get_int(self.low_key_name, 0), store.get_int(self.high_key_name, 0))
