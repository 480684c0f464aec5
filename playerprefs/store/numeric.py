"""Fixed-width numeric narrowing for prefs storage."""

from __future__ import annotations

import numpy as np

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)


def to_int32(value: int) -> int:
    """Validate value as a signed 32-bit int."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"expected int, got {type(value).__name__}")
    result = int(value)
    if result < INT32_MIN or result > INT32_MAX:
        raise OverflowError(f"value {result} outside int32 range [{INT32_MIN}, {INT32_MAX}]")
    return result


def to_float32(value: float) -> float:
    """Narrow value to the nearest 32-bit float."""
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def float32_to_bits(value: float) -> int:
    """Reinterpret a float32 as its signed 32-bit pattern."""
    with np.errstate(over="ignore"):
        words = np.array([value], dtype="<f4").view("<i4")
    return int(words[0])


def float32_from_bits(bits: int) -> float:
    """Reinterpret a signed 32-bit pattern as float32."""
    return float(np.array([to_int32(bits)], dtype="<i4").view("<f4")[0])


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "float32_from_bits",
    "float32_to_bits",
    "to_float32",
    "to_int32",
]
