from __future__ import annotations

import math

import pytest

from playerprefs.store.numeric import float32_from_bits, float32_to_bits, to_float32, to_int32


def test_to_int32_accepts_bounds_and_rejects_overflow() -> None:
    assert to_int32(-(2**31)) == -(2**31)
    assert to_int32(2**31 - 1) == 2**31 - 1
    with pytest.raises(OverflowError):
        to_int32(2**31)


def test_to_float32_rounds_to_single_precision() -> None:
    assert to_float32(1.0) == 1.0
    assert to_float32(16777217.0) == 16777216.0


def test_float32_bits_known_patterns() -> None:
    assert float32_to_bits(1.0) == 0x3F800000
    assert float32_to_bits(-0.0) == -(2**31)
    assert float32_from_bits(0x3F800000) == 1.0
    assert math.isinf(float32_from_bits(0x7F800000))
