"""Typed prefs values."""

from playerprefs.values.double import PrefsDouble, join_double, split_double
from playerprefs.values.primitives import PrefsBool, PrefsFloat, PrefsInt, PrefsString
from playerprefs.values.simple import SimplePrefsValue

__all__ = [
    "PrefsBool",
    "PrefsDouble",
    "PrefsFloat",
    "PrefsInt",
    "PrefsString",
    "SimplePrefsValue",
    "join_double",
    "split_double",
]
