from __future__ import annotations

import json
import math
import os

import pytest

from playerprefs.api.errors import PrefsStoreCorruptedError
from playerprefs.store.json_file import PREFS_FILE_SCHEMA_VERSION, JsonFilePrefsStore


def test_missing_file_loads_empty(prefs_file) -> None:
    store = JsonFilePrefsStore(prefs_file)

    assert store.keys() == ()
    assert not prefs_file.exists()


def test_autosave_persists_every_mutation(prefs_file) -> None:
    store = JsonFilePrefsStore(prefs_file)
    store.set_int("score", 12)
    store.set_string("name", "ada")

    reopened = JsonFilePrefsStore(prefs_file)
    assert reopened.get_int("score") == 12
    assert reopened.get_string("name") == "ada"

    store.delete_key("score")
    assert not JsonFilePrefsStore(prefs_file).has_key("score")


def test_without_autosave_only_save_persists(prefs_file) -> None:
    store = JsonFilePrefsStore(prefs_file, autosave=False)
    store.set_int("score", 3)
    assert not prefs_file.exists()

    store.save()
    assert JsonFilePrefsStore(prefs_file).get_int("score") == 3


def test_float_bit_patterns_survive_reload(prefs_file) -> None:
    store = JsonFilePrefsStore(prefs_file)
    store.set_float("nan", math.nan)
    store.set_float("neg_inf", -math.inf)
    store.set_float("neg_zero", -0.0)
    store.set_float("ratio", 0.25)

    reopened = JsonFilePrefsStore(prefs_file)
    assert math.isnan(reopened.get_float("nan"))
    assert reopened.get_float("neg_inf") == -math.inf
    assert math.copysign(1.0, reopened.get_float("neg_zero")) == -1.0
    assert reopened.get_float("ratio") == 0.25


def test_document_layout(prefs_file) -> None:
    store = JsonFilePrefsStore(prefs_file)
    store.set_int("score", 5)

    payload = json.loads(prefs_file.read_text(encoding="utf-8"))
    assert payload["schema_version"] == PREFS_FILE_SCHEMA_VERSION
    assert payload["entries"]["score"] == {"kind": "int", "value": 5}
    assert not prefs_file.with_name("prefs.json.tmp").exists()


def test_invalid_json_raises_corrupted(prefs_file) -> None:
    prefs_file.parent.mkdir(parents=True)
    prefs_file.write_text("{invalid", encoding="utf-8")

    with pytest.raises(PrefsStoreCorruptedError) as excinfo:
        JsonFilePrefsStore(prefs_file)
    assert excinfo.value.path == prefs_file


@pytest.mark.parametrize(
    "payload",
    [
        [1, 2, 3],
        {"schema_version": "other", "entries": {}},
        {"schema_version": PREFS_FILE_SCHEMA_VERSION, "entries": []},
        {"schema_version": PREFS_FILE_SCHEMA_VERSION, "entries": {"a": {"kind": "blob"}}},
        {"schema_version": PREFS_FILE_SCHEMA_VERSION, "entries": {"a": {"kind": "int", "value": "1"}}},
        {"schema_version": PREFS_FILE_SCHEMA_VERSION, "entries": {"a": {"kind": "int", "value": 2**40}}},
        {"schema_version": PREFS_FILE_SCHEMA_VERSION, "entries": {"a": {"kind": "float", "value": 1.0}}},
        {"schema_version": PREFS_FILE_SCHEMA_VERSION, "entries": {"": {"kind": "string", "value": "x"}}},
    ],
)
def test_malformed_documents_raise_corrupted(prefs_file, payload) -> None:
    prefs_file.parent.mkdir(parents=True)
    prefs_file.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(PrefsStoreCorruptedError):
        JsonFilePrefsStore(prefs_file)


def test_failed_save_rolls_back_mutation_and_removes_temp_file(prefs_file, monkeypatch) -> None:
    store = JsonFilePrefsStore(prefs_file)
    store.set_int("score", 1)
    store.set_string("name", "ada")

    def fail_replace(src, dst) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", fail_replace)

    with pytest.raises(OSError, match="disk full"):
        store.set_int("score", 2)
    with pytest.raises(OSError):
        store.set_int("lives", 3)
    with pytest.raises(OSError):
        store.delete_key("name")
    with pytest.raises(OSError):
        store.delete_all()

    assert store.keys() == ("name", "score")
    assert store.get_int("score") == 1
    assert store.get_string("name") == "ada"
    assert not prefs_file.with_name("prefs.json.tmp").exists()

    monkeypatch.undo()
    assert JsonFilePrefsStore(prefs_file).get_int("score") == 1
