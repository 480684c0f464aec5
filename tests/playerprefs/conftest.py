from __future__ import annotations

from collections.abc import Iterator

import pytest

from playerprefs.api.store import reset_prefs_store, set_prefs_store
from playerprefs.runtime.config import reset_prefs_config
from playerprefs.store.memory import InMemoryPrefsStore


@pytest.fixture(autouse=True)
def default_store() -> Iterator[InMemoryPrefsStore]:
    store = InMemoryPrefsStore()
    set_prefs_store(store)
    yield store
    reset_prefs_store()
    reset_prefs_config()


@pytest.fixture
def memory_store() -> InMemoryPrefsStore:
    return InMemoryPrefsStore()


@pytest.fixture
def prefs_file(tmp_path):
    return tmp_path / "prefs" / "prefs.json"
