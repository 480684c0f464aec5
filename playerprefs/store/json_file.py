"""File-backed prefs store persisted as one JSON document."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from playerprefs.api.errors import PrefsStoreCorruptedError
from playerprefs.api.store import PrefsEntry, PrefsValueKind
from playerprefs.store.json_codec import JSONDecodeError, dumps_bytes, loads
from playerprefs.store.memory import InMemoryPrefsStore
from playerprefs.store.numeric import float32_from_bits, float32_to_bits, to_int32

PREFS_FILE_SCHEMA_VERSION = "playerprefs.v1"

logger = logging.getLogger(__name__)


class JsonFilePrefsStore(InMemoryPrefsStore):
    """Prefs store mirrored to a JSON file.

    With `autosave` enabled every mutating call rewrites the file before it
    returns. Writes go through a sibling temp file and `os.replace`, so a crash
    leaves either the previous or the new document on disk.
    """

    def __init__(self, path: Path, *, autosave: bool = True) -> None:
        self._path = Path(path)
        self._autosave = bool(autosave)
        super().__init__(_load_entries(self._path))
        logger.debug("prefs_store_loaded path=%s keys=%d", self._path, len(self._entries))

    @property
    def path(self) -> Path:
        return self._path

    @property
    def autosave(self) -> bool:
        return self._autosave

    def save(self) -> None:
        """Write the full namespace to disk."""
        payload = {
            "schema_version": PREFS_FILE_SCHEMA_VERSION,
            "entries": {key: _encode_entry(entry) for key, entry in sorted(self._entries.items())},
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(f"{self._path.name}.tmp")
        try:
            with tmp_path.open("wb") as handle:
                handle.write(dumps_bytes(payload, pretty=True))
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self._path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            logger.error("prefs_store_save_failed path=%s error=%s", self._path, exc)
            raise
        logger.debug("prefs_store_saved path=%s keys=%d", self._path, len(self._entries))

    def _commit(self) -> None:
        if self._autosave:
            self.save()


def _encode_entry(entry: PrefsEntry) -> dict[str, object]:
    if entry.kind is PrefsValueKind.FLOAT:
        # Bit pattern keeps NaN, infinities and -0.0 exact in JSON.
        return {"kind": entry.kind.value, "bits": float32_to_bits(float(entry.value))}
    return {"kind": entry.kind.value, "value": entry.value}


def _decode_entry(path: Path, key: str, raw: object) -> PrefsEntry:
    if not isinstance(raw, dict):
        raise PrefsStoreCorruptedError(path, f"entry '{key}' is not an object")
    try:
        kind = PrefsValueKind(raw.get("kind"))
    except ValueError:
        raise PrefsStoreCorruptedError(path, f"entry '{key}' has unknown kind {raw.get('kind')!r}") from None
    if kind is PrefsValueKind.FLOAT:
        bits = raw.get("bits")
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise PrefsStoreCorruptedError(path, f"entry '{key}' has invalid float bits")
        try:
            return PrefsEntry(kind, float32_from_bits(bits))
        except OverflowError:
            raise PrefsStoreCorruptedError(path, f"entry '{key}' float bits out of range") from None
    value = raw.get("value")
    if kind is PrefsValueKind.INT:
        if isinstance(value, bool) or not isinstance(value, int):
            raise PrefsStoreCorruptedError(path, f"entry '{key}' has non-int value")
        try:
            return PrefsEntry(kind, to_int32(value))
        except OverflowError:
            raise PrefsStoreCorruptedError(path, f"entry '{key}' int out of range") from None
    if not isinstance(value, str):
        raise PrefsStoreCorruptedError(path, f"entry '{key}' has non-string value")
    return PrefsEntry(kind, value)


def _load_entries(path: Path) -> dict[str, PrefsEntry]:
    if not path.exists():
        return {}
    try:
        return _parse_document(path, path.read_bytes())
    except PrefsStoreCorruptedError as exc:
        logger.error("prefs_store_corrupted path=%s reason=%s", path, exc.reason)
        raise


def _parse_document(path: Path, data: bytes) -> dict[str, PrefsEntry]:
    try:
        payload = loads(data)
    except JSONDecodeError as exc:
        raise PrefsStoreCorruptedError(path, f"invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise PrefsStoreCorruptedError(path, "document is not an object")
    version = payload.get("schema_version")
    if version != PREFS_FILE_SCHEMA_VERSION:
        raise PrefsStoreCorruptedError(path, f"unsupported schema_version {version!r}")
    raw_entries = payload.get("entries")
    if not isinstance(raw_entries, dict):
        raise PrefsStoreCorruptedError(path, "entries is not an object")
    entries: dict[str, PrefsEntry] = {}
    for key, raw in raw_entries.items():
        if not key:
            raise PrefsStoreCorruptedError(path, "entry with empty key")
        entries[key] = _decode_entry(path, key, raw)
    return entries


__all__ = ["JsonFilePrefsStore", "PREFS_FILE_SCHEMA_VERSION"]
