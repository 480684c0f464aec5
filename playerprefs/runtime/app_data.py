"""Prefs data-directory resolution."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path


def resolve_data_root(*, env: Mapping[str, str] | None = None) -> Path:
    """Resolve the root directory for persisted prefs state."""
    raw = os.getenv("PLAYERPREFS_DATA_DIR", "") if env is None else env.get("PLAYERPREFS_DATA_DIR", "")
    configured = raw.strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return Path.cwd() / candidate
    return Path.cwd() / "appdata"


def resolve_prefs_file(*, env: Mapping[str, str] | None = None) -> Path:
    """Resolve the default prefs file path under the data root."""
    return resolve_data_root(env=env) / "prefs.json"
