"""Centralized prefs configuration sourced from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from playerprefs.runtime.app_data import resolve_data_root, resolve_prefs_file

_STORE_BACKENDS = frozenset({"memory", "json"})
_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class PrefsStoreConfig:
    backend: str
    file_path: Path
    autosave: bool


@dataclass(frozen=True, slots=True)
class PrefsLogConfig:
    level_name: str
    console_format: str
    file_path: Path | None = None


@dataclass(frozen=True, slots=True)
class PrefsConfig:
    data_root: Path
    store: PrefsStoreConfig
    log: PrefsLogConfig


_PREFS_CONFIG: ContextVar[PrefsConfig | None] = ContextVar("playerprefs_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _choice(name: str, default: str, choices: frozenset[str], *, env: Mapping[str, str] | None = None) -> str:
    value = _text(name, default, env=env).lower()
    return value if value in choices else default


def _data_path(name: str, data_root: Path, *, env: Mapping[str, str] | None = None) -> Path | None:
    raw = _text(name, "", env=env)
    if not raw:
        return None
    candidate = Path(raw)
    return candidate if candidate.is_absolute() else data_root / candidate


def load_prefs_config(*, env: Mapping[str, str] | None = None) -> PrefsConfig:
    data_root = resolve_data_root(env=env)
    file_path = _data_path("PLAYERPREFS_STORE_FILE", data_root, env=env) or resolve_prefs_file(env=env)
    log_file = _data_path("PLAYERPREFS_LOG_FILE", data_root, env=env)

    level_name = _raw("PLAYERPREFS_LOG_LEVEL", env=env)
    if level_name is None or not level_name.strip():
        level_name = _text("LOG_LEVEL", "INFO", env=env)

    return PrefsConfig(
        data_root=data_root,
        store=PrefsStoreConfig(
            backend=_choice("PLAYERPREFS_STORE_BACKEND", "json", _STORE_BACKENDS, env=env),
            file_path=file_path,
            autosave=_flag("PLAYERPREFS_AUTOSAVE", True, env=env),
        ),
        log=PrefsLogConfig(
            level_name=level_name.strip().upper(),
            console_format=_choice("PLAYERPREFS_LOG_FORMAT", "text", _LOG_FORMATS, env=env),
            file_path=log_file,
        ),
    )


def initialize_prefs_config(*, env: Mapping[str, str] | None = None) -> PrefsConfig:
    config = load_prefs_config(env=env)
    _PREFS_CONFIG.set(config)
    return config


def set_prefs_config(config: PrefsConfig) -> PrefsConfig:
    _PREFS_CONFIG.set(config)
    return config


def reset_prefs_config() -> None:
    _PREFS_CONFIG.set(None)


def get_prefs_config() -> PrefsConfig:
    config = _PREFS_CONFIG.get()
    if config is not None:
        return config
    return initialize_prefs_config()


__all__ = [
    "PrefsConfig",
    "PrefsLogConfig",
    "PrefsStoreConfig",
    "get_prefs_config",
    "initialize_prefs_config",
    "load_prefs_config",
    "reset_prefs_config",
    "set_prefs_config",
]
