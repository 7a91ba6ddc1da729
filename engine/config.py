"""Lightweight loader for shape/build configuration toggles."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

_ENV_KEY = "SHAPES_CONFIG"
_DEFAULT_PATH = Path(__file__).resolve().parent.parent / "config" / "engine.json"
_CONFIG_PATH: Optional[Path] = None
_CONFIG_DATA: Dict[str, Any] = {}
_LOADED = False


def _resolve_path() -> Path:
    if _CONFIG_PATH is not None:
        return _CONFIG_PATH
    override = os.environ.get(_ENV_KEY, "").strip()
    if override:
        return Path(override)
    return _DEFAULT_PATH


def _load(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        print(f"[config] failed to load {path}: {exc}")
        return {}
    if not isinstance(data, dict):
        print(f"[config] ignoring {path}: top level must be an object")
        return {}
    return data


def _ensure_loaded() -> None:
    global _CONFIG_DATA, _LOADED
    if not _LOADED:
        _CONFIG_DATA = _load(_resolve_path())
        _LOADED = True


def load(path: Optional[str] = None) -> Dict[str, Any]:
    """(Re)load configuration, optionally from an explicit file."""
    global _CONFIG_PATH, _CONFIG_DATA, _LOADED
    _CONFIG_PATH = Path(path) if path else None
    _CONFIG_DATA = _load(_resolve_path())
    _LOADED = True
    return _CONFIG_DATA


def get(path: str, default: Any = None) -> Any:
    """Return a config value using dotted paths, or default when missing."""
    _ensure_loaded()
    if not path:
        return _CONFIG_DATA

    current: Any = _CONFIG_DATA
    for segment in path.split('.'):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return default
    return current


def get_int(path: str, default: int) -> int:
    """Like :func:`get` but coerces to ``int``, falling back on bad values."""
    value = get(path, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def get_float(path: str, default: float) -> float:
    value = get(path, default)
    try:
        return float(value)
    except (TypeError, ValueError):
        return default
