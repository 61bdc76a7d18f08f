# src/nearest_colors/general/utils/load_config.py

"""Read the JSON palette files shipped in nearest_colors/data/.

Each file is parsed, checked by the caller's validator, and cached until its
mtime changes. NEAREST_COLORS_DATA_DIR points the loader at another directory
holding files with the same names (e.g. a customised tailwind_colors.json).
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "DATA_DIR_ENV",
    "PACKAGE_DATA_DIR",
    "data_dir",
    "load_config",
    "clear_config_cache",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV = "NEAREST_COLORS_DATA_DIR"
PACKAGE_DATA_DIR = Path(__file__).resolve().parents[2] / "data"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file does not exist or cannot be read."""


class ConfigParseError(ValueError):
    """Raise when a data file is not valid JSON or fails its validator."""


class ConfigTypeError(TypeError):
    """Raise when a data file does not hold a JSON object."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CACHE: dict[Path, tuple[float, dict[str, Any]]] = {}


def clear_config_cache() -> None:
    """Forget every cached data file."""
    with _CACHE_LOCK:
        _CACHE.clear()
    log.debug("Data file cache cleared.")


def data_dir() -> Path:
    """Directory palette files are read from: env override, else the package's data/."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(os.path.expanduser(override)).resolve()
    return PACKAGE_DATA_DIR


def _read_json_object(path: Path, encoding: str) -> dict[str, Any]:
    try:
        with path.open("r", encoding=encoding) as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigFileNotFound(f"Data file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    return data


def load_config(name: str, *, validator: Validator, encoding: str = "utf-8") -> dict[str, Any]:
    """Load <data_dir>/<name>.json, run `validator` on it, and cache the result by mtime."""
    path = data_dir() / (name if name.endswith(".json") else f"{name}.json")
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Data file not found: {path}") from e

    with _CACHE_LOCK:
        hit = _CACHE.get(path)
        if hit is not None and hit[0] == mtime:
            log.debug("Data cache HIT: %s", path.name)
            return hit[1]

    data = _read_json_object(path, encoding)
    try:
        data = validator(data)
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    with _CACHE_LOCK:
        _CACHE[path] = (mtime, data)
    log.debug("Data cache MISS → STORED: %s", path.name)
    return data
