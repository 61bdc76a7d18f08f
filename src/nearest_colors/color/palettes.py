"""
palettes
========

Does: Provide the built-in reference palettes searched when the caller passes
      none: Tailwind CSS (default, shipped as data/tailwind_colors.json), CSS3
      named colors (webcolors) and the XKCD color survey (matplotlib).
Used By: Nearest-color search, CLI --palette.
Returns: Fresh Palette dicts on every call; the cached copies stay untouched.
"""

from __future__ import annotations

import copy
import logging
from functools import lru_cache
from typing import Any, Callable, Dict

from nearest_colors.errors import ConfigurationError
from nearest_colors.general.utils.load_config import clear_config_cache, load_config
from nearest_colors.types import Palette

__all__ = [
    "DEFAULT_PALETTE",
    "PALETTES",
    "clear_palette_cache",
    "get_palette",
    "validate_palette",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

DEFAULT_PALETTE = "tailwind"
TAILWIND_FILE = "tailwind_colors"


def validate_palette(data: Dict[str, Any]) -> Dict[str, Any]:
    """Does: Check the group -> value / group -> shade -> value shape; return data unchanged."""
    for group, value in data.items():
        if isinstance(value, str):
            continue
        if isinstance(value, dict) and all(isinstance(v, str) for v in value.values()):
            continue
        raise ValueError(f"group {group!r} must map to a color string or to {{shade: color}}")
    return data


# ── Loaders ──────────────────────────────────────────────────────────────────
def _load_tailwind() -> Dict[str, Any]:
    return load_config(TAILWIND_FILE, validator=validate_palette)


def _load_css() -> Dict[str, Any]:
    """Does: CSS3 named colors as {name: '#rrggbb'} (lazy import)."""
    import webcolors

    return {name: webcolors.name_to_hex(name, spec="css3") for name in webcolors.names("css3")}


def _load_xkcd() -> Dict[str, Any]:
    """Does: XKCD survey colors as {'acid-green': '#8ffe09', ...} (lazy import)."""
    from matplotlib.colors import XKCD_COLORS

    out: Dict[str, Any] = {}
    for key, hx in XKCD_COLORS.items():
        name = key.replace("xkcd:", "").strip().replace(" ", "-")
        out.setdefault(name, hx)
    return out


_LOADERS: Dict[str, Callable[[], Dict[str, Any]]] = {
    "tailwind": _load_tailwind,
    "css": _load_css,
    "xkcd": _load_xkcd,
}

PALETTES = tuple(_LOADERS)


@lru_cache(maxsize=None)
def _cached_palette(name: str) -> Dict[str, Any]:
    palette = _LOADERS[name]()
    log.debug("Loaded built-in palette %r (%d groups)", name, len(palette))
    return palette


def clear_palette_cache() -> None:
    """Does: Forget loaded palettes so the next call re-reads their sources."""
    _cached_palette.cache_clear()
    clear_config_cache()


def get_palette(name: str = DEFAULT_PALETTE) -> Palette:
    """
    Does: Return a copy of the built-in palette `name`.
    Raises: ConfigurationError for an unknown palette name.
    """
    if name not in _LOADERS:
        raise ConfigurationError(
            f"Unknown palette {name!r}; expected one of {', '.join(PALETTES)}"
        )
    return copy.deepcopy(_cached_palette(name))
