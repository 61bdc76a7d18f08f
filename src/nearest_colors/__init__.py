"""
nearest_colors
==============

Does: Root package for the nearest palette color search.
Returns: Exposes `nearest_colors()` plus the palette, oracle and error types
         through a stable namespace.
Used by: The `nearest-colors` CLI and library callers.
"""

from .color.flatten import flatten_palette
from .color.oracle import color_distance, is_valid
from .color.palettes import PALETTES, get_palette
from .errors import ConfigurationError, InvalidColorInput, NearestColorsError
from .search import INVALID_COLOR_NAMES, nearest_colors
from .types import SPACES, ColorMatch, SearchConfig

__all__ = [
    "nearest_colors",
    "flatten_palette",
    "get_palette",
    "is_valid",
    "color_distance",
    "INVALID_COLOR_NAMES",
    "PALETTES",
    "SPACES",
    "ColorMatch",
    "SearchConfig",
    "NearestColorsError",
    "InvalidColorInput",
    "ConfigurationError",
]
__docformat__ = "google"
