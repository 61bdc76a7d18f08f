"""
color.
=====

Does: Aggregate the color-domain building blocks: palette flattening, the
      distance oracle, and the built-in reference palettes.
Used By: Nearest-color search and the CLI.
"""

from .flatten import DEFAULT_SHADE, flatten_palette
from .oracle import channels, color_distance, is_valid
from .palettes import DEFAULT_PALETTE, PALETTES, clear_palette_cache, get_palette

__all__ = [
    # flatten
    "DEFAULT_SHADE",
    "flatten_palette",
    # oracle
    "is_valid",
    "channels",
    "color_distance",
    # palettes
    "DEFAULT_PALETTE",
    "PALETTES",
    "get_palette",
    "clear_palette_cache",
]
