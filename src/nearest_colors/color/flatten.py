"""
flatten.py
==========

Does: Collapse a grouped palette (group -> shade -> value) into a flat
      {name: value} mapping, naming nested entries "group-shade".
Used By: Nearest-color search, CLI palette listing.
Returns: dict[str, str] in first-seen order (last write wins on duplicate names).
"""

from __future__ import annotations

from collections.abc import Mapping

from nearest_colors.types import FlatPalette, Palette

__all__ = ["DEFAULT_SHADE", "SHADE_SEPARATOR", "flatten_palette"]
__docformat__ = "google"

DEFAULT_SHADE = "DEFAULT"
SHADE_SEPARATOR = "-"


def flatten_palette(palette: Palette) -> FlatPalette:
    """Does: Flatten one level of grouping; the DEFAULT shade keeps the bare group name."""
    flat: FlatPalette = {}
    for group, value in palette.items():
        if isinstance(value, str):
            flat[group] = value
        elif isinstance(value, Mapping):
            for shade, shade_value in value.items():
                if not isinstance(shade_value, str):
                    raise TypeError(
                        f"Palette value for {group}{SHADE_SEPARATOR}{shade} must be a string, "
                        f"got {type(shade_value).__name__}"
                    )
                name = group if shade == DEFAULT_SHADE else f"{group}{SHADE_SEPARATOR}{shade}"
                flat[name] = shade_value
        else:
            raise TypeError(
                f"Palette value for {group!r} must be a string or a mapping, "
                f"got {type(value).__name__}"
            )
    return flat
