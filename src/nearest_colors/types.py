# nearest_colors/types.py
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final, Literal, TypedDict, Union

"""
types.py.

Does: Define the palette shapes, the search configuration and the match record
shared by the flattener, the search and the CLI.
"""

# group -> value, or group -> shade -> value
PaletteValue = Union[str, Mapping[str, str]]
Palette = Mapping[str, PaletteValue]
FlatPalette = dict[str, str]

Space = Literal[
    "cmyk",
    "gl",
    "hcg",
    "hcl",
    "hsi",
    "hsl",
    "hsv",
    "lab",
    "lch",
    "oklab",
    "oklch",
    "rgb",
]

SPACES: Final[tuple[str, ...]] = (
    "cmyk",
    "gl",
    "hcg",
    "hcl",
    "hsi",
    "hsl",
    "hsv",
    "lab",
    "lch",
    "oklab",
    "oklch",
    "rgb",
)


class ColorMatch(TypedDict):
    """One palette entry annotated with its distance to the input color."""

    name: str
    value: str
    distance: float


class SearchConfig(TypedDict, total=False):
    """Keyword arguments accepted by `nearest_colors()`."""

    colors: Palette
    exclude: Iterable[str]
    n: int
    space: Space
    palette: str


__all__ = [
    "PaletteValue",
    "Palette",
    "FlatPalette",
    "Space",
    "SPACES",
    "ColorMatch",
    "SearchConfig",
]

__docformat__ = "google"
