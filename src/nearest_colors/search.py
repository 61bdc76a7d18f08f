# search.py
from __future__ import annotations

"""
search.py
=========

Does: Find the N palette colors nearest to an input color in a chosen color
      space, after removing excluded names.
Returns:
  - nearest_colors(color, n=3) -> [
        {"name": "red-600", "value": "oklch(57.7% 0.245 27.325)", "distance": 0.0},
        {"name": "red-500", "value": "oklch(63.7% 0.237 25.331)", "distance": 13.7...},
        ...
    ]
Used by: CLI, and any caller needing palette lookups for arbitrary CSS colors.
"""

import heapq
import logging
from collections.abc import Iterable
from operator import itemgetter
from typing import FrozenSet, List, Optional

from rapidfuzz import fuzz, process

from nearest_colors.color.flatten import flatten_palette
from nearest_colors.color.oracle import color_distance, is_valid
from nearest_colors.color.palettes import DEFAULT_PALETTE, PALETTES, get_palette
from nearest_colors.errors import ConfigurationError, InvalidColorInput
from nearest_colors.general.utils.log import debug, is_enabled
from nearest_colors.types import SPACES, ColorMatch, FlatPalette, Palette

__all__ = ["INVALID_COLOR_NAMES", "nearest_colors"]

logger = logging.getLogger(__name__)

# Keyword-like palette entries that never denote a comparable color.
INVALID_COLOR_NAMES: FrozenSet[str] = frozenset({"inherit", "current", "transparent"})

SUGGESTION_MIN_SCORE = 80


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────
def _check_config(n: object, space: object, colors: Optional[Palette], palette: str) -> None:
    """Reject out-of-contract settings before any work is done."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ConfigurationError(f"n must be a positive integer, got {n!r}")
    if space not in SPACES:
        raise ConfigurationError(
            f"Unknown color space {space!r}; expected one of {', '.join(SPACES)}"
        )
    if colors is None and palette not in PALETTES:
        raise ConfigurationError(
            f"Unknown palette {palette!r}; expected one of {', '.join(PALETTES)}"
        )


def _normalize_exclude(exclude: Iterable[str] | str | None) -> FrozenSet[str]:
    if not exclude:
        return frozenset()
    if isinstance(exclude, str):
        return frozenset({exclude})
    return frozenset(exclude)


def _report_unknown_exclusions(excluded: FrozenSet[str], flat: FlatPalette) -> None:
    """Log exclusion names that match nothing, with the closest palette name if any."""
    names = list(flat)
    for name in sorted(excluded.difference(flat)):
        hit = process.extractOne(name, names, scorer=fuzz.ratio, score_cutoff=SUGGESTION_MIN_SCORE)
        if hit is not None:
            logger.info("Excluded color %r is not in the palette (did you mean %r?)", name, hit[0])
        else:
            logger.info("Excluded color %r is not in the palette", name)


def _measure(input_color: str, pool: Iterable[tuple[str, str]], space: str) -> List[ColorMatch]:
    """Annotate each (name, value) with its distance; unparseable values are skipped."""
    matches: List[ColorMatch] = []
    for name, value in pool:
        try:
            distance = color_distance(input_color, value, space)
        except ValueError:
            logger.warning("Skipping palette entry %r: %r is not a valid color", name, value)
            continue
        matches.append({"name": name, "value": value, "distance": distance})
    return matches


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────
def nearest_colors(
    input_color: str,
    *,
    colors: Optional[Palette] = None,
    exclude: Iterable[str] | None = (),
    n: int = 1,
    space: str = "lab",
    palette: str = DEFAULT_PALETTE,
) -> List[ColorMatch]:
    """
    Does: Return the `n` palette entries closest to `input_color`, nearest first.

    Args:
        input_color: Any CSS color (hex, name, rgb(), hsl(), lab(), oklch(), ...).
        colors: Palette to search; defaults to the built-in palette `palette`.
        exclude: Flat names to leave out, on top of INVALID_COLOR_NAMES.
        n: How many matches to return (at most the number of eligible entries).
        space: Color space the distance is measured in (see `types.SPACES`).
        palette: Built-in palette used when `colors` is not given.

    Returns:
        list of {"name", "value", "distance"} sorted by ascending distance;
        equal distances keep the palette order.

    Raises:
        ConfigurationError: bad `n`, `space` or `palette`.
        InvalidColorInput: `input_color` is not a valid CSS color.
    """
    _check_config(n, space, colors, palette)
    if not is_valid(input_color):
        raise InvalidColorInput(input_color)

    source = colors if colors is not None else get_palette(palette)
    flat = flatten_palette(source)

    caller_excluded = _normalize_exclude(exclude)
    if caller_excluded:
        _report_unknown_exclusions(caller_excluded, flat)
    excluded = INVALID_COLOR_NAMES | caller_excluded
    pool = [(name, value) for name, value in flat.items() if name not in excluded]
    if is_enabled("search"):
        debug(f"{input_color!r}: {len(flat)} entries, {len(flat) - len(pool)} excluded, space={space}")

    matches = _measure(input_color, pool, space)

    # nsmallest is stable: same result as sorted(...)[:n], ties in palette order.
    best = heapq.nsmallest(n, matches, key=itemgetter("distance"))
    if is_enabled("search"):
        debug("nearest: " + ", ".join(f"{m['name']}={m['distance']:.2f}" for m in best))
    return best
