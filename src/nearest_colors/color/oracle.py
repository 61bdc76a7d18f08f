"""
oracle.py
=========

Does: Validate CSS color strings and measure the distance between two colors
      in one of the supported color spaces.
Used By: Nearest-color search (input validation + per-entry distances).
Returns: Validity (bool), channel vectors (tuple[float, ...]), distances (float).

Every color is parsed with coloraide, clipped into the sRGB gamut, then
expressed in the channels of the requested space:

    rgb    r, g, b in 0..255           gl     r, g, b, alpha in 0..1
    cmyk   c, m, y, k in 0..1          hcg    hue°, chroma, gray in 0..100
    hsl    hue°, saturation, lightness hsv    hue°, saturation, value
    hsi    hue°, saturation, intensity
    lab    CIE L*a*b* (D65)            lch    CIE L*C*h° (D65)
    hcl    h°, C*, L* (D65)
    oklab  L, a, b (L in 0..1)         oklch  L, C, h°

The distance is the Euclidean norm of the channel difference. An undefined
hue (achromatic color) counts as 0.
"""

from __future__ import annotations

import colorsys
import logging
import math
from functools import lru_cache
from typing import Callable, Dict, Tuple

from coloraide import Color

from nearest_colors.types import SPACES

# Public surface
__all__ = [
    "RGBA",
    "is_valid",
    "to_srgb",
    "channels",
    "color_distance",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGBA = Tuple[float, float, float, float]
Channels = Tuple[float, ...]


# =============================================================================
# 1) PARSING
# =============================================================================

def is_valid(color: object) -> bool:
    """Does: Tell whether `color` parses as a CSS color (hex, name, rgb(), oklch(), ...)."""
    if not isinstance(color, str):
        return False
    try:
        Color(color)
    except ValueError:
        return False
    return True


def _finite(v: float) -> float:
    return 0.0 if math.isnan(v) else float(v)


def _clamp(v: float) -> float:
    return min(max(_finite(v), 0.0), 1.0)


@lru_cache(maxsize=4096)
def to_srgb(color: str) -> RGBA:
    """Does: Parse a CSS color and clip it into sRGB; raise ValueError if unparseable."""
    srgb = Color(color).convert("srgb")
    r, g, b = (_clamp(c) for c in srgb.coords())
    return r, g, b, _clamp(srgb.alpha())


# =============================================================================
# 2) CHANNEL EXTRACTORS (one per space, all from clipped sRGB)
# =============================================================================

def _hue_degrees(h: float) -> float:
    return _finite(h) % 360.0


def _rgb(rgba: RGBA) -> Channels:
    r, g, b, _ = rgba
    return r * 255.0, g * 255.0, b * 255.0


def _gl(rgba: RGBA) -> Channels:
    return rgba


def _cmyk(rgba: RGBA) -> Channels:
    r, g, b, _ = rgba
    k = 1.0 - max(r, g, b)
    if k >= 1.0:
        return 0.0, 0.0, 0.0, 1.0
    f = 1.0 / (1.0 - k)
    return (1.0 - r - k) * f, (1.0 - g - k) * f, (1.0 - b - k) * f, k


def _hsl(rgba: RGBA) -> Channels:
    h, l, s = colorsys.rgb_to_hls(*rgba[:3])
    return h * 360.0, s, l


def _hsv(rgba: RGBA) -> Channels:
    h, s, v = colorsys.rgb_to_hsv(*rgba[:3])
    return h * 360.0, s, v


def _hsi(rgba: RGBA) -> Channels:
    r, g, b, _ = rgba
    i = (r + g + b) / 3.0
    s = 1.0 - min(r, g, b) / i if i > 0 else 0.0
    if s == 0.0:
        return 0.0, 0.0, i
    denom = math.sqrt((r - g) ** 2 + (r - b) * (g - b))
    h = math.acos(max(-1.0, min(1.0, ((r - g) + (r - b)) / 2.0 / denom))) if denom else 0.0
    if b > g:
        h = 2 * math.pi - h
    return math.degrees(h), s, i


def _hcg(rgba: RGBA) -> Channels:
    r, g, b = (c * 255.0 for c in rgba[:3])
    lo, hi = min(r, g, b), max(r, g, b)
    delta = hi - lo
    chroma = delta * 100.0 / 255.0
    gray = lo / (255.0 - delta) * 100.0 if delta < 255.0 else 0.0
    if delta == 0:
        return 0.0, chroma, gray
    if r == hi:
        h = (g - b) / delta
    elif g == hi:
        h = 2.0 + (b - r) / delta
    else:
        h = 4.0 + (r - g) / delta
    return (h * 60.0) % 360.0, chroma, gray


# CIE Lab with a D65 reference white, from coloraide's XYZ-D65.
_D65_WHITE = (0.95047, 1.00000, 1.08883)


def _f_lab(t: float) -> float:
    d = 6 / 29
    return t ** (1 / 3) if t > d ** 3 else (t / (3 * d * d) + 4 / 29)


def _lab(rgba: RGBA) -> Channels:
    r, g, b, _ = rgba
    x, y, z = Color("srgb", [r, g, b]).convert("xyz-d65").coords()
    Xn, Yn, Zn = _D65_WHITE
    fx, fy, fz = _f_lab(x / Xn), _f_lab(y / Yn), _f_lab(z / Zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def _lch(rgba: RGBA) -> Channels:
    L, a, b = _lab(rgba)
    c = math.hypot(a, b)
    h = math.degrees(math.atan2(b, a)) % 360.0 if c > 1e-9 else 0.0
    return L, c, h


def _hcl(rgba: RGBA) -> Channels:
    L, c, h = _lch(rgba)
    return h, c, L


def _oklab(rgba: RGBA) -> Channels:
    r, g, b, _ = rgba
    return tuple(_finite(v) for v in Color("srgb", [r, g, b]).convert("oklab").coords())


def _oklch(rgba: RGBA) -> Channels:
    r, g, b, _ = rgba
    L, c, h = Color("srgb", [r, g, b]).convert("oklch").coords()
    return _finite(L), _finite(c), _hue_degrees(h)


_EXTRACTORS: Dict[str, Callable[[RGBA], Channels]] = {
    "cmyk": _cmyk,
    "gl": _gl,
    "hcg": _hcg,
    "hcl": _hcl,
    "hsi": _hsi,
    "hsl": _hsl,
    "hsv": _hsv,
    "lab": _lab,
    "lch": _lch,
    "oklab": _oklab,
    "oklch": _oklch,
    "rgb": _rgb,
}


# =============================================================================
# 3) DISTANCE
# =============================================================================

@lru_cache(maxsize=8192)
def channels(color: str, space: str) -> Channels:
    """Does: Express a CSS color in the channels of `space` (see module docstring)."""
    try:
        extract = _EXTRACTORS[space]
    except KeyError:
        raise ValueError(f"Unknown color space {space!r}; expected one of {', '.join(SPACES)}") from None
    return tuple(extract(to_srgb(color)))


def color_distance(color1: str, color2: str, space: str = "lab") -> float:
    """Does: Euclidean distance between two CSS colors in `space`; 0 for identical colors."""
    return math.dist(channels(color1, space), channels(color2, space))
