"""
errors.py.

Does: Define the caller-visible errors raised by the nearest-color search.
Used by: search, palette sources, CLI.
"""

from __future__ import annotations

__all__ = ["NearestColorsError", "InvalidColorInput", "ConfigurationError"]


class NearestColorsError(Exception):
    """Base class for errors raised by this package."""


class InvalidColorInput(NearestColorsError, TypeError):
    """Raise when the input color is not a valid CSS color."""

    def __init__(self, color: object):
        self.color = color
        super().__init__(f"Invalid color input: {color!r}")


class ConfigurationError(NearestColorsError, ValueError):
    """Raise when n, the color space, or the palette name is out of contract."""
