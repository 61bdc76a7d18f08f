"""
general.
========

Does: Group domain-agnostic helpers (data loading, debug logging) used by the
      color and search layers.
"""

__all__: list[str] = []
__docformat__ = "google"
