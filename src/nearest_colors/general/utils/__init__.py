# nearest_colors/general/utils/__init__.py
"""

Does: Provide palette data-file loading and topic-filtered debug tracing.
Returns: Public API via load_config/clear_config_cache and debug/is_enabled.
Used by: Palette sources, search, CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    clear_config_cache,
    data_dir,
    load_config,
)
from .log import (
    debug,
    enable_topics,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Data files
    "load_config",
    "clear_config_cache",
    "data_dir",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Debug tracing
    "debug",
    "enable_topics",
    "is_enabled",
    "reload_topics",
]
