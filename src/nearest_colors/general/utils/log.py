"""
log.py.

Does: Topic-filtered trace lines for the search, enabled through
      NEAREST_COLORS_DEBUG_TOPICS (comma-sep topic names or 'all') or --debug.
Returns: Timestamped "[topic][LEVEL] msg" lines on stderr; silent when no topic is on.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["DEBUG_TOPICS_ENV", "debug", "enable_topics", "is_enabled", "reload_topics"]

DEBUG_TOPICS_ENV = "NEAREST_COLORS_DEBUG_TOPICS"

_topics: set[str] = set()


def reload_topics() -> None:
    """Does: Replace the enabled topics with those listed in NEAREST_COLORS_DEBUG_TOPICS."""
    raw = os.getenv(DEBUG_TOPICS_ENV, "")
    _topics.clear()
    _topics.update(t.strip().lower() for t in raw.split(",") if t.strip())


def enable_topics(*topics: str) -> None:
    """Does: Turn on extra topics for this process (the CLI passes 'all')."""
    _topics.update(t.strip().lower() for t in topics if t.strip())


def is_enabled(topic: str) -> bool:
    """Does: Tell whether lines for `topic` would be printed; lets callers skip formatting."""
    return "all" in _topics or topic.lower().strip() in _topics


def debug(
    msg: str,
    topic: str = "search",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print `msg` with a timestamp, topic and level when `topic` is enabled."""
    if not is_enabled(topic):
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream or sys.stderr)


reload_topics()
