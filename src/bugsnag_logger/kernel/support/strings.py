"""Kernel support – string helpers."""
from __future__ import annotations

DEFAULT_LIMIT = 100
DEFAULT_END = "..."


def truncate(value: str, limit: int = DEFAULT_LIMIT, end: str = DEFAULT_END) -> str:
    """Limit *value* to *limit* characters.

    Strings already within the limit come back unchanged.  Longer ones are
    cut at *limit*, stripped of trailing whitespace and suffixed with *end*.

    Example::

        truncate("The quick brown fox", 9)  # "The quick..."
    """
    if len(value) <= limit:
        return value
    return value[:limit].rstrip() + end


__all__ = ["DEFAULT_END", "DEFAULT_LIMIT", "truncate"]
