"""Kernel support – mapping helpers."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def omit_key(data: Mapping[str, Any] | None, key: str) -> dict[str, Any]:
    """Return a new dict holding every entry of *data* except *key*.

    *data* itself is left untouched; ``None`` yields an empty dict.
    """
    if not data:
        return {}
    return {k: v for k, v in data.items() if k != key}


def get_or_default(data: Mapping[str, Any] | None, key: str, default: Any = None) -> Any:
    if not data:
        return default
    return data.get(key, default)


__all__ = ["get_or_default", "omit_key"]
