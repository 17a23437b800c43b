"""Observability – turning arbitrary log messages into report text.

Precedence, first match wins:

1. mappings and list/tuple/set values → :func:`pprint.pformat` dump
2. objects with a callable ``to_json()`` (:class:`Jsonable`) → that JSON string
3. objects with a callable ``to_dict()`` (:class:`Arrayable`) → dump of the dict
4. anything else → ``str(message)``

Exceptions never reach this module; the logger reports them as-is.
"""
from __future__ import annotations

import pprint
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Jsonable(Protocol):
    """A value that can render itself as a JSON string."""

    def to_json(self) -> str: ...


@runtime_checkable
class Arrayable(Protocol):
    """A value that can render itself as a plain mapping."""

    def to_dict(self) -> Mapping[str, Any]: ...


def _is_structure(message: Any) -> bool:
    return isinstance(message, (Mapping, list, tuple, set, frozenset))


def dump_structure(value: Any) -> str:
    """Verbose, multi-line dump of *value*, nested structures included."""
    return pprint.pformat(value, indent=2, sort_dicts=False)


def _capability(message: Any, name: str) -> Any:
    # runtime_checkable protocols only test that the attribute exists
    method = getattr(message, name, None)
    return method if callable(method) else None


def format_message(message: Any) -> str:
    if _is_structure(message):
        return dump_structure(message)
    to_json = _capability(message, "to_json")
    if to_json is not None:
        return to_json()
    to_dict = _capability(message, "to_dict")
    if to_dict is not None:
        return dump_structure(to_dict())
    return str(message)


__all__ = ["Arrayable", "Jsonable", "dump_structure", "format_message"]
