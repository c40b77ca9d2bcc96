"""Dotted-path access over nested mappings.

Keys are split on literal ``.`` only, so ``"a.b"`` addresses ``source["a"]["b"]``.
Nothing here knows about components; the same helpers shape dependency bags
and the final system mapping.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any


_MISSING = object()


def _walk(source: Any, key: str) -> Any:
    current = source
    for segment in key.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            return _MISSING
        current = current[segment]
    return current


def has_property(source: Any, key: str) -> bool:
    """Return True if every segment of `key` resolves to an existing entry."""
    return _walk(source, key) is not _MISSING


def get_property(source: Any, key: str, default: Any = None) -> Any:
    """Return the value at `key`, or `default` when any segment is missing."""
    value = _walk(source, key)
    return default if value is _MISSING else value


def set_property(source: MutableMapping[str, Any], key: str, value: Any) -> MutableMapping[str, Any]:
    """Write `value` at `key`, creating intermediate dicts as needed.

    Mutates and returns `source`. Raises TypeError when an existing
    intermediate value is not a mutable mapping.
    """
    *parents, last = key.split(".")
    current: Any = source
    for segment in parents:
        child = current.get(segment)
        if child is None:
            child = current[segment] = {}
        elif not isinstance(child, MutableMapping):
            msg = f"Cannot set {key!r}: {segment!r} holds a {type(child).__name__}, not a mapping"
            raise TypeError(msg)
        current = child
    current[last] = value
    return source
