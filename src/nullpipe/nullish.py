"""Nullish predicate: decide whether a value is one of a chain's markers."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping, Sequence, Set
from typing import Any

import msgspec

__all__ = ['is_nullish']

_NOT_ENCODABLE = object()


def _is_composite(marker: object) -> bool:
    """Check if a marker is compared structurally rather than by identity."""
    if marker is None or isinstance(marker, str | bytes | bytearray):
        return False
    if isinstance(marker, msgspec.Struct):
        return True
    if dataclasses.is_dataclass(marker) and not isinstance(marker, type):
        return True
    return isinstance(marker, Mapping | Sequence | Set)


def _encode(value: object) -> bytes | object:
    """Serialize a value to JSON, or return a sentinel if it can't be encoded."""
    try:
        return msgspec.json.encode(value)
    except (msgspec.EncodeError, TypeError, ValueError, OverflowError):
        return _NOT_ENCODABLE


def _matches_scalar(value: object, marker: object) -> bool:
    if value is marker:
        return True
    # Same exact type only: 0 never matches False, 1.0 never matches 1.
    return type(value) is type(marker) and bool(value == marker)


def is_nullish(value: Any, markers: Iterable[Any]) -> bool:
    """Return True if ``value`` matches any of ``markers``.

    Composite markers (mappings, lists, tuples, sets, msgspec Structs and
    dataclass instances) match when their JSON encoding is byte-for-byte
    equal to the value's. The comparison is order sensitive: ``{'a': 1,
    'b': 2}`` does not match ``{'b': 2, 'a': 1}``. Every other marker
    matches by identity or by equality within the same type. Falsy values
    are never treated as nullish unless they are declared markers.

    Args:
        value: The value to test.
        markers: The chain's nullish markers.

    Returns:
        True if some marker matches.

    Example:
        ```python
        is_nullish(None, [None])         # True
        is_nullish(0, [None])            # False
        is_nullish([1, 2], [[1, 2]])     # True
        is_nullish({'type': 'null', 'x': 1}, [{'type': 'null'}])  # False
        ```
    """
    encoded: bytes | object | None = None
    for marker in markers:
        if _is_composite(marker):
            if encoded is None:
                encoded = _encode(value)
            if encoded is _NOT_ENCODABLE:
                continue
            marker_encoded = _encode(marker)
            if marker_encoded is not _NOT_ENCODABLE and marker_encoded == encoded:
                return True
        elif _matches_scalar(value, marker):
            return True
    return False
