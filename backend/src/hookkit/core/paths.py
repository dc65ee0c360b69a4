"""Dot-path resolution and structural comparison for records.

A field path such as ``a.c.d.e`` is walked one segment at a time through
mappings (by key) and sequences (by integer index). When any segment is
absent the walk stops and yields ``MISSING``, which is distinct from every
stored value, ``None`` included.

For comparison purposes ``MISSING`` and ``None`` are both "absent" and equal
to each other, so a key stored with ``None`` matches an omitted key.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any


class _MissingType:
    """Type of the ``MISSING`` sentinel."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _MissingType()


def split_path(field_path: str) -> list[str]:
    """Split a dot-delimited path into segments.

    Raises:
        ValueError: If the path is empty or has an empty segment
    """
    if not isinstance(field_path, str) or not field_path:
        raise ValueError("Field path must be a non-empty string")
    segments = field_path.split(".")
    if any(not segment for segment in segments):
        raise ValueError(f"Field path '{field_path}' has an empty segment")
    return segments


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _step(value: Any, segment: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(segment, MISSING)
    if _is_sequence(value):
        if not (segment.isascii() and segment.isdigit()):
            return MISSING
        index = int(segment)
        return value[index] if index < len(value) else MISSING
    return MISSING


def resolve_path(record: Any, field_path: str) -> Any:
    """Return the value at ``field_path`` in ``record``, or ``MISSING``.

    Example:
        >>> resolve_path({"a": {"c": {"d": {"e": 1}}}}, "a.c.d.e")
        1
        >>> resolve_path({"a": {}}, "a.b.c")
        <missing>
    """
    current = record
    for segment in split_path(field_path):
        current = _step(current, segment)
        if current is MISSING:
            return MISSING
    return current


def is_absent(value: Any) -> bool:
    """True for ``MISSING`` and ``None``."""
    return value is MISSING or value is None


def deep_equal(left: Any, right: Any) -> bool:
    """Structural equality over mappings, sequences and scalars.

    Mappings are equal when every key in either side compares equal, with
    omitted keys treated as absent. Sequences must match in length and
    element-wise. Scalars use ``==``, except that booleans never equal
    numbers and NaN equals NaN.
    """
    if is_absent(left) or is_absent(right):
        return is_absent(left) and is_absent(right)

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        keys = set(left) | set(right)
        return all(
            deep_equal(left.get(key, MISSING), right.get(key, MISSING))
            for key in keys
        )

    if _is_sequence(left) and _is_sequence(right):
        return len(left) == len(right) and all(
            deep_equal(a, b) for a, b in zip(left, right)
        )

    # A container never equals a scalar, or a container of the other kind
    if isinstance(left, Mapping) or isinstance(right, Mapping):
        return False
    if _is_sequence(left) or _is_sequence(right):
        return False

    if isinstance(left, bool) != isinstance(right, bool):
        return False
    if isinstance(left, float) and isinstance(right, float):
        if math.isnan(left) and math.isnan(right):
            return True
    return left == right
