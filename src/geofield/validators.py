"""Coordinate validation predicates."""

from numbers import Real
from typing import Any


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_point(value: Any) -> bool:
    """Return True if value is a ``[longitude, latitude]`` pair of numbers."""
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return False

    return _is_number(value[0]) and _is_number(value[1])


def are_points(values: Any) -> bool:
    """Return True if values is a non-empty sequence of valid points.

    An empty sequence is rejected so that "no points" is never mistaken for
    "valid points".
    """
    if not isinstance(values, (list, tuple)) or len(values) == 0:
        return False

    return all(is_point(value) for value in values)
