"""Bounding box derivation from a set of points."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from geofield.errors import InvalidGeometryError
from geofield.validators import are_points

logger = logging.getLogger(__name__)


def _to_coordinate(point: Any) -> Any:
    """Read a point as ``[lng, lat]``.

    Mappings and objects exposing ``lat``/``lng`` are converted, anything else
    is assumed to already be a coordinate pair.
    """
    if isinstance(point, Mapping):
        return [point.get("lng"), point.get("lat")]
    if hasattr(point, "lat") and hasattr(point, "lng"):
        return [point.lng, point.lat]
    return point


def polygon_to_boundary(points: Sequence[Any]) -> list[list[float]]:
    """Convert a polygon to its bounding box.

    ``left``/``right`` hold the min/max latitude and ``top``/``bottom`` the
    min/max longitude. On ties the first point reaching the extremum wins.

    Args:
        points: Points with ``lat``/``lng`` keys or attributes, or
            ``[lng, lat]`` pairs.

    Returns:
        ``[[top, left], [bottom, right]]``

    Raises:
        InvalidGeometryError: If ``points`` is empty or holds an invalid point.
    """
    coordinates = (
        [_to_coordinate(point) for point in points]
        if isinstance(points, (list, tuple))
        else points
    )
    if not are_points(coordinates):
        logger.debug("Rejected boundary points: %r", points)
        raise InvalidGeometryError("One of points has no valid format")

    top, left = coordinates[0]
    bottom, right = coordinates[0]

    for lng, lat in coordinates[1:]:
        if lat < left:
            left = lat
        if lat > right:
            right = lat

        if lng < top:
            top = lng
        if lng > bottom:
            bottom = lng

    return [[top, left], [bottom, right]]


def polygon_to_boundary_polygon(points: Sequence[Any]) -> list[list[Any]]:
    """Convert a polygon to the closed ring of its bounding box.

    The third entry wraps the bottom-right corner in a one-element list,
    unlike the other corners. Callers read it as ``ring[2][0]``.

    Raises:
        InvalidGeometryError: If ``points`` is empty or holds an invalid point.
    """
    top_left, bottom_right = polygon_to_boundary(points)

    return [
        top_left,
        [top_left[0], bottom_right[1]],
        [bottom_right],
        [bottom_right[0], top_left[1]],
        top_left,
    ]
