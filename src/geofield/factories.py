"""Factories building geometries that can be stored as a location field."""

import logging
from collections.abc import Sequence

from geofield.errors import InvalidGeometryError
from geofield.types import Geometry, GeometryType
from geofield.validators import are_points, is_point

logger = logging.getLogger(__name__)


def create_point(point: Sequence[float]) -> Geometry:
    """Create a Point geometry.

    Args:
        point: Point coordinates ``[longitude, latitude]``.

    Returns:
        Point geometry wrapping the given coordinates.

    Raises:
        InvalidGeometryError: If ``point`` is not a valid coordinate pair.
    """
    if not is_point(point):
        logger.debug("Rejected point coordinates: %r", point)
        raise InvalidGeometryError("Point has no valid format")

    return Geometry(type=GeometryType.POINT, coordinates=point)


def create_line_string(point1: Sequence[float], point2: Sequence[float]) -> Geometry:
    """Create a LineString geometry from its first and last point.

    Only two-point lines are supported.

    Raises:
        InvalidGeometryError: If either point is not a valid coordinate pair.
    """
    if not are_points([point1, point2]):
        logger.debug("Rejected line string coordinates: %r, %r", point1, point2)
        raise InvalidGeometryError("One of points has no valid format")

    return Geometry(type=GeometryType.LINE_STRING, coordinates=[point1, point2])


def create_polygon(ring: Sequence[Sequence[float]]) -> Geometry:
    """Create a Polygon geometry holding a single ring.

    The ring is not checked for closure or a minimum number of points.

    Raises:
        InvalidGeometryError: If ``ring`` is empty or holds an invalid point.
    """
    if not are_points(ring):
        logger.debug("Rejected polygon ring: %r", ring)
        raise InvalidGeometryError("One of points has no valid format")

    return Geometry(type=GeometryType.POLYGON, coordinates=[[ring]])
