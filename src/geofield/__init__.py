"""GeoJSON geometry helpers and a schema plugin for geo fields."""

from geofield.boundary import polygon_to_boundary, polygon_to_boundary_polygon
from geofield.errors import InvalidGeometryError
from geofield.factories import create_line_string, create_point, create_polygon
from geofield.plugin import (
    GeoFieldOptions,
    HostSchema,
    Indexable,
    attach_geo_field,
    build_field_definition,
)
from geofield.types import Geometry, GeometryType
from geofield.units import EARTH_RADIUS_METERS, distance_multiplier, meter_to_radian
from geofield.validators import are_points, is_point

__version__ = "0.1.0"
__all__ = [
    # Plugin
    "GeoFieldOptions",
    "HostSchema",
    "Indexable",
    "attach_geo_field",
    "build_field_definition",
    # Types
    "Geometry",
    "GeometryType",
    "InvalidGeometryError",
    # Validation
    "are_points",
    "is_point",
    # Factories
    "create_line_string",
    "create_point",
    "create_polygon",
    # Units
    "EARTH_RADIUS_METERS",
    "distance_multiplier",
    "meter_to_radian",
    # Boundary
    "polygon_to_boundary",
    "polygon_to_boundary_polygon",
]
