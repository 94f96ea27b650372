"""Core geometry types shared by the factories and the schema plugin."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator


class GeometryType(StrEnum):
    """GeoJSON geometry type labels."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"

    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


class Geometry(BaseModel):
    """A GeoJSON-like geometry that can be stored as a location document.

    The shape of ``coordinates`` depends on ``type``: a single coordinate for
    points, two coordinates for line strings and a single ring wrapped twice
    for polygons. Coordinates are held as nested tuples, so the geometry
    never shares state with the caller's lists, and dumped as nested lists.
    """

    model_config = ConfigDict(frozen=True)

    type: GeometryType
    coordinates: tuple[Any, ...]

    @field_validator("coordinates", mode="before")
    @classmethod
    def freeze_coordinates(cls, v):
        """Copy nested lists and tuples into nested tuples."""
        return _freeze(v)

    @field_serializer("coordinates")
    def serialize_coordinates(self, coordinates: tuple[Any, ...]) -> list[Any]:
        return _thaw(coordinates)
