"""Schema plugin declaring a GeoJSON field with a spatial index.

The host schema is any object implementing :class:`HostSchema`. The plugin
calls ``define_path`` and then ``get_indexable_at(path).set_index(index)``;
the two calls are not atomic and nothing is rolled back if indexing fails.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from geofield.config import settings
from geofield.types import GeometryType

logger = logging.getLogger(__name__)


class Indexable(Protocol):
    """Handle on a schema path that accepts an index specification."""

    def set_index(self, spec: dict[str, Any]) -> None: ...


class HostSchema(Protocol):
    """Schema system a geo field can be attached to."""

    def define_path(self, path: str, definition: dict[str, Any]) -> None: ...

    def get_indexable_at(self, path: str) -> Indexable: ...


SchemaT = TypeVar("SchemaT", bound=HostSchema)


@dataclass
class GeoFieldOptions:
    """Options for :func:`attach_geo_field`.

    ``type`` is a single geometry type, a sequence of allowed types, or None
    to allow every type. ``path`` and ``index`` fall back to the configured
    defaults when not given.
    """

    type: str | Sequence[str] | None = None
    required: bool = False
    path: str | None = None
    index: dict[str, Any] | None = None

    @classmethod
    def from_value(cls, options: "GeoFieldOptions | Mapping[str, Any] | None") -> "GeoFieldOptions":
        """Normalize caller options, applying defaults to missing values.

        An empty ``type`` sequence allows every type and an empty ``path``
        uses the default path. An explicit ``index``, even ``{}``, is passed
        to the host unchanged; only a missing one gets the default.
        """
        if options is None:
            options = {}
        if isinstance(options, GeoFieldOptions):
            options = vars(options)

        index = options.get("index")
        return cls(
            type=options.get("type") or None,
            required=bool(options.get("required")),
            path=options.get("path") or settings.default_path,
            index=settings.default_index() if index is None else index,
        )


def build_field_definition(
    geometry_type: str | Sequence[str] | None, required: bool = False
) -> dict[str, Any]:
    """Build the field definition registered on the host schema.

    A single type becomes the fixed default, a sequence becomes the allowed
    values with its first entry as default. Coordinates are constrained to
    numbers only when ``geometry_type`` is exactly ``"Point"``; a sequence
    holding only ``"Point"`` keeps the untyped nested-array constraint.
    """
    allowed = geometry_type or [t.value for t in GeometryType]

    definition: dict[str, Any] = {
        "type": {"type": str},
        "coordinates": [],
    }

    if isinstance(allowed, str):
        definition["type"]["default"] = allowed
    else:
        definition["type"]["enum"] = list(allowed)
        definition["type"]["default"] = allowed[0]

    if geometry_type == GeometryType.POINT:
        definition["coordinates"].append({"type": float})
    else:
        definition["coordinates"].append({"type": []})

    if required:
        definition["type"]["required"] = True

    return definition


def attach_geo_field(
    schema: SchemaT, options: GeoFieldOptions | Mapping[str, Any] | None = None
) -> SchemaT:
    """Declare a GeoJSON field and its spatial index on a host schema.

    Args:
        schema: Host schema to register the field on.
        options: ``type``, ``required``, ``path`` and ``index`` options.

    Returns:
        The same schema, for chaining.
    """
    resolved = GeoFieldOptions.from_value(options)
    definition = build_field_definition(resolved.type, resolved.required)

    schema.define_path(resolved.path, definition)
    schema.get_indexable_at(resolved.path).set_index(resolved.index)

    logger.info(
        "Attached geo field at %s (default type: %s, index: %s)",
        resolved.path,
        definition["type"]["default"],
        resolved.index,
    )
    return schema
