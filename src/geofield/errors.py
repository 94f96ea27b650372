"""Exceptions raised by geometry helpers."""


class InvalidGeometryError(ValueError):
    """Raised when coordinates passed to a geometry helper are malformed."""
