"""Pytest configuration and fixtures for geofield tests."""

from typing import Any

import pytest


class RecordingIndexable:
    """Indexable handle that records the specs applied to it."""

    def __init__(self, schema: "RecordingSchema", path: str):
        self.schema = schema
        self.path = path

    def set_index(self, spec: dict[str, Any]) -> None:
        self.schema.indexes[self.path] = spec
        self.schema.calls.append(("set_index", self.path))


class RecordingSchema:
    """In-memory host schema recording paths, indexes and call order."""

    def __init__(self):
        self.paths: dict[str, dict[str, Any]] = {}
        self.indexes: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, str]] = []

    def define_path(self, path: str, definition: dict[str, Any]) -> None:
        self.paths[path] = definition
        self.calls.append(("define_path", path))

    def get_indexable_at(self, path: str) -> RecordingIndexable:
        if path not in self.paths:
            raise KeyError(path)
        return RecordingIndexable(self, path)


@pytest.fixture
def schema():
    """Empty recording host schema."""
    return RecordingSchema()


@pytest.fixture
def square():
    """Ring of a unit square, not closed."""
    return [[0, 0], [1, 0], [1, 1], [0, 1]]
