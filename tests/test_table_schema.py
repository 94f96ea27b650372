"""Tests for the SQLAlchemy host schema."""

import pytest
from sqlalchemy import Column, Integer, MetaData, create_engine, inspect, select
from sqlalchemy.exc import DuplicateColumnError

from geofield import attach_geo_field, create_point
from geofield.table_schema import TableSchema, column_name


@pytest.fixture
def metadata():
    return MetaData()


@pytest.fixture
def places(metadata):
    return TableSchema.create("places", metadata, Column("id", Integer, primary_key=True))


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


class TestTableSchema:
    """Tests for geo columns declared through the plugin."""

    def test_dotted_path_column_name(self):
        """Dots in a path become underscores."""
        assert column_name("address.location") == "address_location"

    def test_defines_json_column(self, places):
        """The field becomes a JSON column holding its definition."""
        attach_geo_field(places, {"path": "address.location", "type": "Point", "required": True})
        column = places.table.c["address_location"]
        assert column.nullable is False
        assert places.definition_at("address.location")["type"]["default"] == "Point"

    def test_optional_column_is_nullable(self, places):
        """Fields without required accept NULL."""
        attach_geo_field(places, {})
        assert places.table.c["location"].nullable is True

    def test_index_carries_spec(self, places):
        """The index spec is stored on the created index."""
        attach_geo_field(places, {})
        (index,) = places.table.indexes
        assert index.name == "ix_places_location"
        assert index.info["index_spec"] == {"type": "2dsphere", "sparse": True}
        assert index.dialect_options["sqlite"]["where"] is not None

    def test_dense_index_has_no_where_clause(self, places):
        """Non-sparse specs create a full index."""
        attach_geo_field(places, {"index": {"type": "2dsphere", "sparse": False}})
        (index,) = places.table.indexes
        assert index.dialect_options["sqlite"]["where"] is None

    def test_duplicate_path_fails(self, places):
        """Defining a path twice raises the SQLAlchemy error."""
        attach_geo_field(places, {})
        with pytest.raises(DuplicateColumnError):
            attach_geo_field(places, {})

    def test_index_on_undefined_path_fails(self, places):
        """Indexing a path that was never defined raises KeyError."""
        with pytest.raises(KeyError):
            places.get_indexable_at("nowhere")

    def test_create_and_store_geometry(self, places, metadata, engine):
        """The table can be created and stores geometries."""
        attach_geo_field(places, {"type": "Point"})
        metadata.create_all(engine)

        assert [ix["name"] for ix in inspect(engine).get_indexes("places")] == [
            "ix_places_location"
        ]

        point = create_point([13.4, 52.5]).model_dump(mode="json")
        with engine.begin() as conn:
            conn.execute(places.table.insert().values(id=1, location=point))
            stored = conn.execute(select(places.table.c.location)).scalar_one()

        assert stored == {"type": "Point", "coordinates": [13.4, 52.5]}
