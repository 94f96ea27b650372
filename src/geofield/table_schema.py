"""SQLAlchemy host schema: geo fields as JSON columns on a table."""

from typing import Any

from sqlalchemy import JSON, Column, Index, MetaData, Table
from sqlalchemy.dialects.postgresql import JSONB

# Database-agnostic JSON type: JSONB on Postgres, JSON on SQLite/others
JSONVariant = JSON().with_variant(JSONB(), "postgresql")


def column_name(path: str) -> str:
    """Column name used for a dotted schema path."""
    return path.replace(".", "_")


class SpatialIndexHandle:
    """Indexable handle on a geo column."""

    def __init__(self, table: Table, column: Column):
        self.table = table
        self.column = column

    def set_index(self, spec: dict[str, Any]) -> Index:
        """Create the index described by ``spec`` on the column.

        The spec is kept in ``Index.info``. A sparse spec becomes a partial
        index skipping NULL rows.
        """
        dialect_kw: dict[str, Any] = {"postgresql_using": "gin"}
        if spec.get("sparse"):
            dialect_kw["postgresql_where"] = self.column.is_not(None)
            dialect_kw["sqlite_where"] = self.column.is_not(None)

        return Index(
            f"ix_{self.table.name}_{self.column.name}",
            self.column,
            info={"index_spec": dict(spec)},
            **dialect_kw,
        )


class TableSchema:
    """Host schema backed by a SQLAlchemy ``Table``."""

    def __init__(self, table: Table):
        self.table = table

    @classmethod
    def create(cls, name: str, metadata: MetaData, *columns: Any) -> "TableSchema":
        """Create a schema for a new table on ``metadata``."""
        return cls(Table(name, metadata, *columns))

    def define_path(self, path: str, definition: dict[str, Any]) -> None:
        # append_column raises DuplicateColumnError for a path defined twice
        name = column_name(path)
        required = bool(definition.get("type", {}).get("required"))
        self.table.append_column(
            Column(name, JSONVariant, nullable=not required, info={"geojson": definition})
        )

    def get_indexable_at(self, path: str) -> SpatialIndexHandle:
        # Raises KeyError for paths that were never defined
        return SpatialIndexHandle(self.table, self.table.c[column_name(path)])

    def definition_at(self, path: str) -> dict[str, Any]:
        """Field definition registered at ``path``."""
        return self.table.c[column_name(path)].info["geojson"]
