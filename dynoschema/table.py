"""
Table handle: a resolved table name bound to a connection.
"""

from typing import TYPE_CHECKING, Any

from .methods.create_table import CreateTable
from .methods.delete_table import DeleteTable
from .schema import validate_schema

if TYPE_CHECKING:
    from .connection import Connection


class Table:
    """A table whose name has already been prefixed (or left raw)."""

    def __init__(self, connection: "Connection", name: str) -> None:
        self.connection = connection
        self.name = name

    def create(self, schema: Any = None) -> CreateTable:
        """
        Build a query that creates this table from ``schema``.

        The ``TableName`` of the schema is ignored in favour of this
        table's name.

        Raises:
            SchemaError: If no schema is provided
        """
        validate_schema(schema, require_name=False)
        return CreateTable(self, schema)

    def drop(self) -> DeleteTable:
        """Build a query that deletes this table."""
        return DeleteTable(self)

    def __repr__(self) -> str:
        return f"Table(name={self.name!r})"
