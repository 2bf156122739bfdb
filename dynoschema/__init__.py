"""
dynoschema: schema-driven DynamoDB table creation.

Tables are created from declarative JSON schemas, with table names
rewritten according to a connection-wide prefix:

    from dynoschema import db

    db.connect(prefix="staging")
    await db.create_table(load_schema("users.json")).wait()
"""

from .connection import Connection
from .errors import (
    ConfigurationError,
    DynoSchemaError,
    NotConnectedError,
    SchemaError,
    TableStatusTimeoutError,
)
from .factory import connect_from_url
from .methods import Method
from .methods.create_table import CreateTable
from .methods.delete_table import DeleteTable
from .methods.list_tables import ListTables
from .schema import Schema, load_schema, validate_schema
from .table import Table
from .waiters import wait_for_deletion, wait_for_status

# Default connection shared across an application
db = Connection()
connect = db.connect
table = db.table

__all__ = [
    "Connection",
    "Table",
    "Method",
    "CreateTable",
    "DeleteTable",
    "ListTables",
    "Schema",
    "load_schema",
    "validate_schema",
    "wait_for_status",
    "wait_for_deletion",
    "connect_from_url",
    "db",
    "connect",
    "table",
    "DynoSchemaError",
    "SchemaError",
    "ConfigurationError",
    "NotConnectedError",
    "TableStatusTimeoutError",
]
