"""
Exception hierarchy for dynoschema.

Validation problems are raised before any request reaches DynamoDB.
Service failures are not wrapped: the ``botocore.exceptions.ClientError``
raised by the client reaches the caller unchanged.
"""

from typing import Optional


class DynoSchemaError(Exception):
    """Base exception for dynoschema errors."""

    def __init__(self, message: str, table_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.table_name = table_name


class SchemaError(DynoSchemaError, ValueError):
    """Raised when a table schema is missing or incomplete."""

    pass


class ConfigurationError(DynoSchemaError):
    """Raised when connection configuration is invalid."""

    pass


class NotConnectedError(DynoSchemaError):
    """Raised when a query is executed before ``connect()``."""

    pass


class TableStatusTimeoutError(DynoSchemaError):
    """Raised when a table does not reach the expected status in time."""

    def __init__(
        self,
        message: str,
        table_name: Optional[str] = None,
        last_status: Optional[str] = None,
    ) -> None:
        super().__init__(message, table_name)
        self.last_status = last_status


__all__ = [
    "DynoSchemaError",
    "SchemaError",
    "ConfigurationError",
    "NotConnectedError",
    "TableStatusTimeoutError",
]
