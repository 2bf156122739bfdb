"""
Declarative table schemas.

A schema is a plain dictionary in the shape DynamoDB expects for
``CreateTable``. It is passed through as-is; only the table name is
rewritten to the resolved (prefixed or raw) name.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Union

from .errors import SchemaError

logger = logging.getLogger(__name__)

Schema = Dict[str, Any]


def validate_schema(schema: Any, require_name: bool = True) -> Schema:
    """
    Check that a schema can be turned into a create request.

    Args:
        schema: The user supplied schema
        require_name: Whether ``TableName`` must be present

    Returns:
        The schema, unchanged

    Raises:
        SchemaError: If the schema is not a mapping or has no table name
    """
    if not isinstance(schema, Mapping):
        raise SchemaError(
            f"Expected `schema` to be of type `dict`, got `{type(schema).__name__}`"
        )

    if require_name and not schema.get("TableName"):
        raise SchemaError("Schema is missing a `TableName`")

    return schema


def load_schema(path: Union[str, Path]) -> Schema:
    """Load a JSON schema file."""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        schema = json.load(f)

    logger.debug(f"Loaded schema from {path}")
    return validate_schema(schema, require_name=False)
