"""
Polling helpers that wait for a table to settle after create or delete.
"""

import asyncio
import logging
import os
from typing import Any, Dict, Optional, Tuple

from botocore.exceptions import ClientError

from .errors import ConfigurationError, TableStatusTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 1.0
DEFAULT_MAX_ATTEMPTS = 30


def _resolve_polling(
    delay: Optional[float], max_attempts: Optional[int]
) -> Tuple[float, int]:
    """Fill in polling settings from the environment or the defaults."""
    try:
        if delay is None:
            delay = float(os.getenv("DYNAMODB_WAIT_DELAY", DEFAULT_DELAY))
        if max_attempts is None:
            max_attempts = int(
                os.getenv("DYNAMODB_WAIT_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)
            )
    except ValueError as e:
        raise ConfigurationError(f"Invalid table polling configuration: {e}") from e

    return delay, max_attempts


async def wait_for_status(
    client,
    table_name: str,
    status: str = "ACTIVE",
    delay: Optional[float] = None,
    max_attempts: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Poll ``describe_table`` until the table reaches ``status``.

    Args:
        client: DynamoDB client
        table_name: Resolved name of the table
        status: Expected ``TableStatus``
        delay: Seconds to sleep between attempts
        max_attempts: Number of describe calls before giving up

    Returns:
        The ``Table`` description of the last describe call

    Raises:
        TableStatusTimeoutError: If the status is not reached in time
        ConfigurationError: If the polling environment variables are invalid
        ClientError: If the describe call fails
    """
    delay, max_attempts = _resolve_polling(delay, max_attempts)

    current = None
    for attempt in range(max_attempts):
        response = await client.describe_table(TableName=table_name)
        table = response.get("Table", {})
        current = table.get("TableStatus")

        if current == status:
            logger.debug(f"Table {table_name} is {status}")
            return table

        logger.debug(
            f"Waiting for table {table_name} to become {status} "
            f"(currently {current}), attempt {attempt + 1}/{max_attempts}"
        )
        if attempt + 1 < max_attempts:
            await asyncio.sleep(delay)

    raise TableStatusTimeoutError(
        f"Table {table_name} did not become {status} after {max_attempts} attempts",
        table_name,
        last_status=current,
    )


async def wait_for_deletion(
    client,
    table_name: str,
    delay: Optional[float] = None,
    max_attempts: Optional[int] = None,
) -> None:
    """Poll ``describe_table`` until the table no longer exists."""
    delay, max_attempts = _resolve_polling(delay, max_attempts)

    current = None
    for attempt in range(max_attempts):
        try:
            response = await client.describe_table(TableName=table_name)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ResourceNotFoundException":
                logger.debug(f"Table {table_name} is gone")
                return
            raise

        current = response.get("Table", {}).get("TableStatus")
        logger.debug(
            f"Waiting for table {table_name} to be deleted "
            f"(currently {current}), attempt {attempt + 1}/{max_attempts}"
        )
        if attempt + 1 < max_attempts:
            await asyncio.sleep(delay)

    raise TableStatusTimeoutError(
        f"Table {table_name} was not deleted after {max_attempts} attempts",
        table_name,
        last_status=current,
    )
