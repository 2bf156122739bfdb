"""
DeleteTable query.
"""

import logging
from typing import Any, Dict, Optional

from botocore.exceptions import ClientError

from . import Method
from ..waiters import wait_for_deletion

logger = logging.getLogger(__name__)


class DeleteTable(Method):
    """Delete a table, optionally waiting until it is gone."""

    def __init__(self, table) -> None:
        super().__init__(table)
        self._should_wait = False
        self._wait_delay: Optional[float] = None
        self._wait_max_attempts: Optional[int] = None

    def wait(
        self, delay: Optional[float] = None, max_attempts: Optional[int] = None
    ) -> "DeleteTable":
        self._should_wait = True
        self._wait_delay = delay
        self._wait_max_attempts = max_attempts
        return self

    def build_raw_query(self) -> Dict[str, Any]:
        return {"TableName": self.table.name}

    async def exec(self) -> Dict[str, Any]:
        client = await self.connection.get_client()
        name = self.table.name

        try:
            response = await client.delete_table(**self.build_raw_query())
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            logger.error(
                f"DynamoDB error deleting table {name}: {error_code}", exc_info=True
            )
            raise

        logger.info(f"Deleted table {name}")

        if self._should_wait:
            await wait_for_deletion(
                client,
                name,
                delay=self._wait_delay,
                max_attempts=self._wait_max_attempts,
            )

        return (response or {}).get("TableDescription", {})
