"""
CreateTable query: schema in, ``create_table`` request out.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from botocore.exceptions import ClientError

from . import Method
from ..schema import Schema
from ..waiters import wait_for_status

if TYPE_CHECKING:
    from ..table import Table

logger = logging.getLogger(__name__)


class CreateTable(Method):
    """
    Create a table from a declarative schema.

    The schema is copied and its ``TableName`` is replaced by the resolved
    name of the table the query was created for.

    Example:
        await db.create_table(schema).wait().exec()
    """

    def __init__(self, table: "Table", schema: Schema) -> None:
        super().__init__(table)
        self.schema = schema
        self._should_wait = False
        self._wait_delay: Optional[float] = None
        self._wait_max_attempts: Optional[int] = None
        self._ignore_existing = False

    def wait(
        self, delay: Optional[float] = None, max_attempts: Optional[int] = None
    ) -> "CreateTable":
        """Wait until the table is ``ACTIVE`` before ``exec`` returns."""
        self._should_wait = True
        self._wait_delay = delay
        self._wait_max_attempts = max_attempts
        return self

    def if_not_exists(self) -> "CreateTable":
        """Do not fail when the table already exists."""
        self._ignore_existing = True
        return self

    def build_raw_query(self) -> Dict[str, Any]:
        return {**self.schema, "TableName": self.table.name}

    async def exec(self) -> Dict[str, Any]:
        """
        Send the create request and optionally wait for the table.

        Returns:
            The table description

        Raises:
            NotConnectedError: If the connection has no client
            TableStatusTimeoutError: If waiting and the table stays inactive
            ClientError: If DynamoDB rejects the request
        """
        client = await self.connection.get_client()
        name = self.table.name
        description: Dict[str, Any] = {}

        try:
            response = await client.create_table(**self.build_raw_query())
            description = (response or {}).get("TableDescription", {})
            logger.info(f"Created table {name}")

        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if self._ignore_existing and error_code == "ResourceInUseException":
                logger.info(f"Table {name} already exists")
            else:
                logger.error(
                    f"DynamoDB error creating table {name}: {error_code}",
                    exc_info=True,
                )
                raise

        if self._should_wait:
            description = await wait_for_status(
                client,
                name,
                "ACTIVE",
                delay=self._wait_delay,
                max_attempts=self._wait_max_attempts,
            )
            logger.info(f"Table {name} is active")

        return description
