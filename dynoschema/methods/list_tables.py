"""
ListTables query.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Generator, List, Optional

from botocore.exceptions import ClientError

if TYPE_CHECKING:
    from ..connection import Connection

logger = logging.getLogger(__name__)


class ListTables:
    """
    List the tables visible through a connection.

    When the connection has a prefix, only tables under that prefix are
    returned, with the prefix stripped.
    """

    def __init__(self, connection: "Connection") -> None:
        self.connection = connection

    def build_raw_query(
        self, exclusive_start: Optional[str] = None
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if exclusive_start:
            params["ExclusiveStartTableName"] = exclusive_start
        return params

    async def exec(self) -> List[str]:
        client = await self.connection.get_client()

        names: List[str] = []
        last_evaluated = None
        try:
            while True:
                response = await client.list_tables(
                    **self.build_raw_query(last_evaluated)
                )
                names.extend(response.get("TableNames", []))
                last_evaluated = response.get("LastEvaluatedTableName")
                if not last_evaluated:
                    break
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            logger.error(f"DynamoDB error listing tables: {error_code}", exc_info=True)
            raise

        prefix = self.connection.table_prefix
        if not prefix:
            return names

        return [name[len(prefix):] for name in names if name.startswith(prefix)]

    def __await__(self) -> Generator[Any, None, List[str]]:
        return self.exec().__await__()
