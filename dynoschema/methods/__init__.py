"""
Query objects for table-level DynamoDB operations.

Every query is built synchronously (so validation errors surface at the
call site) and executed asynchronously against the connection's client.
Query objects are awaitable: ``await query`` is ``await query.exec()``.
"""

from typing import TYPE_CHECKING, Any, Dict, Generator

if TYPE_CHECKING:
    from ..table import Table


class Method:
    """
    Base class for query objects bound to a table.

    Subclasses implement ``build_raw_query`` and ``exec``.
    """

    def __init__(self, table: "Table") -> None:
        self.table = table
        self.connection = table.connection

    def build_raw_query(self) -> Dict[str, Any]:
        """
        Build the request parameters sent to the DynamoDB client.

        Returns:
            Keyword arguments for the client call
        """
        raise NotImplementedError

    async def exec(self) -> Any:
        """
        Execute the query.

        Raises:
            NotConnectedError: If the connection has no client
            ClientError: If the service call fails
        """
        raise NotImplementedError

    def __await__(self) -> Generator[Any, None, Any]:
        return self.exec().__await__()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table={self.table.name!r})"


__all__ = ["Method"]
