"""
Connection to DynamoDB with table-name prefixing.

A connection keeps the options given to ``connect()`` and the raw
aioboto3 client. The client is opened lazily, on the first query that
needs it, so ``connect()`` itself never touches the network.
"""

import asyncio
import logging
import os
from typing import Any, Dict, List, Optional

import aioboto3
from botocore.config import Config

from .errors import NotConnectedError
from .methods.list_tables import ListTables
from .methods.create_table import CreateTable
from .methods.delete_table import DeleteTable
from .schema import validate_schema
from .table import Table

logger = logging.getLogger(__name__)


class Connection:
    """
    Entry point for building table queries.

    Example:
        db = Connection().connect(prefix="staging")
        await db.create_table(schema).wait()
    """

    def __init__(self) -> None:
        self.prefix: Optional[str] = None
        self.prefix_delimiter = "."
        self.region_name: Optional[str] = None
        self.endpoint_url: Optional[str] = None
        self.config: Optional[Config] = None

        # Raw SDK client; may be assigned directly to inject a client
        self.raw = None

        self._session: Optional[aioboto3.Session] = None
        self._credentials: Dict[str, Optional[str]] = {}
        self._stale_clients: List[Any] = []
        self._client_lock: Optional[asyncio.Lock] = None

    def connect(
        self,
        prefix: Optional[str] = None,
        prefix_delimiter: str = ".",
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        local: bool = False,
        local_host: str = "localhost",
        local_port: int = 8000,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
    ) -> "Connection":
        """
        Configure the connection.

        Args:
            prefix: Prefix prepended to every table name
            prefix_delimiter: Separator between prefix and table name
            region_name: AWS region name
            endpoint_url: Custom endpoint URL
            local: Connect to DynamoDB Local on ``local_host:local_port``
            local_host: Host of DynamoDB Local
            local_port: Port of DynamoDB Local
            aws_access_key_id: AWS access key ID
            aws_secret_access_key: AWS secret access key

        Returns:
            The connection itself
        """
        self.prefix = prefix if prefix is not None else os.getenv("DYNAMODB_PREFIX")
        self.prefix_delimiter = prefix_delimiter
        self.region_name = (
            region_name
            or os.getenv("AWS_REGION")
            or os.getenv("AWS_DEFAULT_REGION", "us-east-1")
        )

        if local:
            self.endpoint_url = f"http://{local_host}:{local_port}"
            aws_access_key_id = aws_access_key_id or "dummy"
            aws_secret_access_key = aws_secret_access_key or "dummy"
        else:
            self.endpoint_url = endpoint_url or os.getenv("DYNAMODB_ENDPOINT_URL")

        self.config = Config(
            retries={"max_attempts": 3, "mode": "adaptive"},
            max_pool_connections=50,
            region_name=self.region_name,
        )
        self._credentials = {
            "aws_access_key_id": aws_access_key_id,
            "aws_secret_access_key": aws_secret_access_key,
        }

        # A client opened for the previous options is closed on next use
        if self.raw is not None:
            self._stale_clients.append(self.raw)
            self.raw = None

        self._session = aioboto3.Session()

        logger.info(
            f"Connected DynamoDB: prefix={self.prefix}, "
            f"region={self.region_name}, endpoint={self.endpoint_url}"
        )
        return self

    @property
    def table_prefix(self) -> str:
        """The string prepended to table names, delimiter included."""
        if not self.prefix:
            return ""
        return f"{self.prefix}{self.prefix_delimiter}"

    def table(self, name: str) -> Table:
        """Return a handle to a table whose name gets the prefix."""
        return Table(self, f"{self.table_prefix}{name}")

    def raw_table(self, name: str) -> Table:
        """Return a handle to a table whose name is used verbatim."""
        return Table(self, name)

    def create_table(self, schema: Any = None) -> CreateTable:
        """
        Build a query that creates the table described by ``schema``.

        Raises:
            SchemaError: If the schema is missing or has no ``TableName``
        """
        validate_schema(schema)
        return self.table(schema["TableName"]).create(schema)

    def create_raw_table(self, schema: Any = None) -> CreateTable:
        """Same as ``create_table`` but without prefixing the name."""
        validate_schema(schema)
        return self.raw_table(schema["TableName"]).create(schema)

    def drop_table(self, name: str) -> DeleteTable:
        return self.table(name).drop()

    def drop_raw_table(self, name: str) -> DeleteTable:
        return self.raw_table(name).drop()

    def list_tables(self) -> ListTables:
        return ListTables(self)

    async def get_client(self):
        """
        Get or open the DynamoDB client.

        Clients replaced by a later ``connect()`` are closed first.

        Raises:
            NotConnectedError: If ``connect()`` was never called
        """
        if self.raw is not None and not self._stale_clients:
            return self.raw

        if self._client_lock is None:
            self._client_lock = asyncio.Lock()

        async with self._client_lock:
            await self._close_stale_clients()

            if self.raw is not None:
                return self.raw

            if self._session is None:
                raise NotConnectedError("Call .connect() before executing queries.")

            client_kwargs: Dict[str, Any] = {
                "service_name": "dynamodb",
                "region_name": self.region_name,
                "config": self.config,
            }

            if self.endpoint_url:
                client_kwargs["endpoint_url"] = self.endpoint_url

            if self._credentials.get("aws_access_key_id"):
                client_kwargs.update(self._credentials)

            # Create the actual client by entering the context manager
            client_context = self._session.client(**client_kwargs)
            self.raw = await client_context.__aenter__()
            logger.debug("Opened DynamoDB client")
            return self.raw

    async def _close_stale_clients(self) -> None:
        while self._stale_clients:
            client = self._stale_clients.pop()
            await client.close()
            logger.debug("Closed DynamoDB client replaced by reconnect")

    async def close(self) -> None:
        """Close the client and forget the session."""
        await self._close_stale_clients()

        if self.raw is not None:
            await self.raw.close()
            self.raw = None
            logger.debug("Closed DynamoDB client")

        self._session = None
        self._client_lock = None

    async def __aenter__(self) -> "Connection":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
