"""Shared test configuration and fixtures for all tests."""

from pathlib import Path
from unittest.mock import AsyncMock

from botocore.exceptions import ClientError
import pytest

from dynoschema import Connection, load_schema

FIXTURES = Path(__file__).parent / "fixtures"


def client_error(code: str, operation: str = "CreateTable") -> ClientError:
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def schema() -> dict:
    """Schema loaded from the JSON fixture."""
    return load_schema(FIXTURES / "schema.json")


@pytest.fixture
def expected_request() -> dict:
    """The create request the fixture schema maps to, minus the table name."""
    return {
        "AttributeDefinitions": [{"AttributeName": "id", "AttributeType": "S"}],
        "KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}],
        "ProvisionedThroughput": {"ReadCapacityUnits": 1, "WriteCapacityUnits": 1},
    }


@pytest.fixture
def client() -> AsyncMock:
    """Mock DynamoDB client; tables report CREATING once, then ACTIVE."""
    mock_client = AsyncMock()
    mock_client.create_table.return_value = {
        "TableDescription": {"TableStatus": "CREATING"}
    }
    mock_client.delete_table.return_value = {
        "TableDescription": {"TableStatus": "DELETING"}
    }

    statuses = iter(["CREATING"])

    async def describe_table(**kwargs):
        return {"Table": {"TableName": kwargs["TableName"], "TableStatus": next(statuses, "ACTIVE")}}

    mock_client.describe_table.side_effect = describe_table
    return mock_client


@pytest.fixture
def db(client: AsyncMock, monkeypatch: pytest.MonkeyPatch) -> Connection:
    """Connection with prefix ``foo`` and the mock client injected."""
    monkeypatch.delenv("DYNAMODB_PREFIX", raising=False)
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)

    connection = Connection().connect(prefix="foo", region_name="us-east-1")
    connection.raw = client
    return connection


@pytest.fixture(autouse=True)
def no_poll_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    """Poll without sleeping between describe calls."""
    monkeypatch.setenv("DYNAMODB_WAIT_DELAY", "0")
    monkeypatch.delenv("DYNAMODB_WAIT_MAX_ATTEMPTS", raising=False)
