"""Tests for DeleteTable and ListTables queries."""

import pytest

from dynoschema import Connection, DeleteTable

from .conftest import client_error


class TestDeleteTable:

    def test_drop_table_builds_prefixed_request(self, db):
        query = db.drop_table("Bar")

        assert isinstance(query, DeleteTable)
        assert query.build_raw_query() == {"TableName": "foo.Bar"}
        assert db.drop_raw_table("Bar").build_raw_query() == {"TableName": "Bar"}

    @pytest.mark.asyncio
    async def test_drop_table(self, db, client):
        description = await db.drop_table("Bar")

        client.delete_table.assert_awaited_once_with(TableName="foo.Bar")
        assert description == {"TableStatus": "DELETING"}
        client.describe_table.assert_not_called()

    @pytest.mark.asyncio
    async def test_drop_table_waits_until_gone(self, db, client):
        client.describe_table.side_effect = [
            {"Table": {"TableStatus": "DELETING"}},
            client_error("ResourceNotFoundException", "DescribeTable"),
        ]

        await db.table("Bar").drop().wait().exec()

        assert client.describe_table.await_count == 2

    @pytest.mark.asyncio
    async def test_drop_missing_table_raises(self, db, client):
        client.delete_table.side_effect = client_error(
            "ResourceNotFoundException", "DeleteTable"
        )

        with pytest.raises(Exception, match="ResourceNotFoundException"):
            await db.drop_table("Bar").exec()


class TestListTables:

    @pytest.mark.asyncio
    async def test_list_tables_strips_prefix(self, db, client):
        client.list_tables.return_value = {
            "TableNames": ["foo.Bar", "foo.Baz", "other.Bar", "Qux"]
        }

        assert await db.list_tables() == ["Bar", "Baz"]

    @pytest.mark.asyncio
    async def test_list_tables_without_prefix(self, client, monkeypatch):
        monkeypatch.delenv("DYNAMODB_PREFIX", raising=False)
        connection = Connection().connect()
        connection.raw = client
        client.list_tables.return_value = {"TableNames": ["foo.Bar", "Qux"]}

        assert await connection.list_tables().exec() == ["foo.Bar", "Qux"]

    @pytest.mark.asyncio
    async def test_list_tables_follows_pagination(self, db, client):
        client.list_tables.side_effect = [
            {"TableNames": ["foo.A"], "LastEvaluatedTableName": "foo.A"},
            {"TableNames": ["foo.B"]},
        ]

        assert await db.list_tables() == ["A", "B"]
        client.list_tables.assert_awaited_with(ExclusiveStartTableName="foo.A")
