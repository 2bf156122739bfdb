"""Tests for URL-style connection configuration."""

import pytest

from dynoschema import ConfigurationError, connect_from_url
from dynoschema.factory import parse_connection_url


def test_parse_prefix_and_region():
    config = parse_connection_url("dynamodb://?prefix=foo&region=eu-west-1&delimiter=-")

    assert config == {
        "prefix": "foo",
        "prefix_delimiter": "-",
        "region_name": "eu-west-1",
    }


def test_parse_local():
    config = parse_connection_url("dynamodb://localhost:8900?local=true")

    assert config == {"local": True, "local_host": "localhost", "local_port": 8900}


def test_parse_endpoint():
    assert parse_connection_url("dynamodb://dynamo:8000")["endpoint_url"] == "http://dynamo:8000"
    assert (
        parse_connection_url("dynamodb://example.com?secure=true")["endpoint_url"]
        == "https://example.com"
    )


def test_unsupported_scheme():
    with pytest.raises(ConfigurationError, match="Unsupported connection URL"):
        parse_connection_url("mongodb://localhost")


def test_connect_from_url():
    connection = connect_from_url("dynamodb://localhost:8000?local=true&prefix=foo")

    assert connection.endpoint_url == "http://localhost:8000"
    assert connection.table("Bar").name == "foo.Bar"
