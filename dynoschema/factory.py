"""
Connection factory for URL-style configuration.

Examples:
    - "dynamodb://?prefix=staging&region=eu-west-1"
    - "dynamodb://localhost:8000?prefix=test&local=true"
    - "dynamodb://dynamodb.eu-west-1.amazonaws.com?secure=true"
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, urlparse

from .connection import Connection
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("dynamodb",)

_TRUE_VALUES = ("1", "true", "yes", "on")


def parse_connection_url(url: str) -> Dict[str, Any]:
    """
    Parse a connection URL into ``Connection.connect`` keyword arguments.

    Args:
        url: URL-style connection specification

    Returns:
        Keyword arguments for ``connect()``

    Raises:
        ConfigurationError: If the URL scheme or options are invalid
    """
    parsed = urlparse(url)

    if parsed.scheme not in SUPPORTED_SCHEMES:
        raise ConfigurationError(
            f"Unsupported connection URL: {url}. "
            f"Supported schemes: {list(SUPPORTED_SCHEMES)}"
        )

    query_params = parse_qs(parsed.query)
    params = {k: v[-1] for k, v in query_params.items()}

    config: Dict[str, Any] = {}

    if "prefix" in params:
        config["prefix"] = params["prefix"]
    if "delimiter" in params:
        config["prefix_delimiter"] = params["delimiter"]
    if "region" in params:
        config["region_name"] = params["region"]

    local = params.get("local", "").lower() in _TRUE_VALUES

    try:
        port: Optional[int] = parsed.port
    except ValueError as e:
        raise ConfigurationError(f"Invalid port in connection URL: {url}") from e

    if parsed.hostname:
        if local:
            config["local"] = True
            config["local_host"] = parsed.hostname
            if port:
                config["local_port"] = port
        else:
            scheme = (
                "https"
                if params.get("secure", "").lower() in _TRUE_VALUES
                else "http"
            )
            netloc = f"{parsed.hostname}:{port}" if port else parsed.hostname
            config["endpoint_url"] = f"{scheme}://{netloc}"
    elif local:
        config["local"] = True

    return config


def connect_from_url(url: str, connection: Optional[Connection] = None) -> Connection:
    """
    Create (or reconfigure) a connection from a URL.

    Raises:
        ConfigurationError: If the URL is invalid
    """
    config = parse_connection_url(url)
    logger.info(f"Connecting from URL {url} with config: {config}")

    connection = connection or Connection()
    return connection.connect(**config)
