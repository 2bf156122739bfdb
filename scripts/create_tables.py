#!/usr/bin/env python3
"""
Create DynamoDB tables from JSON schema files.

Usage:
    python scripts/create_tables.py schemas/*.json --prefix staging --wait
    python scripts/create_tables.py users.json --url "dynamodb://localhost:8000?local=true"
"""

import argparse
import asyncio
import logging
import os
import sys

from botocore.exceptions import ClientError

from dynoschema import Connection, DynoSchemaError, load_schema
from dynoschema.factory import parse_connection_url

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create DynamoDB tables from schema files")
    parser.add_argument("schemas", nargs="+", help="JSON schema files")
    parser.add_argument("--url", default=os.getenv("DYNAMODB_URL"), help="Connection URL")
    parser.add_argument("--prefix", default=None, help="Table name prefix")
    parser.add_argument("--region", default=None, help="AWS region")
    parser.add_argument("--endpoint-url", default=None, help="Custom DynamoDB endpoint")
    parser.add_argument("--raw", action="store_true", help="Do not prefix table names")
    parser.add_argument("--wait", action="store_true", help="Wait until tables are active")
    return parser.parse_args(argv)


def build_connection(args) -> Connection:
    """Connect from the URL, if any, with explicit flags taking precedence."""
    config = parse_connection_url(args.url) if args.url else {}

    if args.prefix is not None:
        config["prefix"] = args.prefix
    if args.region:
        config["region_name"] = args.region
    if args.endpoint_url:
        config.pop("local", None)
        config.pop("local_host", None)
        config.pop("local_port", None)
        config["endpoint_url"] = args.endpoint_url

    return Connection().connect(**config)


async def create_tables(args) -> bool:
    """Create every table; returns False if any of them failed."""
    try:
        db = build_connection(args)
    except DynoSchemaError as e:
        logger.error(f"Invalid connection configuration: {e}")
        return False

    success = True
    async with db:
        for path in args.schemas:
            try:
                schema = load_schema(path)
                query = db.create_raw_table(schema) if args.raw else db.create_table(schema)
                query.if_not_exists()
                if args.wait:
                    query.wait()

                await query.exec()
                logger.info(f"Table {query.table.name} ready ({path})")

            except (DynoSchemaError, ClientError, OSError, ValueError) as e:
                logger.error(f"Failed to create table from {path}: {e}")
                success = False

        if success:
            try:
                tables = await db.list_tables()
                logger.info(f"Available tables: {tables}")
            except ClientError as e:
                logger.error(f"Failed to list tables: {e}")

    return success


def main(argv=None) -> int:
    args = parse_args(argv)
    logger.info("Creating DynamoDB tables...")

    if not asyncio.run(create_tables(args)):
        logger.error("Table creation failed")
        return 1

    logger.info("All tables created successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
