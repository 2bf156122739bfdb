"""
Create Table Example: prefixed tables on DynamoDB Local

This example creates a table from a declarative schema under a prefix,
waits for it to become active, lists the prefixed tables and drops it again.
"""

import asyncio
import logging
import os

from botocore.exceptions import ClientError

from dynoschema import Connection

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

USERS_SCHEMA = {
    "TableName": "Users",
    "AttributeDefinitions": [
        {"AttributeName": "id", "AttributeType": "S"},
        {"AttributeName": "email", "AttributeType": "S"},
    ],
    "KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}],
    "GlobalSecondaryIndexes": [
        {
            "IndexName": "email-index",
            "KeySchema": [{"AttributeName": "email", "KeyType": "HASH"}],
            "Projection": {"ProjectionType": "ALL"},
        }
    ],
    "BillingMode": "PAY_PER_REQUEST",
}


async def main():
    print("Create Table Demo: prefixed tables on DynamoDB Local")
    print("=" * 60)

    db = Connection().connect(prefix="demo", local=True, local_port=8000)

    async with db:
        try:
            await db.list_tables()
            print("✓ Local DynamoDB is running")
        except ClientError as e:
            print(f"✗ Local DynamoDB not available: {e}")
            return

        try:
            description = await db.create_table(USERS_SCHEMA).if_not_exists().wait()
            print(f"✓ Table {db.table('Users').name} is {description['TableStatus']}")

            print(f"Tables under prefix: {await db.list_tables()}")

            await db.drop_table("Users").wait()
            print("✓ Table dropped")

        except Exception as e:
            logger.error(f"Demo failed: {e}", exc_info=True)


if __name__ == "__main__":
    os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")

    asyncio.run(main())
