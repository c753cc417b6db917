#!/usr/bin/env python3
# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""
Script to create the shoes table in a local DynamoDB for development.
"""

import argparse
import asyncio
import os
import sys

from dotenv import load_dotenv
from loguru import logger

from shoe_api.clients.dynamodb.client import DynamoDBClient
from shoe_api.config import Settings
from shoe_api.logging_config import setup_logging


async def setup_table(settings: Settings, reset_table: bool) -> None:
    """Create (or recreate) the configured table."""
    client = DynamoDBClient(settings=settings)
    await client.initialize()
    try:
        await client.create_table(force_recreate=reset_table)
    finally:
        await client.cleanup()


def main() -> None:
    """Main function to setup DynamoDB table."""
    load_dotenv()

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        '--endpoint-url',
        default=os.environ.get('DYNAMODB_ENDPOINT_URL', 'http://localhost:8001'),
        help='DynamoDB endpoint (default: local DynamoDB on port 8001)',
    )
    parser.add_argument(
        '--reset',
        action='store_true',
        default=os.environ.get('RESET_TABLE', 'false').lower() == 'true',
        help='Delete and recreate the table if it exists',
    )
    args = parser.parse_args()

    settings = Settings(
        region=os.environ.get('REGION', 'us-east-1'),
        dynamo_db=os.environ.get('DYNAMO_DB', 'shoes'),
        dynamodb_endpoint_url=args.endpoint_url,
    )
    setup_logging(settings.log_level)
    logger.info(
        f"Setting up DynamoDB table '{settings.dynamodb.table_name}' at {args.endpoint_url}"
    )

    try:
        asyncio.run(setup_table(settings, args.reset))
    except Exception as e:
        logger.error(f'Error: {e}')
        sys.exit(1)


if __name__ == '__main__':
    main()
