# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""AWS Lambda entry point."""

import asyncio
from typing import Any

from loguru import logger

from shoe_api.api.router import ShoeRouter
from shoe_api.clients.dynamodb.client import DynamoDBClient
from shoe_api.config import Settings, get_settings
from shoe_api.logging_config import setup_logging
from shoe_api.repositories.shoe import ShoeRepository

# One loop per process keeps the aiobotocore client bound to the loop it was
# created on across warm invocations.
_loop: asyncio.AbstractEventLoop | None = None
_router: ShoeRouter | None = None


async def build_router(settings: Settings) -> ShoeRouter:
    """Create the DynamoDB client, repository and router for a process."""
    dynamodb_client = DynamoDBClient(settings=settings)
    await dynamodb_client.initialize()
    return ShoeRouter(ShoeRepository(dynamodb_client), settings)


def _get_loop() -> asyncio.AbstractEventLoop:
    global _loop
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
        asyncio.set_event_loop(_loop)
    return _loop


def _get_router() -> ShoeRouter:
    global _router
    if _router is None:
        settings = get_settings()
        setup_logging(settings.log_level)
        logger.info(
            f'Cold start: table={settings.dynamodb.table_name} '
            f'region={settings.dynamodb.region} environment={settings.environment}'
        )
        _router = _get_loop().run_until_complete(build_router(settings))
    return _router


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Lambda handler for API Gateway proxy events.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway proxy response dict
    """
    router = _get_router()
    return _get_loop().run_until_complete(router.handle_event(event))
