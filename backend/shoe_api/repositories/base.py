# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Base repository over a single DynamoDB table with uniform error wrapping."""

from collections.abc import Awaitable
from typing import Any, Callable, TypeVar

from loguru import logger

from shoe_api.clients.dynamodb.client import DynamoDBClient

R = TypeVar('R')  # Return type for operations


class RepositoryOperationError(Exception):
    """Error raised when a repository operation fails."""

    def __init__(self, operation: str, error: Exception) -> None:
        """Initialize with operation details."""
        self.operation = operation
        self.error = error
        super().__init__(f"Repository operation '{operation}' failed: {error}")


class BaseRepository:
    """Base repository for one entity type stored in its own table."""

    def __init__(self, dynamodb_client: DynamoDBClient, entity_type: str) -> None:
        """Initialize the base repository.

        Args:
            dynamodb_client: An initialized DynamoDB client
            entity_type: The entity type name, used for operation names in logs
        """
        self.dynamodb = dynamodb_client
        self.entity_type = entity_type

    async def _execute(
        self,
        operation_name: str,
        operation: Callable[..., Awaitable[R]],
        *args: Any,
        **kwargs: Any,
    ) -> R:
        """
        Execute a store operation once.

        Failures are terminal: there is no retry at this layer, and any error
        is logged and re-raised as a RepositoryOperationError.

        Raises:
            RepositoryOperationError: If the operation fails
        """
        try:
            return await operation(*args, **kwargs)
        except RepositoryOperationError:
            raise
        except Exception as e:
            logger.error(f'{operation_name} failed: {e}')
            raise RepositoryOperationError(operation_name, e) from e

    async def scan_all(self, **scan_params: Any) -> list[dict[str, Any]]:
        """Drain a table scan, following ``LastEvaluatedKey`` until it is absent.

        Pages are fetched one after another since each request depends on the
        previous page's continuation token. Any page failure aborts the whole
        aggregation.

        Args:
            **scan_params: Extra Scan parameters (filter expressions, etc.)

        Returns:
            Every item returned by the scan, in store order
        """
        operation_name = f'scan_{self.entity_type.lower()}s'
        items: list[dict[str, Any]] = []
        params = dict(scan_params)
        pages = 0

        while True:
            page = await self._execute(operation_name, self.dynamodb.scan, **params)
            pages += 1
            items.extend(page.get('Items', []))

            last_key = page.get('LastEvaluatedKey')
            if not last_key:
                break
            params['ExclusiveStartKey'] = last_key

        logger.debug(f'{operation_name} read {len(items)} items over {pages} pages')
        return items
