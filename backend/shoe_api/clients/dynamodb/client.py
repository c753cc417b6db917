# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""DynamoDB client implementation."""

import decimal
from typing import Any

from aiobotocore.session import AioSession
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from loguru import logger

from shoe_api.clients.base import BaseClient
from shoe_api.utils import get_function_name


class DynamoDBClient(BaseClient):
    """DynamoDB client with async operations against the configured table."""

    _client: Any | None = None

    async def initialize(self) -> None:
        """Initialize DynamoDB client."""
        with self.monitor_operation(get_function_name()):
            session = AioSession()
            endpoint_url = (
                self.settings.aws.dynamodb.endpoint_url
                or self.settings.aws.endpoint_url
            )
            logger.info(
                f'Initializing DynamoDB client for table {self._get_table_name()} '
                f'in {self.settings.aws.region} (endpoint: {endpoint_url or "default"})'
            )

            self._client = await session.create_client(
                'dynamodb',
                region_name=self.settings.aws.region,
                endpoint_url=endpoint_url,
                config=self.settings.aws.get_boto_config(),
            ).__aenter__()
            logger.info('DynamoDB client initialized')

    async def cleanup(self) -> None:
        """Cleanup DynamoDB client."""
        if self._client:
            with self.monitor_operation(get_function_name()):
                await self._client.__aexit__(None, None, None)
                self._client = None
                logger.info('DynamoDB client closed')

    @property
    def is_initialized(self) -> bool:
        """Whether the underlying aiobotocore client is open."""
        return self._client is not None

    def _get_table_name(self) -> str:
        """Get the configured table name."""
        return self.settings.dynamodb.table_name

    async def put_item(self, item: dict[str, Any]) -> None:
        """Put an item, replacing any item with the same key."""
        if not self._client:
            raise ValueError('DynamoDB client not initialized')

        table_name = self._get_table_name()
        with self.monitor_operation(get_function_name()):
            try:
                serialized_item = self._serialize_item(item)
                logger.debug(f'Sending to DynamoDB: {serialized_item}')
                await self._client.put_item(TableName=table_name, Item=serialized_item)
            except Exception as e:
                logger.error(f'Failed to put item in {table_name}: {e}')
                raise

    async def get_item(self, key: dict[str, Any]) -> dict[str, Any] | None:
        """Get an item by key, or None when no item matches."""
        if not self._client:
            raise ValueError('DynamoDB client not initialized')

        table_name = self._get_table_name()
        with self.monitor_operation(get_function_name()):
            try:
                response = await self._client.get_item(
                    TableName=table_name, Key=self._serialize_item(key)
                )
                item = response.get('Item')
                return self._deserialize_item(item) if item else None
            except Exception as e:
                logger.error(f'Failed to get item from {table_name}: {e}')
                raise

    async def update_item(
        self,
        key: dict[str, Any],
        update_expression: str,
        expression_attribute_names: dict[str, str] | None = None,
        expression_attribute_values: dict[str, Any] | None = None,
        return_values: str = 'NONE',
    ) -> dict[str, Any] | None:
        """Update an item and return the attributes selected by ``return_values``."""
        if not self._client:
            raise ValueError('DynamoDB client not initialized')

        table_name = self._get_table_name()
        params: dict[str, Any] = {
            'TableName': table_name,
            'Key': self._serialize_item(key),
            'UpdateExpression': update_expression,
            'ReturnValues': return_values,
        }
        if expression_attribute_names:
            params['ExpressionAttributeNames'] = expression_attribute_names
        if expression_attribute_values:
            params['ExpressionAttributeValues'] = {
                k: self._serialize_value(v)
                for k, v in expression_attribute_values.items()
            }
        with self.monitor_operation(get_function_name()):
            try:
                response = await self._client.update_item(**params)
                if 'Attributes' in response:
                    return self._deserialize_item(response['Attributes'])
                return None
            except Exception as e:
                logger.error(f'Failed to update item in {table_name}: {e}')
                raise

    async def delete_item(
        self,
        key: dict[str, Any],
        return_values: str = 'NONE',
    ) -> dict[str, Any] | None:
        """Delete an item and return the attributes selected by ``return_values``."""
        if not self._client:
            raise ValueError('DynamoDB client not initialized')

        table_name = self._get_table_name()
        params: dict[str, Any] = {
            'TableName': table_name,
            'Key': self._serialize_item(key),
            'ReturnValues': return_values,
        }

        with self.monitor_operation(get_function_name()):
            try:
                response = await self._client.delete_item(**params)
                if 'Attributes' in response:
                    return self._deserialize_item(response['Attributes'])
                return None
            except Exception as e:
                logger.error(f'Failed to delete item from {table_name}: {e}')
                raise

    async def scan(self, **params: Any) -> dict[str, Any]:
        """Fetch one page of a table scan.

        ``ExclusiveStartKey`` is accepted in plain Python form and the returned
        ``Items`` and ``LastEvaluatedKey`` are deserialized.
        """
        if not self._client:
            raise ValueError('DynamoDB client not initialized')

        params = dict(params)
        params['TableName'] = self._get_table_name()
        if params.get('ExclusiveStartKey'):
            params['ExclusiveStartKey'] = self._serialize_item(
                params['ExclusiveStartKey']
            )

        with self.monitor_operation(get_function_name()):
            try:
                response = await self._client.scan(**params)

                if 'Items' in response:
                    response['Items'] = [
                        self._deserialize_item(item) for item in response['Items']
                    ]
                if 'LastEvaluatedKey' in response:
                    response['LastEvaluatedKey'] = self._deserialize_item(
                        response['LastEvaluatedKey']
                    )
                return response
            except Exception as e:
                logger.error(f'Failed to scan {params["TableName"]}: {e}')
                raise

    def _serialize_value(self, value: Any) -> dict[str, Any]:
        """Serialize a single value for DynamoDB using boto3 TypeSerializer."""
        return TypeSerializer().serialize(self._coerce(value))

    def _serialize_item(self, item: dict[str, Any]) -> dict[str, dict[str, Any]]:
        """Convert Python dict to DynamoDB format."""
        return {key: self._serialize_value(value) for key, value in item.items()}

    def _deserialize_item(self, item: dict[str, dict[str, Any]]) -> dict[str, Any]:
        """Convert DynamoDB format to Python dict using boto3 TypeDeserializer."""
        if not item:
            return {}

        deserializer = TypeDeserializer()
        return {k: deserializer.deserialize(v) for k, v in item.items()}

    def _coerce(self, value: Any) -> Any:
        """Convert values TypeSerializer rejects into storable equivalents."""
        if isinstance(value, bool) or value is None:
            return value
        if isinstance(value, float):
            # TypeSerializer refuses floats
            return decimal.Decimal(str(value))
        if isinstance(value, dict):
            return {k: self._coerce(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._coerce(v) for v in value]
        return value

    async def table_exists(self) -> bool:
        """Check if the configured table exists."""
        if not self._client:
            raise ValueError('DynamoDB client not initialized')

        with self.monitor_operation(get_function_name()):
            try:
                await self._client.describe_table(TableName=self._get_table_name())
                return True
            except self._client.exceptions.ResourceNotFoundException:
                return False

    async def create_table(self, force_recreate: bool = False) -> None:
        """Create the shoes table if it does not exist."""
        if not self._client:
            raise ValueError('DynamoDB client not initialized')

        from shoe_api.clients.dynamodb.schema import get_table_schema

        table_name = self._get_table_name()
        client = self._client
        with self.monitor_operation(get_function_name()):
            try:
                table_exists = await self.table_exists()

                if table_exists and force_recreate:
                    logger.info(f'Deleting existing table {table_name}')
                    await client.delete_table(TableName=table_name)
                    waiter = client.get_waiter('table_not_exists')
                    await waiter.wait(TableName=table_name)
                    table_exists = False

                if not table_exists:
                    logger.info(f'Creating table {table_name}')
                    await client.create_table(**get_table_schema(table_name))
                    waiter = client.get_waiter('table_exists')
                    await waiter.wait(TableName=table_name)
                    logger.info(f'Table {table_name} created successfully')
                else:
                    logger.info(f'Table {table_name} already exists')
            except Exception as e:
                logger.error(f'Failed to create table {table_name}: {e}')
                raise
