# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Shoe repository implementation."""

from typing import Any

from shoe_api.clients.dynamodb.client import DynamoDBClient
from shoe_api.clients.dynamodb.schema import SHOE_KEY_ATTRIBUTE
from shoe_api.repositories.base import BaseRepository


def build_set_expression(
    attribute_path: str,
) -> tuple[str, dict[str, str]]:
    """Build a ``SET`` update expression for a dotted attribute path.

    Every path segment is bound through an expression attribute name, so the
    caller-supplied path never reaches the expression text.

    Args:
        attribute_path: Dotted attribute path, e.g. ``details.color``

    Returns:
        Tuple of (update expression, expression attribute names)

    Raises:
        ValueError: If the path is empty or has an empty segment
    """
    segments = attribute_path.split('.')
    if not attribute_path or any(not segment for segment in segments):
        raise ValueError(f'Invalid attribute path: {attribute_path!r}')

    names = {f'#k{i}': segment for i, segment in enumerate(segments)}
    return f'SET {".".join(names)} = :value', names


class ShoeRepository(BaseRepository):
    """Repository for shoe records keyed by ``shoeId``."""

    def __init__(self, dynamodb_client: DynamoDBClient):
        """Initialize shoe repository."""
        super().__init__(dynamodb_client, entity_type='SHOE')

    def _get_key(self, shoe_id: str) -> dict[str, str]:
        """Get the primary key for a shoe."""
        return {SHOE_KEY_ATTRIBUTE: shoe_id}

    async def get_shoe(self, shoe_id: str) -> dict[str, Any] | None:
        """Get a shoe by ID, or None if it does not exist."""
        return await self._execute(
            'get_shoe', self.dynamodb.get_item, self._get_key(shoe_id)
        )

    async def list_shoes(self) -> list[dict[str, Any]]:
        """List every shoe in the table."""
        return await self.scan_all()

    async def create_shoe(self, shoe: dict[str, Any]) -> dict[str, Any]:
        """Write a shoe, overwriting any shoe with the same ID."""
        await self._execute('create_shoe', self.dynamodb.put_item, shoe)
        return shoe

    async def update_shoe(
        self, shoe_id: str, update_key: str, update_value: Any
    ) -> dict[str, Any]:
        """Set one attribute path on a shoe.

        Returns:
            The updated attributes as reported by the store (``UPDATED_NEW``)
        """
        update_expression, names = build_set_expression(update_key)
        attributes = await self._execute(
            'update_shoe',
            self.dynamodb.update_item,
            key=self._get_key(shoe_id),
            update_expression=update_expression,
            expression_attribute_names=names,
            expression_attribute_values={':value': update_value},
            return_values='UPDATED_NEW',
        )
        return attributes or {}

    async def delete_shoe(self, shoe_id: str) -> dict[str, Any]:
        """Delete a shoe and return the deleted record, empty if none existed."""
        attributes = await self._execute(
            'delete_shoe',
            self.dynamodb.delete_item,
            key=self._get_key(shoe_id),
            return_values='ALL_OLD',
        )
        return attributes or {}
