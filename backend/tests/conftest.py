# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Shared test fixtures and configuration."""

import copy
import re
from typing import Any

import pytest
from botocore.exceptions import ClientError
from shoe_api.api.router import ShoeRouter
from shoe_api.config import Settings
from shoe_api.repositories.shoe import ShoeRepository

SET_EXPRESSION = re.compile(r'^SET (?P<path>[#\w.]+) = (?P<value>:\w+)$')


class FakeDynamoDBClient:
    """In-memory stand-in for DynamoDBClient keyed by ``shoeId``.

    Mirrors the client's plain-Python interface, including scan pagination
    through ``LastEvaluatedKey`` and the ``SET`` expressions the shoe
    repository issues.
    """

    def __init__(self, page_size: int = 2) -> None:
        self.items: dict[str, dict[str, Any]] = {}
        self.page_size = page_size
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def get_item(self, key: dict[str, Any]) -> dict[str, Any] | None:
        self.calls.append(('get_item', {'key': key}))
        item = self.items.get(key['shoeId'])
        return copy.deepcopy(item) if item else None

    async def put_item(self, item: dict[str, Any]) -> None:
        self.calls.append(('put_item', {'item': item}))
        self.items[item['shoeId']] = copy.deepcopy(item)

    async def update_item(
        self,
        key: dict[str, Any],
        update_expression: str,
        expression_attribute_names: dict[str, str] | None = None,
        expression_attribute_values: dict[str, Any] | None = None,
        return_values: str = 'NONE',
    ) -> dict[str, Any] | None:
        self.calls.append(
            (
                'update_item',
                {
                    'key': key,
                    'update_expression': update_expression,
                    'expression_attribute_names': expression_attribute_names,
                    'expression_attribute_values': expression_attribute_values,
                    'return_values': return_values,
                },
            )
        )
        match = SET_EXPRESSION.match(update_expression)
        if match is None:
            raise ClientError(
                {'Error': {'Code': 'ValidationException', 'Message': 'Bad expression'}},
                'UpdateItem',
            )

        names = expression_attribute_names or {}
        path = [names.get(part, part) for part in match['path'].split('.')]
        value = copy.deepcopy((expression_attribute_values or {})[match['value']])

        item = self.items.setdefault(key['shoeId'], dict(key))
        target = item
        for segment in path[:-1]:
            if not isinstance(target.get(segment), dict):
                raise ClientError(
                    {
                        'Error': {
                            'Code': 'ValidationException',
                            'Message': 'The document path provided in the update expression is invalid for update',
                        }
                    },
                    'UpdateItem',
                )
            target = target[segment]
        target[path[-1]] = value

        if return_values != 'UPDATED_NEW':
            return None
        updated: dict[str, Any] = {}
        cursor = updated
        for segment in path[:-1]:
            cursor = cursor.setdefault(segment, {})
        cursor[path[-1]] = copy.deepcopy(value)
        return updated

    async def delete_item(
        self,
        key: dict[str, Any],
        return_values: str = 'NONE',
    ) -> dict[str, Any] | None:
        self.calls.append(('delete_item', {'key': key, 'return_values': return_values}))
        old = self.items.pop(key['shoeId'], None)
        if return_values == 'ALL_OLD' and old:
            return old
        return None

    async def scan(self, **params: Any) -> dict[str, Any]:
        self.calls.append(('scan', dict(params)))
        ids = sorted(self.items)
        start = 0
        if params.get('ExclusiveStartKey'):
            start = ids.index(params['ExclusiveStartKey']['shoeId']) + 1

        page_ids = ids[start : start + self.page_size]
        response: dict[str, Any] = {
            'Items': [copy.deepcopy(self.items[i]) for i in page_ids],
            'Count': len(page_ids),
        }
        if start + self.page_size < len(ids):
            response['LastEvaluatedKey'] = {'shoeId': page_ids[-1]}
        return response


@pytest.fixture
def test_settings():
    """Test settings with safe defaults."""
    return Settings(
        region='us-east-1',
        dynamo_db='test-shoes',
        environment='test',
        _env_file=None,
    )


@pytest.fixture
def strict_settings():
    """Test settings answering 404 for missing shoes."""
    return Settings(
        region='us-east-1',
        dynamo_db='test-shoes',
        environment='test',
        shoe_not_found_strict=True,
        _env_file=None,
    )


@pytest.fixture
def fake_dynamodb():
    """In-memory DynamoDB stand-in."""
    return FakeDynamoDBClient()


@pytest.fixture
def shoe_repository(fake_dynamodb):
    """Shoe repository over the in-memory store."""
    return ShoeRepository(fake_dynamodb)  # type: ignore[arg-type]


@pytest.fixture
def shoe_router(shoe_repository, test_settings):
    """Router over the in-memory store."""
    return ShoeRouter(shoe_repository, test_settings)


@pytest.fixture
def sample_shoe():
    """Sample shoe record."""
    return {
        'shoeId': 's1',
        'name': 'X',
        'brand': 'Acme',
        'size': 42,
        'details': {'color': 'red', 'laces': True},
    }


@pytest.fixture
def client_error():
    """Factory for botocore ClientErrors used for failure injection."""

    def _make(code: str = 'ProvisionedThroughputExceededException') -> ClientError:
        return ClientError(
            {'Error': {'Code': code, 'Message': 'Injected failure'}}, 'Operation'
        )

    return _make
