# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Tests for shoe_api/repositories/base.py - error wrapping and the scan aggregator."""

from unittest.mock import AsyncMock

import pytest
from shoe_api.clients.dynamodb.client import DynamoDBClient
from shoe_api.repositories.base import BaseRepository, RepositoryOperationError


class TestBaseRepository:
    """Tests for BaseRepository."""

    @pytest.fixture
    def mock_dynamodb_client(self):
        """Mock DynamoDB client."""
        mock_client = AsyncMock(spec=DynamoDBClient)
        mock_client.scan = AsyncMock()
        return mock_client

    @pytest.fixture
    def base_repository(self, mock_dynamodb_client):
        """Create BaseRepository instance with test configuration."""
        return BaseRepository(dynamodb_client=mock_dynamodb_client, entity_type='TEST')

    @pytest.mark.data
    def test_repository_initialization(self, base_repository, mock_dynamodb_client):
        """Test BaseRepository initialization."""
        assert base_repository.dynamodb == mock_dynamodb_client
        assert base_repository.entity_type == 'TEST'

    @pytest.mark.asyncio
    @pytest.mark.data
    async def test_execute_returns_result(self, base_repository):
        """Test a successful operation result is passed through."""
        operation = AsyncMock(return_value={'ok': True})

        result = await base_repository._execute('op', operation, 1, flag=True)

        assert result == {'ok': True}
        operation.assert_awaited_once_with(1, flag=True)

    @pytest.mark.asyncio
    @pytest.mark.data
    async def test_execute_wraps_errors_without_retry(
        self, base_repository, client_error
    ):
        """Test failures are wrapped once and never retried."""
        error = client_error()
        operation = AsyncMock(side_effect=error)

        with pytest.raises(RepositoryOperationError) as exc_info:
            await base_repository._execute('get_test', operation)

        assert exc_info.value.operation == 'get_test'
        assert exc_info.value.error is error
        assert exc_info.value.__cause__ is error
        assert operation.await_count == 1

    @pytest.mark.asyncio
    @pytest.mark.data
    async def test_scan_all_follows_continuation_tokens(
        self, base_repository, mock_dynamodb_client
    ):
        """Test three pages are concatenated in order with exactly three calls."""
        mock_dynamodb_client.scan.side_effect = [
            {'Items': [{'id': 1}, {'id': 2}], 'LastEvaluatedKey': {'id': 2}},
            {'Items': [{'id': 3}], 'LastEvaluatedKey': {'id': 3}},
            {'Items': [{'id': 4}, {'id': 5}]},
        ]

        items = await base_repository.scan_all()

        assert items == [{'id': 1}, {'id': 2}, {'id': 3}, {'id': 4}, {'id': 5}]
        assert mock_dynamodb_client.scan.await_count == 3
        calls = mock_dynamodb_client.scan.await_args_list
        assert calls[0].kwargs == {}
        assert calls[1].kwargs == {'ExclusiveStartKey': {'id': 2}}
        assert calls[2].kwargs == {'ExclusiveStartKey': {'id': 3}}

    @pytest.mark.asyncio
    @pytest.mark.data
    async def test_scan_all_single_empty_page(
        self, base_repository, mock_dynamodb_client
    ):
        """Test an empty table yields an empty list after one call."""
        mock_dynamodb_client.scan.return_value = {'Items': [], 'Count': 0}

        assert await base_repository.scan_all() == []
        assert mock_dynamodb_client.scan.await_count == 1

    @pytest.mark.asyncio
    @pytest.mark.data
    async def test_scan_all_passes_scan_parameters(
        self, base_repository, mock_dynamodb_client
    ):
        """Test extra scan parameters are sent on every page."""
        mock_dynamodb_client.scan.side_effect = [
            {'Items': [{'id': 1}], 'LastEvaluatedKey': {'id': 1}},
            {'Items': []},
        ]

        await base_repository.scan_all(ConsistentRead=True)

        calls = mock_dynamodb_client.scan.await_args_list
        assert calls[0].kwargs == {'ConsistentRead': True}
        assert calls[1].kwargs == {
            'ConsistentRead': True,
            'ExclusiveStartKey': {'id': 1},
        }

    @pytest.mark.asyncio
    @pytest.mark.data
    async def test_scan_all_aborts_on_mid_scan_failure(
        self, base_repository, mock_dynamodb_client, client_error
    ):
        """Test a failing page aborts the aggregation and stops paging."""
        mock_dynamodb_client.scan.side_effect = [
            {'Items': [{'id': 1}], 'LastEvaluatedKey': {'id': 1}},
            client_error(),
            {'Items': [{'id': 2}]},
        ]

        with pytest.raises(RepositoryOperationError) as exc_info:
            await base_repository.scan_all()

        assert exc_info.value.operation == 'scan_tests'
        assert mock_dynamodb_client.scan.await_count == 2
