# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Tests for the request context."""

import pytest
from shoe_api.context import RequestContext


class TestRequestContext:
    """Tests for RequestContext."""

    @pytest.mark.asyncio
    async def test_scope_sets_and_restores_state(self):
        outer = RequestContext.get_state()

        async with RequestContext.scope(
            request_id='req-1', method='GET', path='/shoes'
        ) as state:
            assert state.request_id == 'req-1'
            assert state.method == 'GET'
            assert RequestContext.get_state() is state

        assert RequestContext.get_state() is outer

    @pytest.mark.asyncio
    async def test_scope_generates_request_id(self):
        async with RequestContext.scope() as state:
            assert state.request_id

    @pytest.mark.asyncio
    async def test_unknown_fields_go_to_metadata(self):
        async with RequestContext.scope(route='list_shoes') as state:
            assert state.metadata == {'route': 'list_shoes'}

    @pytest.mark.asyncio
    async def test_nested_scopes_get_distinct_ids(self):
        async with RequestContext.scope() as first:
            async with RequestContext.scope() as second:
                assert second.request_id != first.request_id
            assert RequestContext.get_state() is first
