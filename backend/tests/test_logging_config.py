# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Tests for logging setup."""

import sys

import pytest
from loguru import logger
from shoe_api.context import RequestContext
from shoe_api.logging_config import setup_logging


@pytest.fixture
def captured_records():
    """Configure logging and capture emitted records."""
    records = []
    setup_logging('debug')
    sink_id = logger.add(records.append, level='DEBUG', format='{message}')
    yield records
    logger.remove(sink_id)
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.mark.asyncio
    async def test_records_carry_request_id(self, captured_records):
        async with RequestContext.scope(request_id='req-7'):
            logger.info('inside request')

        record = captured_records[-1].record
        assert record['message'] == 'inside request'
        assert record['extra']['request_id'] == 'req-7'

    def test_explicit_binding_wins(self, captured_records):
        logger.bind(request_id='bound').info('bound message')

        assert captured_records[-1].record['extra']['request_id'] == 'bound'
