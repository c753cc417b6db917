# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Loguru sink configuration."""

import sys
from typing import Any

from loguru import logger

from shoe_api.context import RequestContext

LOG_FORMAT = (
    '<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | '
    '<level>{level: <8}</level> | '
    '{extra[request_id]} | '
    '<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - '
    '<level>{message}</level>'
)


def _add_request_id(record: dict[str, Any]) -> None:
    record['extra'].setdefault('request_id', RequestContext.get_state().request_id)


def setup_logging(level: str = 'INFO') -> None:
    """Replace loguru's default sink with a stderr sink tagged with the request id."""
    logger.remove()
    logger.configure(patcher=_add_request_id)
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, colorize=False)
    logger.debug(f'Logging configured at level {level.upper()}')
