# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Logging middleware."""

from collections.abc import Callable

from fastapi import Request, Response  # type: ignore
from loguru import logger  # type: ignore
from starlette.middleware.base import BaseHTTPMiddleware  # type: ignore

from shoe_api.context import RequestContext


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware logging the start of each HTTP request.

    Completion is logged by the shoe router with status and duration.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request and log details."""
        client_host = request.client.host if request.client else 'unknown'
        request_id = RequestContext.get_state().request_id or 'unknown'

        logger.info(
            f'Request started: {request.method} {request.url} from {client_host} '
            f'[request_id={request_id}]'
        )

        return await call_next(request)
