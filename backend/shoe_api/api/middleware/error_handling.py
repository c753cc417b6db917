# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Error handling middleware."""

from collections.abc import Callable
from typing import Any

from fastapi import Request, Response  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore
from loguru import logger  # type: ignore
from starlette.middleware.base import BaseHTTPMiddleware  # type: ignore

from shoe_api.context import RequestContext


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware turning anything that escapes the router into a JSON 500."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request and handle errors."""
        try:
            return await call_next(request)
        except Exception as e:
            request_id = RequestContext.get_state().request_id or 'unknown'
            logger.exception(f'Unhandled exception: {e!s} [request_id={request_id}]')

            error_details: dict[str, Any] = {
                'message': 'Internal server error',
                'request_id': request_id,
            }
            return JSONResponse(status_code=500, content=error_details)
