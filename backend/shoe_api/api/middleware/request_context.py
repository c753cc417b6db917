# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Request context middleware."""

import uuid
from collections.abc import Callable

from fastapi import Request, Response  # type: ignore
from starlette.middleware.base import BaseHTTPMiddleware  # type: ignore

from shoe_api.context import RequestContext


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set the request context for handlers and clients."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request and set context variables."""
        request_id = request.headers.get('X-Request-ID', str(uuid.uuid4()))

        async with RequestContext.scope(
            request_id=request_id, method=request.method, path=request.url.path
        ):
            response = await call_next(request)
            response.headers['X-Request-ID'] = request_id

        return response
