# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Request router dispatching (method, path) pairs to operation handlers."""

import base64
import binascii
import time
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Callable

from loguru import logger

from shoe_api.api import handlers
from shoe_api.api.errors import ShoeApiError
from shoe_api.api.models import ApiGatewayEvent
from shoe_api.api.responses import build_response
from shoe_api.config import Settings
from shoe_api.context import RequestContext
from shoe_api.repositories.base import RepositoryOperationError
from shoe_api.repositories.shoe import ShoeRepository

HEALTH_PATH = '/health'
SHOE_PATH = '/shoe'
SHOES_PATH = '/shoes'

RouteHandler = Callable[[dict[str, str] | None, str | None], Awaitable[dict[str, Any]]]


@dataclass(frozen=True)
class Route:
    """One entry of the dispatch table."""

    method: str
    path: str
    name: str
    handler: RouteHandler


class ShoeRouter:
    """Dispatches requests to the shoe handlers.

    Every outcome is a response: handler errors, store failures and unmatched
    routes are all converted here.
    """

    def __init__(self, shoe_repo: ShoeRepository, settings: Settings) -> None:
        """Initialize the router with its repository and settings."""
        self.shoe_repo = shoe_repo
        self.settings = settings
        self.routes: list[Route] = [
            Route('GET', HEALTH_PATH, 'health', self._health),
            Route('GET', SHOE_PATH, 'get_shoe', self._get_shoe),
            Route('GET', SHOES_PATH, 'list_shoes', self._list_shoes),
            Route('POST', SHOE_PATH, 'create_shoe', self._create_shoe),
            Route('PATCH', SHOE_PATH, 'update_shoe', self._update_shoe),
            Route('DELETE', SHOE_PATH, 'delete_shoe', self._delete_shoe),
        ]

    async def _health(self, query_params, body) -> dict[str, Any]:
        return await handlers.handle_health()

    async def _get_shoe(self, query_params, body) -> dict[str, Any]:
        return await handlers.handle_get_shoe(
            self.shoe_repo, query_params, self.settings.api.not_found_strict
        )

    async def _list_shoes(self, query_params, body) -> dict[str, Any]:
        return await handlers.handle_list_shoes(self.shoe_repo)

    async def _create_shoe(self, query_params, body) -> dict[str, Any]:
        return await handlers.handle_create_shoe(self.shoe_repo, body)

    async def _update_shoe(self, query_params, body) -> dict[str, Any]:
        return await handlers.handle_update_shoe(self.shoe_repo, body)

    async def _delete_shoe(self, query_params, body) -> dict[str, Any]:
        return await handlers.handle_delete_shoe(self.shoe_repo, body)

    def match(self, method: str, path: str) -> Route | None:
        """Find the first route for a method and path."""
        method = (method or '').upper()
        if path.endswith('/') and path != '/':
            path = path[:-1]
        for route in self.routes:
            if route.method == method and route.path == path:
                return route
        return None

    async def route(
        self,
        method: str,
        path: str,
        query_params: dict[str, str] | None = None,
        body: str | None = None,
    ) -> dict[str, Any]:
        """Dispatch a request and return its response envelope."""
        start_time = time.time()
        route = self.match(method, path)

        if route is None:
            logger.warning(f'No route for {method} {path}')
            response = build_response(
                404, {'message': 'Route not found', 'method': method, 'path': path}
            )
        else:
            response = await self._dispatch(route, query_params, body)

        duration = time.time() - start_time
        logger.info(
            f'Request completed: {method} {path} '
            f'[status={response["statusCode"]}, duration={duration:.3f}s]'
        )
        return response

    async def _dispatch(
        self,
        route: Route,
        query_params: dict[str, str] | None,
        body: str | None,
    ) -> dict[str, Any]:
        """Run a route's handler, converting every failure into a response."""
        try:
            return await route.handler(query_params, body)
        except ShoeApiError as e:
            logger.warning(f'{route.name} rejected: {e.message}')
            return build_response(e.status_code, e.to_body())
        except RepositoryOperationError as e:
            logger.error(f'{route.name} failed in the store: {e.error}')
            return build_response(
                500,
                {'message': 'Internal server error', 'operation': e.operation},
            )
        except Exception as e:
            logger.exception(f'Unhandled exception in {route.name}: {e!s}')
            return build_response(500, {'message': 'Internal server error'})

    async def handle_event(self, event: dict[str, Any]) -> dict[str, Any]:
        """Route an API Gateway proxy event."""
        try:
            request = handlers.validate_request(ApiGatewayEvent, event)
        except ShoeApiError as e:
            logger.warning(f'Malformed request event: {e.details}')
            return build_response(e.status_code, e.to_body())

        context = {'method': request.http_method, 'path': request.path}
        if request.request_context.get('requestId'):
            context['request_id'] = request.request_context['requestId']

        async with RequestContext.scope(**context):
            logger.info(f'Request event: {request.http_method} {request.path}')

            body = request.body
            if body is not None and request.is_base64_encoded:
                try:
                    body = base64.b64decode(body, validate=True).decode('utf-8')
                except (binascii.Error, UnicodeDecodeError) as e:
                    logger.warning(f'Undecodable base64 body: {e}')
                    return build_response(
                        400, {'message': 'Request body is not valid base64'}
                    )

            return await self.route(
                request.http_method,
                request.path,
                request.query_string_parameters,
                body,
            )
