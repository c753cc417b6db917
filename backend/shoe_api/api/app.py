# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""FastAPI application serving the shoe router over HTTP for local development."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from loguru import logger

from shoe_api.api.middleware import setup_basic_middleware
from shoe_api.api.router import ShoeRouter
from shoe_api.clients.dynamodb.client import DynamoDBClient
from shoe_api.config import Settings, get_settings
from shoe_api.repositories.shoe import ShoeRepository


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for the FastAPI application.

    Opens the DynamoDB client and builds the router unless one was injected,
    and closes the client on shutdown.
    """
    dynamodb_client: DynamoDBClient | None = None

    if app.state.shoe_router is None:
        settings: Settings = app.state.settings
        dynamodb_client = DynamoDBClient(settings=settings)
        await dynamodb_client.initialize()
        app.state.shoe_router = ShoeRouter(ShoeRepository(dynamodb_client), settings)
        logger.info('Shoe router initialized')

    yield

    if dynamodb_client is not None:
        await dynamodb_client.cleanup()
    logger.info('Application shutdown complete')


def create_app(
    settings: Settings | None = None, shoe_router: ShoeRouter | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment
        shoe_router: Prebuilt router; when given no DynamoDB client is opened

    Returns:
        The configured application
    """
    settings = settings or get_settings()
    app_config = settings.app
    is_prod = settings.environment.lower() == 'production'

    app = FastAPI(
        title=app_config.title,
        description=app_config.description,
        version=app_config.version,
        docs_url=None if is_prod else '/docs',
        redoc_url=None,
        openapi_url=None if is_prod else '/openapi.json',
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.shoe_router = shoe_router

    setup_basic_middleware(app)

    @app.api_route(
        '/{path:path}',
        methods=['GET', 'POST', 'PATCH', 'DELETE'],
        include_in_schema=False,
    )
    async def dispatch(path: str, request: Request) -> Response:
        """Forward the request to the shoe router."""
        router: ShoeRouter = request.app.state.shoe_router
        raw_body = await request.body()

        result = await router.route(
            request.method,
            f'/{path}',
            dict(request.query_params) or None,
            raw_body.decode('utf-8', errors='replace') if raw_body else None,
        )
        return Response(
            content=result['body'],
            status_code=result['statusCode'],
            headers=result['headers'],
        )

    return app
