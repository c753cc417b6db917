# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Middleware setup utilities."""

from typing import Any

from fastapi import FastAPI
from loguru import logger

from .error_handling import ErrorHandlingMiddleware
from .logging import LoggingMiddleware
from .request_context import RequestContextMiddleware


def add_middleware_safely(
    app: FastAPI, middleware_class: type[Any], **options: Any
) -> None:
    """Add middleware and log the registration."""
    app.add_middleware(middleware_class, **options)
    logger.debug(f'Added middleware: {middleware_class.__name__}')


def setup_basic_middleware(app: FastAPI) -> None:
    """Set up the middleware stack.

    Starlette runs the last-added middleware first, so the request context is
    in place before logging and error handling run.
    """
    add_middleware_safely(app, LoggingMiddleware)
    add_middleware_safely(app, ErrorHandlingMiddleware)
    add_middleware_safely(app, RequestContextMiddleware)
