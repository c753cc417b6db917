# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Request-level errors raised by handlers and mapped to responses by the router."""

from typing import Any


class ShoeApiError(Exception):
    """Base exception for errors that map to a client-facing status code."""

    status_code = 500

    def __init__(self, message: str, **details: Any) -> None:
        """Initialize with a message and optional detail fields for the body."""
        self.message = message
        self.details = details
        super().__init__(message)

    def to_body(self) -> dict[str, Any]:
        """Response body for this error."""
        return {'message': self.message, **self.details}


class BadRequestError(ShoeApiError):
    """Exception raised when the request body or query is unusable."""

    status_code = 400


class NotFoundError(ShoeApiError):
    """Exception raised when a shoe does not exist (strict mode only)."""

    status_code = 404
