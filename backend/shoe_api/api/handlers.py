# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Operation handlers: one store call per request, wrapped in a response envelope."""

import json
from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from shoe_api.api.errors import BadRequestError, NotFoundError
from shoe_api.api.models import (
    DeleteShoeRequest,
    GetShoeRequest,
    ShoeRecord,
    UpdateShoeRequest,
)
from shoe_api.api.responses import build_response
from shoe_api.repositories.shoe import ShoeRepository

M = TypeVar('M', bound=BaseModel)


def _reject_constant(name: str) -> Any:
    raise BadRequestError('Request body contains a non-finite number', value=name)


def parse_json_body(body: str | None) -> dict[str, Any]:
    """Parse a request body that must hold a JSON object.

    ``NaN`` and ``Infinity`` are rejected; the store cannot hold them.
    """
    if not body:
        raise BadRequestError('Request body is required')
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise BadRequestError('Request body is not valid JSON', error=str(e)) from e
    if not isinstance(payload, dict):
        raise BadRequestError('Request body must be a JSON object')
    return payload


def validate_request(model_class: type[M], data: Any) -> M:
    """Validate request data against a request model."""
    try:
        return model_class.model_validate(data)
    except ValidationError as e:
        raise BadRequestError(
            'Request validation failed',
            errors=[
                {'field': '.'.join(str(p) for p in err['loc']), 'error': err['msg']}
                for err in e.errors()
            ],
        ) from e


def mutation_body(operation: str, item: Any) -> dict[str, Any]:
    """Build the ``{Operation, Message, Item}`` envelope for a mutation."""
    return {'Operation': operation, 'Message': 'SUCCESS', 'Item': item}


async def handle_health() -> dict[str, Any]:
    """Answer a health check."""
    return build_response(200)


async def handle_get_shoe(
    shoe_repo: ShoeRepository,
    query_params: dict[str, str] | None,
    not_found_strict: bool = False,
) -> dict[str, Any]:
    """Get a single shoe by the ``shoeId`` query parameter.

    A missing shoe answers 200 with an empty body, or 404 when
    ``not_found_strict`` is set.
    """
    request = validate_request(GetShoeRequest, query_params or {})
    shoe = await shoe_repo.get_shoe(request.shoeId)

    if shoe is None:
        logger.info(f'Shoe {request.shoeId} not found')
        if not_found_strict:
            raise NotFoundError('Shoe not found', shoeId=request.shoeId)
    return build_response(200, shoe)


async def handle_list_shoes(shoe_repo: ShoeRepository) -> dict[str, Any]:
    """List every shoe."""
    shoes = await shoe_repo.list_shoes()
    return build_response(200, {'shoes': shoes})


async def handle_create_shoe(
    shoe_repo: ShoeRepository, body: str | None
) -> dict[str, Any]:
    """Save the submitted shoe, overwriting any existing shoe with the same ID."""
    payload = parse_json_body(body)
    validate_request(ShoeRecord, payload)

    await shoe_repo.create_shoe(payload)
    return build_response(200, mutation_body('SAVE', payload))


async def handle_update_shoe(
    shoe_repo: ShoeRepository, body: str | None
) -> dict[str, Any]:
    """Set one attribute of a shoe and return the changed attributes."""
    request = validate_request(UpdateShoeRequest, parse_json_body(body))

    try:
        attributes = await shoe_repo.update_shoe(
            request.shoeId, request.updateKey, request.updateValue
        )
    except ValueError as e:
        raise BadRequestError(str(e), updateKey=request.updateKey) from e

    return build_response(200, mutation_body('UPDATE', {'Attributes': attributes}))


async def handle_delete_shoe(
    shoe_repo: ShoeRepository, body: str | None
) -> dict[str, Any]:
    """Delete a shoe and return the deleted record."""
    request = validate_request(DeleteShoeRequest, parse_json_body(body))

    deleted = await shoe_repo.delete_shoe(request.shoeId)
    item = {'Attributes': deleted} if deleted else {}
    return build_response(200, mutation_body('DELETE', item))
