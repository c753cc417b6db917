# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Request and event models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ApiGatewayEvent(BaseModel):
    """The subset of an API Gateway proxy event the router reads."""

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    http_method: str = Field(default='', alias='httpMethod')
    path: str = Field(default='')
    query_string_parameters: dict[str, str] | None = Field(
        default=None, alias='queryStringParameters'
    )
    body: str | None = None
    is_base64_encoded: bool = Field(default=False, alias='isBase64Encoded')
    request_context: dict[str, Any] = Field(
        default_factory=dict, alias='requestContext'
    )

    @model_validator(mode='before')
    @classmethod
    def accept_singular_query_key(cls, data: Any) -> Any:
        """Accept the singular ``queryStringParameter`` key older callers send."""
        if (
            isinstance(data, dict)
            and data.get('queryStringParameters') is None
            and data.get('queryStringParameter') is not None
        ):
            data = {**data, 'queryStringParameters': data['queryStringParameter']}
        return data


class ShoeRecord(BaseModel):
    """A shoe record. Only ``shoeId`` is required; other attributes pass through."""

    model_config = ConfigDict(extra='allow')

    shoeId: str = Field(..., min_length=1, description='Primary key of the shoe')


class GetShoeRequest(BaseModel):
    """Query parameters for fetching one shoe."""

    shoeId: str = Field(..., min_length=1)


class UpdateShoeRequest(BaseModel):
    """Body of a single-attribute update."""

    shoeId: str = Field(..., min_length=1)
    updateKey: str = Field(..., min_length=1, description='Dotted attribute path')
    updateValue: Any = Field(..., description='New value for the attribute')


class DeleteShoeRequest(BaseModel):
    """Body of a delete request."""

    shoeId: str = Field(..., min_length=1)
