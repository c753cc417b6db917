# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Response envelope builder."""

import json
from typing import Any

from shoe_api.utils import make_json_serializable

JSON_HEADERS = {'Content-Type': 'application/json'}


def build_response(status_code: int, body: Any = None) -> dict[str, Any]:
    """Build an API Gateway proxy response.

    The body is compact JSON. An absent body serializes to an empty string.

    Args:
        status_code: HTTP status code
        body: Any JSON-serializable value, or None for an empty body

    Returns:
        Dict with ``statusCode``, ``headers`` and ``body``
    """
    return {
        'statusCode': status_code,
        'headers': dict(JSON_HEADERS),
        'body': ''
        if body is None
        else json.dumps(make_json_serializable(body), separators=(',', ':')),
    }
