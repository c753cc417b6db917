# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Utility functions for the application."""

import decimal
import inspect
from typing import Any


def get_function_name() -> str:
    """Get function name."""
    return inspect.currentframe().f_back.f_code.co_name  # type: ignore


def make_json_serializable(obj: Any) -> Any:
    """Make an object JSON serializable.

    DynamoDB numbers come back as ``Decimal``; integral values become ``int``
    and everything else ``float``. Sets (DynamoDB SS/NS) become lists.

    Args:
        obj: The object to make JSON serializable

    Returns:
        A JSON serializable version of the object
    """
    if isinstance(obj, dict):
        return {k: make_json_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple, set, frozenset)):
        return [make_json_serializable(item) for item in obj]
    elif isinstance(obj, (str, int, float, bool, type(None))):
        return obj
    elif isinstance(obj, decimal.Decimal):
        if obj == obj.to_integral_value():
            return int(obj)
        return float(obj)
    else:
        # Fall back to string representation
        return str(obj)
