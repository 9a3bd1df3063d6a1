"""Validation helpers for API responses."""
from typing import Any, Iterable, Mapping

from .exceptions import ApiValidationError


def validate_api_status(actual_status: int, expected_status: int) -> bool:
    """
    Check an HTTP status code.

    Raises:
        ApiValidationError: If the statuses differ

    Returns:
        True when they match
    """
    if actual_status != expected_status:
        raise ApiValidationError(
            f"API Status mismatch. Expected: {expected_status}, Got: {actual_status}"
        )
    return True


def validate_api_response_fields(data: Mapping[str, Any], required_fields: Iterable[str]) -> bool:
    """
    Check that a response body has every required key.

    Raises:
        ApiValidationError: Listing the missing keys in the order given

    Returns:
        True when none are missing
    """
    missing_fields = [field for field in required_fields if field not in data]

    if missing_fields:
        raise ApiValidationError(f"Response missing required fields: {', '.join(missing_fields)}")
    return True
