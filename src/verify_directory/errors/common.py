"""
Classification of common tenant error responses.

Every client method checks for its exact success status first and hands any
other response to handle_common_errors(), which maps well-known statuses and
server error bodies onto typed exceptions.
"""

import json
from typing import Any, Protocol

from .directory_errors import (
    BadRequestError,
    DirectoryAPIError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)


class ResponseLike(Protocol):
    """Minimal view of an HTTP response needed for classification."""

    status_code: int

    @property
    def text(self) -> str: ...


def extract_error_detail(body: str) -> str | None:
    """
    Pull a human-readable message out of a tenant error body.

    Understands both the SCIM error shape (``detail``) and the tenant's own
    error shape (``messageDescription``).

    Args:
        body: Raw response body

    Returns:
        The server supplied message, or None if the body carries none
    """
    if not body:
        return None

    try:
        data: Any = json.loads(body)
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None

    for key in ("detail", "messageDescription"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value

    return None


def handle_common_errors(
    response: ResponseLike, message: str
) -> DirectoryAPIError | None:
    """
    Classify a non-success response into a typed error.

    Args:
        response: Response with an unexpected status code
        message: Context describing the failed operation

    Returns:
        The classified error, or None when the status is not a known one
    """
    body = response.text
    detail = extract_error_detail(body)
    full_message = f"{message}; {detail}" if detail else message

    status = response.status_code
    if status == 400:
        return BadRequestError(full_message, response_body=body)
    if status == 401:
        return UnauthorizedError(full_message, response_body=body)
    if status == 403:
        return ForbiddenError(full_message, response_body=body)
    if status == 404:
        return NotFoundError(full_message, status_code=404, response_body=body)

    return None
