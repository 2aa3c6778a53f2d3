"""
Error handling module for the directory client.

This module provides the error hierarchy raised by group and user operations
and the classifier used to map tenant error responses onto it.
"""

from .common import extract_error_detail, handle_common_errors
from .directory_errors import (
    BadRequestError,
    DependencyResolutionError,
    DirectoryAPIError,
    DirectoryError,
    ForbiddenError,
    InvalidOperationError,
    NotFoundError,
    ProtocolError,
    TransportError,
    UnauthorizedError,
)

__all__ = [
    "DirectoryError",
    "DirectoryAPIError",
    "NotFoundError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "ProtocolError",
    "DependencyResolutionError",
    "InvalidOperationError",
    "TransportError",
    "handle_common_errors",
    "extract_error_detail",
]
