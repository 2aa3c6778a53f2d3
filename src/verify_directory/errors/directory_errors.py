"""
Directory client error hierarchy with categorization.

This module defines the error types raised by the group and user clients,
grouping failures by where they happened (tenant API, response decoding,
username resolution, transport) and carrying guidance for the caller.
"""

from verify_directory.constants import DEFAULT_BODY_PREVIEW_LIMIT


class DirectoryError(Exception):
    """
    Base error class for all directory client exceptions.

    Provides categorization and user guidance for resolution.
    """

    def __init__(
        self,
        message: str,
        category: str,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize directory error.

        Args:
            message: Human-readable error description
            category: Error category (api, protocol, resolution, transport)
            user_action: What the caller should do to resolve the issue
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.category = category
        self.user_action = user_action
        self.cause = cause

    def __str__(self) -> str:
        """Enhanced string representation with user guidance."""
        base_msg = super().__str__()
        if self.user_action:
            return f"{base_msg}\nAction required: {self.user_action}"
        return base_msg


class DirectoryAPIError(DirectoryError):
    """Error response returned by the tenant's SCIM API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        user_action: str | None = None,
    ):
        if status_code:
            message = f"HTTP {status_code}: {message}"

        super().__init__(
            message=message,
            category="api",
            user_action=user_action,
        )
        self.status_code = status_code
        self.response_body = response_body

    def body_preview(self, limit: int = DEFAULT_BODY_PREVIEW_LIMIT) -> str | None:
        """Return a truncated preview of the response body for logging."""

        if self.response_body is None:
            return None

        if len(self.response_body) <= limit:
            return self.response_body

        return f"{self.response_body[:limit]}...<truncated>"


class NotFoundError(DirectoryAPIError):
    """The requested group or user does not exist on the tenant."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            response_body=response_body,
            user_action="Check that the name is spelled exactly as on the tenant",
        )


class BadRequestError(DirectoryAPIError):
    """The tenant rejected the request as malformed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 400,
        response_body: str | None = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            response_body=response_body,
            user_action="Review the request payload against the tenant's SCIM schema",
        )


class UnauthorizedError(DirectoryAPIError):
    """The bearer token is missing, expired or invalid."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 401,
        response_body: str | None = None,
        user_action: str | None = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            response_body=response_body,
            user_action=user_action or "Log in again to obtain a fresh access token",
        )


class ForbiddenError(UnauthorizedError):
    """The token is valid but lacks the entitlement for the operation."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 403,
        response_body: str | None = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            response_body=response_body,
            user_action="Grant the API client the group management entitlements",
        )


class ProtocolError(DirectoryError):
    """Response body does not have the expected shape."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(
            message=message,
            category="protocol",
            user_action="Check that the tenant host points at a SCIM 2.0 endpoint",
            cause=cause,
        )


class DependencyResolutionError(DirectoryError):
    """A username referenced by a request could not be resolved to an ID."""

    def __init__(self, username: str, cause: Exception | None = None):
        message = f"unable to get user ID for username {username}"
        if cause is not None:
            message = f"{message}; err={cause}"

        super().__init__(
            message=message,
            category="resolution",
            user_action=f"Check that user '{username}' exists on the tenant",
            cause=cause,
        )
        self.username = username


class TransportError(DirectoryError):
    """The underlying HTTP request could not be completed."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(
            message=message,
            category="transport",
            user_action="Check tenant connectivity and TLS settings",
            cause=cause,
        )


class InvalidOperationError(DirectoryError):
    """A caller supplied patch operation cannot be read as an operation."""

    def __init__(self, operation: object, cause: Exception | None = None):
        super().__init__(
            message=f"invalid patch operation {operation!r}",
            category="validation",
            user_action="Give every operation a string op and an optional string path",
            cause=cause,
        )
        self.operation = operation
