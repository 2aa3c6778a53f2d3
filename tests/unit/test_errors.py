"""Unit tests for the error hierarchy and common error classification."""

import pytest

from tests.helpers import MockResponse
from verify_directory.errors import (
    BadRequestError,
    DependencyResolutionError,
    DirectoryAPIError,
    DirectoryError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    extract_error_detail,
    handle_common_errors,
)


class TestHandleCommonErrors:
    """Tests for handle_common_errors."""

    @pytest.mark.parametrize(
        ("status", "error_type"),
        [
            (400, BadRequestError),
            (401, UnauthorizedError),
            (403, ForbiddenError),
            (404, NotFoundError),
        ],
    )
    def test_known_statuses(self, status, error_type):
        error = handle_common_errors(MockResponse(status), "unable to get Group")

        assert type(error) is error_type
        assert error.status_code == status

    @pytest.mark.parametrize("status", [409, 429, 500, 502])
    def test_unknown_statuses(self, status):
        assert handle_common_errors(MockResponse(status), "unable") is None

    def test_includes_scim_detail(self):
        response = MockResponse(
            404,
            {
                "schemas": ["urn:ietf:params:scim:api:messages:2.0:Error"],
                "detail": "Group g-1 not found",
                "status": "404",
            },
        )

        error = handle_common_errors(response, "unable to delete Group")

        assert "unable to delete Group; Group g-1 not found" in str(error)
        assert error.response_body == response.text


class TestExtractErrorDetail:
    """Tests for extract_error_detail."""

    def test_tenant_error_shape(self):
        body = '{"messageId": "CSIAH0301E", "messageDescription": "Bad token"}'
        assert extract_error_detail(body) == "Bad token"

    @pytest.mark.parametrize("body", ["", "not json", "[]", '{"detail": 5}'])
    def test_no_detail(self, body):
        assert extract_error_detail(body) is None


class TestErrorTypes:
    """Tests for error messages and guidance."""

    def test_api_error_prefixes_status(self):
        error = DirectoryAPIError("unable to get Groups", status_code=500)

        assert str(error).startswith("HTTP 500: unable to get Groups")
        assert error.category == "api"

    def test_body_preview_truncates(self):
        error = DirectoryAPIError("failed", 500, response_body="x" * 50)

        assert error.body_preview(limit=10) == "x" * 10 + "...<truncated>"
        assert error.body_preview(limit=100) == "x" * 50

    def test_body_preview_without_body(self):
        assert DirectoryAPIError("failed").body_preview() is None

    def test_dependency_error_names_username(self):
        cause = NotFoundError("no user found with name bob")
        error = DependencyResolutionError("bob", cause=cause)

        assert error.username == "bob"
        assert error.cause is cause
        assert "unable to get user ID for username bob" in str(error)
        assert "Action required" in str(error)

    def test_hierarchy(self):
        assert issubclass(ForbiddenError, UnauthorizedError)
        assert issubclass(NotFoundError, DirectoryAPIError)
        assert issubclass(DependencyResolutionError, DirectoryError)
