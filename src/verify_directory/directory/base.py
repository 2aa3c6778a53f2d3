"""
Shared plumbing for the tenant's SCIM resource clients.

Builds URLs and headers, checks responses against the exact success status
of each operation, and decodes bodies. Resource clients (groups, users)
subclass BaseDirectoryClient and only describe their own endpoints.
"""

import logging
from typing import Any

import httpx

from verify_directory.constants import JSON_MEDIA_TYPE, SCIM_MEDIA_TYPE
from verify_directory.errors import (
    DirectoryAPIError,
    NotFoundError,
    ProtocolError,
    handle_common_errors,
)
from verify_directory.models.common import AuthConfig
from verify_directory.utils.http import HttpClient

logger = logging.getLogger(__name__)


class BaseDirectoryClient:
    """Base class for clients of one SCIM resource type."""

    def __init__(
        self,
        transport: HttpClient | None = None,
        owns_transport: bool | None = None,
    ) -> None:
        """
        Args:
            transport: HTTP transport; a default HttpClient is created if omitted
            owns_transport: Close the transport in close(); defaults to True
                only when the transport was created here
        """
        if owns_transport is None:
            owns_transport = transport is None
        self._owns_transport = owns_transport
        self.transport = transport if transport is not None else HttpClient()

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @staticmethod
    def _url(
        auth: AuthConfig, path: str, params: dict[str, str] | None = None
    ) -> httpx.URL:
        url = httpx.URL(f"{auth.base_url()}/{path}")
        if params:
            url = url.copy_merge_params(params)
        return url

    @staticmethod
    def _headers(
        auth: AuthConfig,
        content_type: str | None = None,
        accept: bool = True,
        extra: dict[str, str] | None = None,
    ) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {auth.token}"}
        if accept:
            headers["Accept"] = SCIM_MEDIA_TYPE
        if content_type:
            headers["Content-Type"] = content_type
        if extra:
            headers.update(extra)
        return headers

    @staticmethod
    def _write_headers(
        auth: AuthConfig, extra: dict[str, str] | None = None
    ) -> dict[str, str]:
        return BaseDirectoryClient._headers(
            auth, content_type=SCIM_MEDIA_TYPE, extra=extra
        )

    @staticmethod
    def _delete_headers(auth: AuthConfig) -> dict[str, str]:
        return BaseDirectoryClient._headers(
            auth, content_type=JSON_MEDIA_TYPE, accept=False
        )

    @staticmethod
    def _check_status(
        response: Any,
        expected: int,
        message: str,
        log_extra: dict[str, Any] | None = None,
    ) -> None:
        """
        Raise unless the response carries exactly the expected status.

        Known error statuses are classified by handle_common_errors(); any
        other unexpected status raises a generic DirectoryAPIError.

        Raises:
            DirectoryAPIError: Or one of its subclasses
        """
        if response.status_code == expected:
            return

        error = handle_common_errors(response, message)
        if error is None:
            error = DirectoryAPIError(
                message,
                status_code=response.status_code,
                response_body=response.text or "",
            )

        extra = dict(log_extra or {})
        extra.update(
            {
                "http_status": response.status_code,
                "response_body": error.body_preview(),
            }
        )

        logger.error(f"{message}; code={response.status_code}", extra=extra)
        raise error

    @staticmethod
    def _decode_mapping(response: Any, message: str) -> dict[str, Any]:
        """
        Decode a JSON object body.

        Raises:
            ProtocolError: If the body is not JSON or not an object
        """
        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError(f"{message}; response is not valid JSON", e) from e

        if not isinstance(data, dict):
            raise ProtocolError(
                f"{message}; expected a JSON object, got {type(data).__name__}"
            )
        return data

    @classmethod
    def _first_resource_id(cls, response: Any, kind: str, name: str) -> str:
        """
        Return the ``id`` of the first resource in a filtered list response.

        Only index 0 is used; further matches are ignored.

        Raises:
            NotFoundError: If the response lists no resources
            ProtocolError: If the first resource has no string ``id``
        """
        message = f"unable to get the {kind} with name {name}"
        data = cls._decode_mapping(response, message)

        resources = data.get("Resources")
        if not isinstance(resources, list) or not resources:
            raise NotFoundError(f"no {kind} found with name {name}")

        if len(resources) > 1:
            logger.debug(
                f"{len(resources)} {kind}s match name {name}; using the first",
            )

        first = resources[0]
        if not isinstance(first, dict):
            raise ProtocolError(f"{message}; invalid resource format")

        resource_id = first.get("id")
        if not isinstance(resource_id, str):
            raise ProtocolError(f"{message}; ID not found or invalid type")

        return resource_id
