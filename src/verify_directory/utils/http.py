"""
HTTP transport for the tenant's REST API.

A thin async wrapper over httpx that issues GET/POST/PATCH/DELETE requests
with caller supplied headers and body and hands back the response without
judging its status code. Callers own status checking; the transport only
turns network-level failures (connection, TLS, timeout) into TransportError.
"""

import logging

import httpx

from verify_directory.constants import DEFAULT_TIMEOUT_SECONDS
from verify_directory.errors import TransportError

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Async HTTP transport with a lazily created, pooled httpx client.

    No request is retried here; a failed request raises TransportError
    straight away.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        verify_ssl: bool = True,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
            client: Pre-built httpx client to use instead of creating one
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client (lazy initialization)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                verify=self.verify_ssl,
                timeout=httpx.Timeout(self.timeout),
                limits=httpx.Limits(
                    max_connections=20,
                    max_keepalive_connections=10,
                ),
                follow_redirects=False,
            )
            self._owns_client = True
            logger.debug("Created httpx client")
        return self._client

    async def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        url: str | httpx.URL,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> httpx.Response:
        """
        Send a request and return the buffered response.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            url: Absolute URL including any query string
            headers: Request headers
            body: Raw request body

        Returns:
            Response object with body already read

        Raises:
            TransportError: If the request could not be completed
        """
        client = self._get_client()

        try:
            response = await client.request(
                method=method,
                url=url,
                headers=headers,
                content=body,
            )
        except httpx.HTTPError as e:
            logger.error(
                f"Request failed: {method} {url} - {e}",
                extra={"http_method": method, "error_type": type(e).__name__},
            )
            raise TransportError(f"{method} {url} failed: {e}", cause=e) from e

        logger.debug(
            f"{method} {url} -> {response.status_code}",
            extra={"http_method": method, "http_status": response.status_code},
        )
        return response

    async def get(
        self, url: str | httpx.URL, headers: dict[str, str]
    ) -> httpx.Response:
        return await self.request("GET", url, headers)

    async def post(
        self, url: str | httpx.URL, headers: dict[str, str], body: bytes
    ) -> httpx.Response:
        return await self.request("POST", url, headers, body)

    async def patch(
        self, url: str | httpx.URL, headers: dict[str, str], body: bytes
    ) -> httpx.Response:
        return await self.request("PATCH", url, headers, body)

    async def delete(
        self, url: str | httpx.URL, headers: dict[str, str]
    ) -> httpx.Response:
        return await self.request("DELETE", url, headers)
