"""Unit tests for the httpx based HTTP transport."""

import httpx
import pytest

from verify_directory.errors import TransportError
from verify_directory.utils.http import HttpClient


def _transport_client(handler) -> HttpClient:
    return HttpClient(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestHttpClient:
    """Tests for HttpClient."""

    @pytest.mark.asyncio
    async def test_returns_response_without_status_check(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["auth"] = request.headers["Authorization"]
            return httpx.Response(404, json={"detail": "missing"})

        client = _transport_client(handler)
        response = await client.get(
            "https://tenant/v2.0/Groups/g-1", {"Authorization": "Bearer t"}
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "missing"}
        assert seen == {"method": "GET", "auth": "Bearer t"}

    @pytest.mark.asyncio
    async def test_sends_body_for_writes(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, request.content))
            return httpx.Response(204)

        client = _transport_client(handler)
        await client.post("https://tenant/v2.0/Groups", {}, b'{"a": 1}')
        await client.patch("https://tenant/v2.0/Groups/g-1", {}, b'{"b": 2}')
        await client.delete("https://tenant/v2.0/Groups/g-1", {})

        assert seen == [
            ("POST", b'{"a": 1}'),
            ("PATCH", b'{"b": 2}'),
            ("DELETE", b""),
        ]

    @pytest.mark.asyncio
    async def test_network_failure_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _transport_client(handler)

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://tenant/v2.0/Groups", {})

        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert exc_info.value.category == "transport"

    @pytest.mark.asyncio
    async def test_close_leaves_injected_client_open(self):
        injected = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200))
        )
        client = HttpClient(client=injected)

        await client.close()

        assert not injected.is_closed
        await injected.aclose()

    @pytest.mark.asyncio
    async def test_context_manager_closes_own_client(self):
        async with HttpClient(timeout=5) as client:
            inner = client._get_client()

        assert inner.is_closed
