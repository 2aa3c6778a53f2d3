"""Unit tests for UserClient username resolution."""

import pytest

from tests.helpers import MockResponse, list_response
from verify_directory.directory.users import UserClient, UserIdResolver
from verify_directory.errors import NotFoundError, ProtocolError, UnauthorizedError


@pytest.fixture
def user_client(transport):
    return UserClient(transport=transport)


class TestResolveUserId:
    """Tests for resolve_user_id method."""

    @pytest.mark.asyncio
    async def test_returns_first_match(self, user_client, transport, auth):
        transport.get.return_value = list_response("u-alice", "u-other")

        assert await user_client.resolve_user_id(auth, "alice") == "u-alice"

        url = transport.get.call_args.args[0]
        assert url.path == "/v2.0/Users"
        assert url.params["filter"] == 'userName eq "alice"'

    @pytest.mark.asyncio
    async def test_unknown_user(self, user_client, transport, auth):
        transport.get.return_value = list_response()

        with pytest.raises(NotFoundError) as exc_info:
            await user_client.resolve_user_id(auth, "mallory")

        assert "mallory" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_unauthorized(self, user_client, transport, auth):
        transport.get.return_value = MockResponse(401)

        with pytest.raises(UnauthorizedError):
            await user_client.resolve_user_id(auth, "alice")

    @pytest.mark.asyncio
    async def test_malformed_response(self, user_client, transport, auth):
        transport.get.return_value = MockResponse(200, [{"id": "u-alice"}])

        with pytest.raises(ProtocolError):
            await user_client.resolve_user_id(auth, "alice")

    def test_satisfies_resolver_protocol(self, user_client):
        assert isinstance(user_client, UserIdResolver)
