"""Shared pytest fixtures for directory client tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from tests.helpers import USER_IDS
from verify_directory.errors import NotFoundError
from verify_directory.models.common import AuthConfig


@pytest.fixture
def auth():
    return AuthConfig(tenant="tenant", token="test-token")


@pytest.fixture
def transport():
    """Mock HTTP transport; set side effects per test."""
    mock = MagicMock()
    mock.get = AsyncMock()
    mock.post = AsyncMock()
    mock.patch = AsyncMock()
    mock.delete = AsyncMock()
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def resolver():
    """Mock user resolver backed by USER_IDS; unknown names are not found."""

    async def resolve(auth, username):
        if username not in USER_IDS:
            raise NotFoundError(f"no user found with name {username}")
        return USER_IDS[username]

    mock = MagicMock()
    mock.resolve_user_id = AsyncMock(side_effect=resolve)
    return mock


@pytest.fixture
def group_client(transport, resolver):
    from verify_directory.directory.groups import GroupClient

    return GroupClient(transport=transport, user_resolver=resolver)
