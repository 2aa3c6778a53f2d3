"""
Username to user ID resolution.

Group membership on the wire is expressed with opaque user IDs, while callers
name members by username. UserIdResolver is the seam the group client uses
to translate one into the other; UserClient implements it against the
tenant's SCIM Users endpoint.
"""

import logging
from typing import Protocol, runtime_checkable

from verify_directory.constants import API_USERS
from verify_directory.models.common import AuthConfig

from .base import BaseDirectoryClient

logger = logging.getLogger(__name__)


@runtime_checkable
class UserIdResolver(Protocol):
    """Anything that can map a username to the tenant's opaque user ID."""

    async def resolve_user_id(self, auth: AuthConfig, username: str) -> str: ...


class UserClient(BaseDirectoryClient):
    """Looks up users on the tenant by username."""

    async def resolve_user_id(self, auth: AuthConfig, username: str) -> str:
        """
        Resolve a username to the user's opaque ID.

        Args:
            auth: Tenant and token
            username: The user's userName attribute

        Returns:
            The ID of the first user matching the username

        Raises:
            NotFoundError: If no user has this username
            DirectoryAPIError: If the tenant rejects the lookup
            ProtocolError: If the response cannot be decoded
            TransportError: If the request could not be completed
        """
        url = self._url(auth, API_USERS, {"filter": f'userName eq "{username}"'})
        response = await self.transport.get(url, self._headers(auth))

        self._check_status(
            response,
            200,
            f"unable to get the User with username {username}",
            log_extra={"tenant": auth.tenant, "username": username},
        )

        user_id = self._first_resource_id(response, "user", username)
        logger.debug(
            f"Resolved username {username}",
            extra={"username": username, "operation": "resolve_user_id"},
        )
        return user_id
