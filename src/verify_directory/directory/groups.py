"""
Group management on the tenant's SCIM API.

Every public operation addresses a group by display name, but the tenant
addresses groups by opaque ID, so each call first resolves the name with a
filtered list query (get_group_id) and then works on the ID. Name lookups are
not cached and take the first match when several groups share a name.

Membership is expressed by callers with usernames. create_group and
update_group resolve each username through a UserIdResolver before building
the request, and send nothing if any username fails to resolve.
"""

import json
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from verify_directory.constants import API_GROUPS, NO_PASSWORD_RESET_HEADER
from verify_directory.errors import ProtocolError
from verify_directory.models.common import AuthConfig
from verify_directory.models.group import Group, GroupListResponse
from verify_directory.models.patch import GroupPatchRequest
from verify_directory.utils.http import HttpClient

from .base import BaseDirectoryClient
from .patch import (
    OperationInput,
    build_patch_request,
    resolve_username,
    translate_operations,
    validate_operations,
)
from .users import UserClient, UserIdResolver

if TYPE_CHECKING:
    from verify_directory.settings import Settings

logger = logging.getLogger(__name__)


class GroupClient(BaseDirectoryClient):
    """
    High-level client for SCIM group operations.

    Example:
        async with GroupClient() as client:
            group, url = await client.get_group(auth, "Engineers")
    """

    def __init__(
        self,
        transport: HttpClient | None = None,
        user_resolver: UserIdResolver | None = None,
        owns_transport: bool | None = None,
    ) -> None:
        """
        Initialize the group client.

        Args:
            transport: HTTP transport; a default HttpClient is created if omitted
            user_resolver: Username resolver; defaults to a UserClient sharing
                this client's transport
            owns_transport: Close the transport in close()
        """
        super().__init__(transport, owns_transport)
        self.user_resolver = (
            user_resolver
            if user_resolver is not None
            else UserClient(transport=self.transport)
        )

    def group_url(self, auth: AuthConfig, group_id: str) -> str:
        """Fully qualified URL of a group resource."""
        return str(self._url(auth, f"{API_GROUPS}/{group_id}"))

    async def get_group_id(self, auth: AuthConfig, name: str) -> str:
        """
        Resolve a group's display name to its ID.

        The name is placed in a ``displayName eq "<name>"`` filter as is;
        quotes inside the name are not escaped.

        Args:
            auth: Tenant and token
            name: Group display name

        Returns:
            ID of the first group returned for the name

        Raises:
            NotFoundError: If no group has this name
            DirectoryAPIError: If the tenant rejects the query
            ProtocolError: If the response cannot be decoded
            TransportError: If the request could not be completed
        """
        url = self._url(auth, API_GROUPS, {"filter": f'displayName eq "{name}"'})
        response = await self.transport.get(url, self._headers(auth))

        self._check_status(
            response,
            200,
            f"unable to get the Group with groupName {name}",
            log_extra={"tenant": auth.tenant, "group_name": name},
        )
        return self._first_resource_id(response, "group", name)

    async def get_group(self, auth: AuthConfig, name: str) -> tuple[Group, str]:
        """
        Fetch a group by display name.

        Args:
            auth: Tenant and token
            name: Group display name

        Returns:
            The group as returned by the tenant and its resource URL

        Raises:
            NotFoundError: If the group does not exist
            DirectoryAPIError: On other error responses
            ProtocolError: If the group cannot be decoded
        """
        group_id = await self.get_group_id(auth, name)
        url = self._url(auth, f"{API_GROUPS}/{group_id}")

        response = await self.transport.get(url, self._headers(auth))
        self._check_status(
            response,
            200,
            "unable to get the Group",
            log_extra={
                "tenant": auth.tenant,
                "group_name": name,
                "group_id": group_id,
            },
        )

        data = self._decode_mapping(response, "unable to get the Group")
        try:
            group = Group.model_validate(data)
        except PydanticValidationError as e:
            logger.error(
                f"unable to decode the Group {name}; err={e}",
                extra={"group_name": name, "error_type": "ValidationError"},
            )
            raise ProtocolError("unable to get the Group", e) from e

        return group, str(url)

    async def get_groups(
        self, auth: AuthConfig, sort: str = "", count: str = ""
    ) -> tuple[GroupListResponse, str]:
        """
        List groups.

        Args:
            auth: Tenant and token
            sort: Attribute to sort by; omitted from the query when empty
            count: Maximum number of groups; omitted from the query when empty

        Returns:
            The list response and the URL that was requested

        Raises:
            DirectoryAPIError: On error responses
            ProtocolError: If the response cannot be decoded
        """
        params: dict[str, str] = {}
        if sort:
            params["sortBy"] = sort
        if count:
            params["count"] = str(count)

        url = self._url(auth, API_GROUPS, params)
        response = await self.transport.get(url, self._headers(auth))
        self._check_status(
            response,
            200,
            "unable to get the Groups",
            log_extra={"tenant": auth.tenant},
        )

        data = self._decode_mapping(response, "unable to get the Groups")
        try:
            groups = GroupListResponse.model_validate(data)
        except PydanticValidationError as e:
            logger.error(
                f"unable to decode the Groups; err={e}",
                extra={"error_type": "ValidationError"},
            )
            raise ProtocolError("unable to get the Groups", e) from e

        return groups, str(url)

    async def create_group(
        self, auth: AuthConfig, group: Group, *, in_place: bool = False
    ) -> str:
        """
        Create a group whose members are given by username.

        Each member ``value`` is resolved to a user ID before the group is
        posted. The caller's group is left untouched unless ``in_place`` is
        set, in which case its members end up holding the resolved IDs.

        Args:
            auth: Tenant and token
            group: Group to create, members named by username
            in_place: Write resolved IDs into ``group.members``

        Returns:
            URL of the created group

        Raises:
            DependencyResolutionError: If a username cannot be resolved; no
                request is sent
            DirectoryAPIError: If the tenant does not answer 201 Created
            ProtocolError: If the response carries no string ``id``
        """
        members = list(group.members or [])
        resolved = []
        for member in members:
            user_id = await resolve_username(self.user_resolver, auth, member.value)
            resolved.append(member.model_copy(update={"value": user_id}))

        if in_place:
            for member, resolved_member in zip(members, resolved, strict=True):
                member.value = resolved_member.value
            outbound = group
        else:
            outbound = group.model_copy(
                update={"members": resolved if group.members is not None else None}
            )

        logger.info(
            f"Creating group {group.display_name}",
            extra={
                "tenant": auth.tenant,
                "group_name": group.display_name,
                "operation": "create_group",
            },
        )

        url = self._url(auth, API_GROUPS)
        headers = self._write_headers(auth, extra={NO_PASSWORD_RESET_HEADER: "false"})
        body = json.dumps(outbound.to_payload()).encode()

        response = await self.transport.post(url, headers, body)
        self._check_status(
            response,
            201,
            "Failed to create group",
            log_extra={"tenant": auth.tenant, "group_name": group.display_name},
        )

        data = self._decode_mapping(response, "Failed to parse response")
        group_id = data.get("id")
        if not isinstance(group_id, str) or not group_id:
            raise ProtocolError(
                "Failed to parse response; ID not found or invalid type"
            )

        logger.info(
            f"Group {group.display_name} created",
            extra={"group_name": group.display_name, "group_id": group_id},
        )
        return self.group_url(auth, group_id)

    async def delete_group(self, auth: AuthConfig, name: str) -> None:
        """
        Delete a group by display name.

        Raises:
            NotFoundError: If the group does not exist or the tenant answers 404
            DirectoryAPIError: If the tenant does not answer 204 No Content
        """
        group_id = await self.get_group_id(auth, name)
        url = self._url(auth, f"{API_GROUPS}/{group_id}")

        response = await self.transport.delete(url, self._delete_headers(auth))
        self._check_status(
            response,
            204,
            "unable to delete the Group",
            log_extra={
                "tenant": auth.tenant,
                "group_name": name,
                "group_id": group_id,
            },
        )

        logger.info(
            f"Group {name} deleted",
            extra={
                "group_name": name,
                "group_id": group_id,
                "operation": "delete_group",
            },
        )

    async def update_group(
        self,
        auth: AuthConfig,
        name: str,
        operations: Sequence[OperationInput],
        *,
        in_place: bool = False,
    ) -> None:
        """
        Apply patch operations to a group.

        Member usernames in ``add``/``members`` values and in ``remove``
        paths are resolved to user IDs before the patch is sent; see
        verify_directory.directory.patch for the exact rewriting rules.

        Args:
            auth: Tenant and token
            name: Group display name
            operations: Patch operations, as PatchOperation or plain dicts
            in_place: Write resolved IDs and paths back into ``operations``

        Raises:
            InvalidOperationError: If an entry cannot be read as an operation;
                nothing is sent
            NotFoundError: If the group does not exist
            DependencyResolutionError: If a username cannot be resolved; no
                request is sent
            DirectoryAPIError: If the tenant does not answer 204 No Content
        """
        validate_operations(operations)
        group_id = await self.get_group_id(auth, name)

        translated = await translate_operations(
            operations, self.user_resolver, auth, in_place=in_place
        )
        patch_request = build_patch_request(translated)

        url = self._url(auth, f"{API_GROUPS}/{group_id}")
        body = json.dumps(patch_request.to_wire()).encode()

        response = await self.transport.patch(url, self._write_headers(auth), body)
        self._check_status(
            response,
            204,
            "failed to update group",
            log_extra={
                "tenant": auth.tenant,
                "group_name": name,
                "group_id": group_id,
            },
        )

        logger.info(
            f"Group {name} updated with {len(translated)} operation(s)",
            extra={
                "group_name": name,
                "group_id": group_id,
                "operation": "update_group",
            },
        )

    async def apply_patch_request(
        self, auth: AuthConfig, request: GroupPatchRequest
    ) -> None:
        """Apply a stored group update document."""
        await self.update_group(
            auth, request.group_name, request.scim_patch.operations
        )


def get_group_client(settings: "Settings | None" = None) -> GroupClient:
    """
    Build a GroupClient from settings.

    Args:
        settings: Settings instance; the module-level settings if omitted

    Returns:
        GroupClient with its own HTTP transport
    """
    if settings is None:
        from verify_directory.settings import settings as default_settings

        settings = default_settings

    transport = HttpClient(
        timeout=settings.timeout_seconds, verify_ssl=settings.verify_ssl
    )
    return GroupClient(transport=transport, owns_transport=True)
