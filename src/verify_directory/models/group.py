"""
Pydantic models for SCIM Group resources.

Field names follow Python conventions and map onto the tenant's camelCase
wire names through aliases. Serialize with ``model_dump(by_alias=True,
exclude_none=True)`` before sending; unknown fields returned by the tenant
are kept so read paths pass server data through unchanged.
"""

from pydantic import BaseModel, Field

from verify_directory.constants import (
    IBM_GROUP_EXTENSION,
    IBM_NOTIFICATION_EXTENSION,
    SCIM_GROUP_SCHEMA,
)


class Member(BaseModel):
    """Reference to a user or group that belongs to a group.

    On input ``value`` holds a username; on the wire it holds the member's
    opaque ID.
    """

    model_config = {"populate_by_name": True, "extra": "allow"}

    type: str | None = Field(None, description="Member kind, e.g. user or group")
    value: str = Field(..., description="Username on input, opaque ID on the wire")
    display: str | None = Field(None, description="Display label")
    ref: str | None = Field(None, alias="$ref", description="Resource URI")


class Owner(BaseModel):
    """Owner of a group."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    value: str = Field(..., description="Opaque owner ID")
    ref: str | None = Field(None, alias="$ref", description="Resource URI")
    display_name: str | None = Field(None, alias="displayName")


class GroupExtension(BaseModel):
    """Tenant specific group attributes."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    description: str | None = Field(None, description="Group description")
    owners: list[Owner] | None = Field(None, description="Group owners")


class GroupNotification(BaseModel):
    """Notification settings sent to members when the group changes."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    notify_type: str | None = Field(None, alias="notifyType")
    notify_password: bool | None = Field(None, alias="notifyPassword")
    notify_manager: bool | None = Field(None, alias="notifyManager")


class GroupMeta(BaseModel):
    """Server populated timestamps."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    created: str | None = None
    last_modified: str | None = Field(None, alias="lastModified")
    resource_type: str | None = Field(None, alias="resourceType")
    location: str | None = None


class Group(BaseModel):
    """A SCIM group as stored on the tenant."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    schemas: list[str] = Field(default_factory=lambda: [SCIM_GROUP_SCHEMA])
    id: str | None = Field(None, description="Server assigned opaque ID")
    external_id: str | None = Field(None, alias="externalId")
    display_name: str = Field(..., alias="displayName")
    visible: bool = Field(False, description="Visible to end users")
    members: list[Member] | None = Field(None, description="Ordered member list")
    extension: GroupExtension | None = Field(None, alias=IBM_GROUP_EXTENSION)
    notification: GroupNotification | None = Field(
        None, alias=IBM_NOTIFICATION_EXTENSION
    )
    meta: GroupMeta | None = None

    @property
    def owners(self) -> list[Owner]:
        """Owners listed in the tenant extension, if any."""
        if self.extension is None or self.extension.owners is None:
            return []
        return self.extension.owners

    def to_payload(self) -> dict:
        """Serialize for a create request."""
        return self.model_dump(by_alias=True, exclude_none=True)


class GroupListResponse(BaseModel):
    """Collection envelope returned when listing groups."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    total_results: int = Field(0, alias="totalResults")
    schemas: list[str] = Field(default_factory=list)
    groups: list[Group] = Field(default_factory=list, alias="Resources")
