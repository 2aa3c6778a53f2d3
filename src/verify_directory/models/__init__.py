"""
Models package - Pydantic models for type-safe resource handling.

Defines data models for:
- Tenant authorization (AuthConfig)
- SCIM groups, members and list responses
- SCIM PatchOp requests
"""

from .common import AuthConfig
from .group import (
    Group,
    GroupExtension,
    GroupListResponse,
    GroupMeta,
    GroupNotification,
    Member,
    Owner,
)
from .patch import GroupPatchRequest, PatchOperation, PatchRequest

__all__ = [
    "AuthConfig",
    "Group",
    "GroupExtension",
    "GroupListResponse",
    "GroupMeta",
    "GroupNotification",
    "Member",
    "Owner",
    "GroupPatchRequest",
    "PatchOperation",
    "PatchRequest",
]
