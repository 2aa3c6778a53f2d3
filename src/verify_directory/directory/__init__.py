"""
Directory package - clients for SCIM resources on the tenant.

Contains:
- GroupClient: group lookup, listing, creation, deletion and patching
- UserClient: username to user ID resolution
- patch: translation of membership operations into wire operations
"""

from .groups import GroupClient, get_group_client
from .patch import (
    AddMembers,
    OpaqueOperation,
    RemoveMember,
    extract_username_from_path,
    parse_operation,
    translate_operations,
)
from .users import UserClient, UserIdResolver

__all__ = [
    "GroupClient",
    "get_group_client",
    "UserClient",
    "UserIdResolver",
    "AddMembers",
    "RemoveMember",
    "OpaqueOperation",
    "extract_username_from_path",
    "parse_operation",
    "translate_operations",
]
