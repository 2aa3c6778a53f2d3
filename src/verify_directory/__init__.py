"""
verify-directory - async client for SCIM group management on a tenant.

Provides:
- Group lookup by display name, listing, creation and deletion
- Membership patches with usernames resolved to user IDs
- Typed errors for every failure mode
"""

from verify_directory.directory import GroupClient, UserClient, get_group_client
from verify_directory.models import AuthConfig, Group, Member, PatchOperation

__version__ = "0.1.0"

__all__ = [
    "AuthConfig",
    "Group",
    "GroupClient",
    "Member",
    "PatchOperation",
    "UserClient",
    "get_group_client",
]
