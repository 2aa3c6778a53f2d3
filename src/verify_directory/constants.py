"""
Constants used throughout the directory client.

This module defines all constant values used by the client including:
- SCIM API paths on the tenant
- Schema URNs for requests and extensions
- Media types and header names
"""

# API paths relative to the tenant host
API_GROUPS = "v2.0/Groups"
API_USERS = "v2.0/Users"

# SCIM schema URNs
SCIM_GROUP_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:Group"
SCIM_PATCH_OP_SCHEMA = "urn:ietf:params:scim:api:messages:2.0:PatchOp"
IBM_GROUP_EXTENSION = "urn:ietf:params:scim:schemas:extension:ibm:2.0:Group"
IBM_NOTIFICATION_EXTENSION = (
    "urn:ietf:params:scim:schemas:extension:ibm:2.0:Notification"
)

# Media types
SCIM_MEDIA_TYPE = "application/scim+json"
JSON_MEDIA_TYPE = "application/json"

# Vendor header that stops the tenant from forcing a password reset on
# users added as members of a newly created group
NO_PASSWORD_RESET_HEADER = "groupshouldnotneedtoresetpassword"

# Patch operation names recognised by the translator
PATCH_OP_ADD = "add"
PATCH_OP_REMOVE = "remove"
MEMBERS_PATH = "members"

# Canonical filter path for removing a single member by ID
REMOVE_MEMBER_PATH_TEMPLATE = 'members[value eq "{member_id}"]'

# Default configuration values
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_BODY_PREVIEW_LIMIT = 1024
