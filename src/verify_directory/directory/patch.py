"""
Translation of membership patch operations into wire operations.

Callers describe membership changes with usernames:

    {"op": "add", "path": "members", "value": [{"value": "alice"}]}
    {"op": "remove", "path": 'members[value eq "bob"]'}

The tenant only understands opaque user IDs, so before a patch is sent every
username is resolved and the operations are rewritten:

    {"op": "add", "path": "members", "value": [{"value": "<alice-id>"}]}
    {"op": "remove", "path": 'members[value eq "<bob-id>"]'}

Each operation is parsed once into one of three variants (AddMembers,
RemoveMember, OpaqueOperation). Anything that is not an add to ``members`` or
a remove passes through untouched, as do add elements without a string
``value`` and remove paths that name no user.

All usernames are resolved before anything is written back, so a failed
resolution leaves both the caller's objects and the tenant unchanged.
"""

import logging
import re
from collections.abc import Mapping, MutableMapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from verify_directory.constants import (
    MEMBERS_PATH,
    PATCH_OP_ADD,
    PATCH_OP_REMOVE,
    REMOVE_MEMBER_PATH_TEMPLATE,
)
from verify_directory.errors import (
    DependencyResolutionError,
    DirectoryError,
    InvalidOperationError,
)
from verify_directory.models.common import AuthConfig
from verify_directory.models.group import Member
from verify_directory.models.patch import PatchOperation, PatchRequest

from .users import UserIdResolver

logger = logging.getLogger(__name__)

# Captures everything after "value eq" up to the next quote or end of string,
# with or without surrounding quotes.
_USERNAME_IN_PATH = re.compile(r'value eq "?([^"]+)"?')

OperationInput = PatchOperation | Mapping[str, Any]


@dataclass(frozen=True)
class AddMembers:
    """``add`` to ``members``: a list of member references to resolve."""

    source: PatchOperation
    members: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class RemoveMember:
    """``remove``: a member filter path naming one username, if any."""

    source: PatchOperation
    username: str | None = None


@dataclass(frozen=True)
class OpaqueOperation:
    """Any other operation; sent as given."""

    source: PatchOperation


ParsedOperation = AddMembers | RemoveMember | OpaqueOperation


def extract_username_from_path(path: str | None) -> str | None:
    """
    Pull the username out of a member filter path.

    Accepts ``members[value eq "alice"]``, ``value eq "alice"`` and the
    unquoted ``value eq alice``.

    Returns:
        The username, or None if the path holds no ``value eq`` comparison
    """
    if not path:
        return None

    match = _USERNAME_IN_PATH.search(path)
    if match is None:
        return None
    return match.group(1)


def member_username(element: Any) -> str | None:
    """Return the username held by an add element, or None to skip it."""
    if isinstance(element, Member):
        return element.value
    if isinstance(element, Mapping):
        value = element.get("value")
        if isinstance(value, str):
            return value
    return None


def to_patch_operation(operation: OperationInput) -> PatchOperation:
    """
    Accept either a PatchOperation or a plain mapping.

    Raises:
        InvalidOperationError: If the entry has no string ``op`` or a
            non-string ``path``
    """
    if isinstance(operation, PatchOperation):
        return operation
    try:
        return PatchOperation.model_validate(operation)
    except PydanticValidationError as e:
        logger.error(
            f"invalid patch operation {operation!r}",
            extra={"error_type": "ValidationError"},
        )
        raise InvalidOperationError(operation, cause=e) from e


def validate_operations(operations: Sequence[OperationInput]) -> None:
    """Check that every entry reads as a patch operation, without resolving."""
    for operation in operations:
        to_patch_operation(operation)


def parse_operation(operation: OperationInput) -> ParsedOperation:
    """Classify one caller operation."""
    source = to_patch_operation(operation)

    if source.op == PATCH_OP_ADD and source.path == MEMBERS_PATH:
        if isinstance(source.value, Sequence) and not isinstance(
            source.value, (str, bytes)
        ):
            return AddMembers(source=source, members=list(source.value))
        logger.debug("add to members without a value list; sending as given")
        return OpaqueOperation(source=source)

    if source.op == PATCH_OP_REMOVE:
        username = extract_username_from_path(source.path)
        if username is None:
            logger.debug(
                f"remove path {source.path!r} names no user; sending as given"
            )
        return RemoveMember(source=source, username=username)

    return OpaqueOperation(source=source)


def removal_path(member_id: str) -> str:
    """Canonical path removing one member by ID."""
    return REMOVE_MEMBER_PATH_TEMPLATE.format(member_id=member_id)


async def resolve_username(
    resolver: UserIdResolver, auth: AuthConfig, username: str
) -> str:
    """
    Resolve one username, wrapping failures with the offending name.

    Raises:
        DependencyResolutionError: If the resolver fails
    """
    try:
        return await resolver.resolve_user_id(auth, username)
    except DirectoryError as e:
        logger.error(
            f"unable to get user ID for username {username}; err={e.message}",
            extra={"username": username, "error_type": type(e).__name__},
        )
        raise DependencyResolutionError(username, cause=e) from e


def _set(target: Any, key: str, value: Any) -> None:
    if isinstance(target, MutableMapping):
        target[key] = value
    else:
        setattr(target, key, value)


async def translate_operations(
    operations: Sequence[OperationInput],
    resolver: UserIdResolver,
    auth: AuthConfig,
    *,
    in_place: bool = False,
) -> list[PatchOperation]:
    """
    Rewrite caller operations into wire operations.

    Args:
        operations: Caller operations, in order
        resolver: Username to user ID resolver
        auth: Tenant and token passed to the resolver
        in_place: Also write the resolved IDs and paths back into the
            caller's operation objects once every username has resolved

    Returns:
        New operations ready to be wrapped in a PatchRequest

    Raises:
        DependencyResolutionError: If any username cannot be resolved; no
            caller object has been modified in that case
    """
    translated: list[PatchOperation] = []
    write_back: list[tuple[Any, str, Any]] = []

    for original in operations:
        parsed = parse_operation(original)

        if isinstance(parsed, AddMembers):
            values: list[Any] = []
            for element in parsed.members:
                username = member_username(element)
                if username is None:
                    values.append(element)
                    continue

                user_id = await resolve_username(resolver, auth, username)
                if isinstance(element, Member):
                    values.append(element.model_copy(update={"value": user_id}))
                else:
                    values.append({**element, "value": user_id})
                write_back.append((element, "value", user_id))

            translated.append(parsed.source.model_copy(update={"value": values}))

        elif isinstance(parsed, RemoveMember) and parsed.username is not None:
            user_id = await resolve_username(resolver, auth, parsed.username)
            path = removal_path(user_id)
            translated.append(parsed.source.model_copy(update={"path": path}))
            write_back.append((original, "path", path))

        else:
            translated.append(parsed.source)

    if in_place:
        for target, key, value in write_back:
            _set(target, key, value)

    return translated


def build_patch_request(operations: Sequence[PatchOperation]) -> PatchRequest:
    """Wrap operations in the PatchOp envelope."""
    return PatchRequest(operations=list(operations))
