"""
Pydantic models for SCIM PatchOp requests.

A patch request is an envelope holding the PatchOp schema URN and an ordered
list of operations. Operation values are left untyped: their shape depends on
the operation and path, and anything the client does not recognise is sent
through as given.
"""

from typing import Any

from pydantic import BaseModel, Field

from verify_directory.constants import SCIM_PATCH_OP_SCHEMA


class PatchOperation(BaseModel):
    """A single patch instruction."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    op: str = Field(..., description="Operation name, e.g. add or remove")
    path: str | None = Field(None, description="Attribute path or filter")
    value: Any = Field(None, description="Operation payload")

    def to_wire(self) -> dict[str, Any]:
        """Serialize without unset path/value keys; an empty path is unset."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        if data.get("path") == "":
            del data["path"]
        return data


class PatchRequest(BaseModel):
    """Envelope submitted in the body of a PATCH request."""

    model_config = {"populate_by_name": True}

    schemas: list[str] = Field(default_factory=lambda: [SCIM_PATCH_OP_SCHEMA])
    operations: list[PatchOperation] = Field(
        default_factory=list, alias="Operations"
    )

    def to_wire(self) -> dict[str, Any]:
        return {
            "schemas": list(self.schemas),
            "Operations": [operation.to_wire() for operation in self.operations],
        }


class GroupPatchRequest(BaseModel):
    """
    A named group update document.

    Pairs the display name of the group to change with the patch to apply,
    so an update can be stored in a file and applied in one call.
    """

    model_config = {"populate_by_name": True}

    group_name: str = Field(..., alias="displayName")
    scim_patch: PatchRequest = Field(..., alias="scimPatch")
