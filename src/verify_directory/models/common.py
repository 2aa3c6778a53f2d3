"""
Common models shared across the group and user clients.
"""

from pydantic import BaseModel, Field, field_validator


class AuthConfig(BaseModel):
    """Tenant and bearer token used to authorize every API call."""

    model_config = {"populate_by_name": True, "frozen": True}

    tenant: str = Field(..., description="Tenant host name, without scheme")
    token: str = Field(..., repr=False, description="OAuth bearer access token")

    @field_validator("tenant")
    @classmethod
    def strip_tenant(cls, v: str) -> str:
        """Drop a scheme prefix or trailing slash pasted into the tenant."""
        v = v.strip()
        for prefix in ("https://", "http://"):
            if v.startswith(prefix):
                v = v[len(prefix) :]
        v = v.rstrip("/")
        if not v:
            raise ValueError("tenant must not be empty")
        return v

    def base_url(self) -> str:
        """Return the https base URL of the tenant."""
        return f"https://{self.tenant}"
