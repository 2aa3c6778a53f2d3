"""Centralized client settings using pydantic-settings.

This module provides a single source of truth for client configuration
loaded from environment variables. Uses pydantic for automatic validation,
type coercion, and documentation.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from verify_directory.constants import DEFAULT_TIMEOUT_SECONDS
from verify_directory.models.common import AuthConfig


class Settings(BaseSettings):
    """Client configuration loaded from environment variables.

    Tenant and token have no defaults; everything else has a sensible
    default. Override via environment variables as documented per field.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Tenant access
    tenant: str = Field(
        default="",
        validation_alias="VERIFY_TENANT",
        description="Tenant host name, e.g. example.verify.ibm.com",
    )
    token: str = Field(
        default="",
        repr=False,
        validation_alias="VERIFY_TOKEN",
        description="OAuth bearer access token for the tenant",
    )

    # HTTP transport
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        validation_alias="VERIFY_TIMEOUT",
        description="Request timeout in seconds",
    )
    verify_ssl: bool = Field(
        default=True,
        validation_alias="VERIFY_SSL",
        description="Verify the tenant's TLS certificate",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=True,
        validation_alias="JSON_LOGS",
        description="Enable JSON formatted logging for structured log aggregation",
    )
    correlation_ids: bool = Field(
        default=True,
        validation_alias="CORRELATION_IDS",
        description="Enable correlation IDs in logs for request tracing",
    )

    def auth_config(self) -> AuthConfig:
        """Build the AuthConfig for the configured tenant.

        Raises:
            ValueError: If tenant or token is not configured
        """
        if not self.tenant or not self.token:
            raise ValueError("VERIFY_TENANT and VERIFY_TOKEN must both be set")
        return AuthConfig(tenant=self.tenant, token=self.token)


# Global settings instance - initialized once at module import
settings = Settings()
