"""Unit tests for environment driven settings."""

import pytest

from verify_directory.directory.groups import GroupClient, get_group_client
from verify_directory.settings import Settings


class TestSettings:
    """Test cases for Settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("VERIFY_TENANT", "example.verify.ibm.com")
        monkeypatch.setenv("VERIFY_TOKEN", "abc")
        monkeypatch.setenv("VERIFY_TIMEOUT", "5")
        monkeypatch.setenv("VERIFY_SSL", "false")

        settings = Settings(_env_file=None)

        assert settings.timeout_seconds == 5.0
        assert settings.verify_ssl is False
        auth = settings.auth_config()
        assert auth.tenant == "example.verify.ibm.com"
        assert auth.token == "abc"

    def test_auth_config_requires_tenant_and_token(self, monkeypatch):
        monkeypatch.delenv("VERIFY_TENANT", raising=False)
        monkeypatch.delenv("VERIFY_TOKEN", raising=False)

        with pytest.raises(ValueError):
            Settings(_env_file=None).auth_config()

    @pytest.mark.asyncio
    async def test_get_group_client(self, monkeypatch):
        monkeypatch.setenv("VERIFY_TIMEOUT", "7")

        async with get_group_client(Settings(_env_file=None)) as client:
            assert isinstance(client, GroupClient)
            assert client.transport.timeout == 7.0
            assert client.user_resolver.transport is client.transport
