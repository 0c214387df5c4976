"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from lovense_cloud.config.settings import (
    LOVENSE_COMMAND_URL,
    LOVENSE_QR_URL,
    RelayConfig,
    ServerConfig,
    Settings,
    load_settings,
)


class TestSettings:
    def test_default_settings(self) -> None:
        """Default Settings should be valid with no token."""
        settings = Settings()
        assert settings.lovense_token.get_secret_value() == ""
        assert settings.lovense_uid == "mai"
        assert settings.server.port == 8787
        assert settings.relay.command_url == LOVENSE_COMMAND_URL
        assert settings.relay.qr_url == LOVENSE_QR_URL

    def test_relay_config_defaults(self) -> None:
        config = RelayConfig()
        assert config.uname == "Mai"
        assert config.timeout is None

    def test_invalid_port_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServerConfig(port=70000)

    def test_credentials(self, settings: Settings) -> None:
        creds = settings.credentials()
        assert creds.token == "test-token"
        assert creds.uid == "test-uid"
        assert creds.is_configured

    def test_empty_uid_defaults_to_mai(self) -> None:
        assert Settings(lovense_uid="").credentials().uid == "mai"

    def test_token_not_in_repr(self, settings: Settings) -> None:
        assert "test-token" not in repr(settings)

    def test_prefixed_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOVENSE_CLOUD_SERVER__PORT", "9000")
        assert Settings().server.port == 9000


class TestLoadSettings:
    def test_missing_file(self, tmp_path: Path) -> None:
        """load_settings with missing file should return defaults."""
        settings = load_settings(tmp_path / "nonexistent.yaml")
        assert settings.lovense_uid == "mai"
        assert not settings.credentials().is_configured

    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "lovense-cloud.yaml"
        path.write_text(
            "lovense_uid: kai\n"
            "server:\n"
            "  port: 9100\n"
            "relay:\n"
            "  uname: Kai\n"
            "  timeout: 4.5\n"
        )
        settings = load_settings(path)
        assert settings.lovense_uid == "kai"
        assert settings.server.port == 9100
        assert settings.relay.uname == "Kai"
        assert settings.relay.timeout == 4.5

    def test_unprefixed_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "lovense-cloud.yaml"
        path.write_text("lovense_uid: kai\n")
        monkeypatch.setenv("LOVENSE_TOKEN", "env-token")
        monkeypatch.setenv("LOVENSE_UID", "env-uid")
        creds = load_settings(path).credentials()
        assert creds.token == "env-token"
        assert creds.uid == "env-uid"

    def test_dotenv_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("# local secrets\nLOVENSE_TOKEN=dotenv-token\n")
        try:
            settings = load_settings(tmp_path / "missing.yaml")
            assert settings.credentials().token == "dotenv-token"
        finally:
            monkeypatch.delenv("LOVENSE_TOKEN", raising=False)
