"""Tests for settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError as SettingsValidationError

from fabric_mcp.config import Settings, get_settings


class TestSettings:
    """Settings loaded from FABRIC_MCP_* variables."""

    def test_defaults(self):
        settings = Settings()

        assert settings.fabric_binary == "fabric"
        assert settings.patterns_dir is None
        assert settings.max_concurrency is None
        assert settings.debug is False

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FABRIC_MCP_FABRIC_BINARY", "/opt/fabric/bin/fabric")
        monkeypatch.setenv("FABRIC_MCP_PATTERNS_DIR", str(tmp_path))
        monkeypatch.setenv("FABRIC_MCP_MAX_CONCURRENCY", "4")
        monkeypatch.setenv("FABRIC_MCP_DEBUG", "1")

        settings = Settings()

        assert settings.fabric_binary == "/opt/fabric/bin/fabric"
        assert settings.patterns_dir == Path(tmp_path)
        assert settings.max_concurrency == 4
        assert settings.debug is True

    def test_rejects_non_positive_concurrency(self, monkeypatch):
        monkeypatch.setenv("FABRIC_MCP_MAX_CONCURRENCY", "0")
        with pytest.raises(SettingsValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
