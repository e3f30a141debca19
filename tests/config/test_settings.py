"""
Tests for application settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from nexus_theme.config import Settings, get_settings, reload_settings


class TestSettings:
    """Tests for Settings loading and validation."""

    def test_defaults(self):
        """Test values without any environment."""
        settings = Settings()

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.default_language == "en"
        assert settings.timezone == "UTC"
        assert settings.app_config_file is None
        assert settings.version_override is None
        assert settings.is_development
        assert not settings.is_production

    def test_env_override(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("APP_CONFIG_FILE", "/etc/nexus/app_config.json")

        settings = Settings()

        assert settings.is_production
        assert settings.log_level == "DEBUG"
        assert settings.app_config_file == Path("/etc/nexus/app_config.json")

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_timezone(self):
        """Test unknown timezones are rejected."""
        with pytest.raises(ValidationError):
            Settings(timezone="Mars/Olympus_Mons")

    def test_valid_timezone(self):
        """Test IANA names are accepted."""
        assert Settings(timezone="Europe/Berlin").timezone == "Europe/Berlin"

    def test_language_normalized(self):
        """Test language tags use underscores."""
        assert Settings(default_language="de-DE").default_language == "de_DE"

    def test_cached_and_reloaded(self, monkeypatch):
        """Test get_settings caches until reloaded."""
        first = get_settings()
        assert get_settings() is first

        monkeypatch.setenv("VERSION_OVERRIDE", "1.2.3")
        assert get_settings().version_override is None
        assert reload_settings().version_override == "1.2.3"
