"""
Application settings for the NexusCloud theme.
Uses Pydantic for validation and environment variable loading.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="development, staging, or production")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Emit JSON logs instead of console output")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="HTTP server port")

    # Localisation
    default_language: str = Field(default="en", description="Language used when none is requested")
    l10n_dir: Optional[Path] = Field(default=None, description="Extra directory of translation catalogs")
    timezone: str = Field(default="UTC", description="IANA timezone used for the copyright year")

    # External collaborators
    app_config_file: Optional[Path] = Field(
        default=None,
        description="JSON file backing the app config store (e.g. legal URL overrides)"
    )
    version_override: Optional[str] = Field(default=None, description="Version shown in the long footer")
    theme_file: Optional[Path] = Field(default=None, description="JSON file replacing the built-in theme")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v):
        """Reject timezone names zoneinfo does not know."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @field_validator("default_language")
    @classmethod
    def normalize_language(cls, v):
        """Normalize language codes like 'de-DE' to 'de_DE'."""
        return v.strip().replace("-", "_") or "en"

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
