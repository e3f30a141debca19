"""
Theme defaults for the NexusCloud branding.

The built-in values describe the NexusCloud dark theme. Operators can
rebrand by pointing ``Settings.theme_file`` at a JSON file with the same
fields; anything left out keeps its built-in value.
"""

import json
import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .settings import get_settings

logger = logging.getLogger(__name__)

HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


class ThemeColors(BaseModel):
    """Color scheme for the theme."""
    model_config = ConfigDict(frozen=True)

    mail_header: str = Field(default="#8b5cf6", description="Primary purple, used for email headers")
    accent: str = Field(default="#a78bfa", description="Light purple accent")
    background: str = Field(default="#0a0a0f", description="Deep dark background")
    text: str = Field(default="#f8fafc", description="Light text for the dark theme")

    @field_validator("mail_header", "accent", "background", "text")
    @classmethod
    def validate_hex(cls, v):
        """Colors must be #rgb or #rrggbb."""
        if not HEX_COLOR_RE.match(v):
            raise ValueError(f"Not a hex color: {v!r}")
        return v


def _default_theme_classes() -> dict[str, str]:
    return {
        "primary": "nexus-primary",
        "secondary": "nexus-secondary",
        "accent": "nexus-accent",
        "background": "nexus-bg",
        "surface": "nexus-surface",
        "text": "nexus-text",
    }


class ThemeDefaults(BaseModel):
    """Complete static branding record."""
    model_config = ConfigDict(frozen=True)

    # URLs
    base_url: str = Field(default="https://nexuscloud.tech", description="Organization website")
    sync_client_url: str = Field(default="https://nexuscloud.tech/downloads", description="Desktop client downloads")
    ios_client_url: str = Field(
        default="https://apps.apple.com/us/app/nexus-cloud/id1359583808",
        description="App Store page of the iOS client"
    )
    itunes_app_id: str = Field(default="1359583808", description="App Store id of the iOS client")
    android_client_url: str = Field(
        default="https://play.google.com/store/apps/details?id=tech.nexuscloud.android",
        description="Google Play page of the Android client"
    )
    doc_base_url: str = Field(default="https://docs.nexuscloud.tech", description="Documentation root")
    privacy_policy_url: str = Field(
        default="https://nexuscloud.tech/privacy",
        description="Privacy policy, unless overridden in app config"
    )
    imprint_url: str = Field(
        default="https://nexuscloud.tech/legal",
        description="Imprint/legal notice, unless overridden in app config"
    )
    terms_url: str = Field(default="https://nexuscloud.tech/terms", description="Terms of service")
    support_url: str = Field(default="https://support.nexuscloud.tech", description="Help center")

    # Names
    title: str = Field(default="NexusCloud - Next Generation Cloud Storage", description="Browser tab title")
    name: str = Field(default="NexusCloud", description="Short product name")
    html_name: str = Field(
        default='<span class="brand-name"><strong>Nexus</strong><span class="brand-accent">Cloud</span></span>',
        description="Product name with markup"
    )
    entity: str = Field(default="NexusCloud Technologies", description="Legal entity for copyright notices")
    slogan: str = Field(default="Secure • Fast • Intelligent Cloud Storage", description="Tagline")
    logo_claim: str = Field(
        default=(
            '<a href="https://nexuscloud.tech/enterprise" class="logo-claim-link" title="Enterprise Solutions">\n'
            '\t\t\t\t\t<span class="claim-text">Enterprise Ready</span>\n'
            '\t\t\t\t\t<span class="claim-icon">⚡</span>\n'
            '\t\t\t\t</a>'
        ),
        description="Claim shown next to the logo"
    )
    login_message: str = Field(default="Welcome to the future of cloud storage", description="Login page greeting")
    dashboard_welcome: str = Field(default="Your files, everywhere you need them", description="Dashboard greeting")

    # Styling
    colors: ThemeColors = Field(default_factory=ThemeColors)
    theme_classes: dict[str, str] = Field(default_factory=_default_theme_classes)

    # Social
    og_image_path: str = Field(default="/themes/nexus/img/og-image.png", description="OpenGraph image, relative to base_url")
    twitter_site: str = Field(default="@nexuscloud", description="Twitter/X handle")

    # Shown in the long footer when the version provider fails
    fallback_version: str = Field(default="2024.1", description="Version used when none can be determined")

    @field_validator(
        "base_url", "sync_client_url", "ios_client_url", "android_client_url",
        "doc_base_url", "terms_url", "support_url",
    )
    @classmethod
    def validate_link(cls, v):
        """Hyperlink targets must be absolute http(s) URLs."""
        if not v or not v.startswith(("https://", "http://")):
            raise ValueError(f"Not an http(s) URL: {v!r}")
        return v.rstrip("/")

    @field_validator("privacy_policy_url", "imprint_url")
    @classmethod
    def validate_optional_link(cls, v):
        """Legal links may be empty (page not provided) but never relative."""
        if v and not v.startswith(("https://", "http://")):
            raise ValueError(f"Not an http(s) URL: {v!r}")
        return v

    @field_validator("name", "entity", "title")
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be blank")
        return v


DEFAULT_THEME = ThemeDefaults()


def load_theme_from_file(theme_file: Path) -> ThemeDefaults:
    """Load theme defaults from JSON file."""
    with open(theme_file, "r", encoding="utf-8") as f:
        data = json.load(f)
    return ThemeDefaults(**data)


def save_theme_to_file(theme: ThemeDefaults, theme_file: Path) -> None:
    """Save theme defaults to JSON file."""
    theme_file.parent.mkdir(parents=True, exist_ok=True)
    with open(theme_file, "w", encoding="utf-8") as f:
        json.dump(theme.model_dump(), f, indent=2, ensure_ascii=False)


@lru_cache
def get_theme_defaults(theme_file: Optional[Path] = None) -> ThemeDefaults:
    """
    Get the active theme defaults.

    Looks for theme data in:
    1. The given theme_file
    2. Settings.theme_file
    3. Built-in DEFAULT_THEME
    """
    if theme_file is None:
        theme_file = get_settings().theme_file

    if theme_file is not None:
        theme_file = Path(theme_file)
        if theme_file.exists():
            try:
                return load_theme_from_file(theme_file)
            except Exception as e:
                logger.warning(f"Failed to load theme from {theme_file}: {e}")
        else:
            logger.warning(f"Theme file not found: {theme_file}")

    return DEFAULT_THEME


def reload_theme_defaults() -> ThemeDefaults:
    """Reload theme defaults (clears cache)."""
    get_theme_defaults.cache_clear()
    return get_theme_defaults()
