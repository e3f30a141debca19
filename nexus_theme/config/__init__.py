"""Configuration management for the NexusCloud theme."""

from .settings import Settings, get_settings, reload_settings
from .theme import (
    DEFAULT_THEME,
    ThemeColors,
    ThemeDefaults,
    get_theme_defaults,
    load_theme_from_file,
    reload_theme_defaults,
    save_theme_to_file,
)

__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
    "DEFAULT_THEME",
    "ThemeColors",
    "ThemeDefaults",
    "get_theme_defaults",
    "load_theme_from_file",
    "reload_theme_defaults",
    "save_theme_to_file",
]
