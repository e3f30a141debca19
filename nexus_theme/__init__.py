"""NexusCloud branding and theme configuration."""

from .theme import Theme, get_theme

__all__ = ["Theme", "get_theme"]
