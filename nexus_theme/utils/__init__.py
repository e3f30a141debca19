"""Utility modules for the NexusCloud theme."""

from .clock import current_year, now, resolve_timezone
from .logging import setup_logging, get_logger

__all__ = ["current_year", "now", "resolve_timezone", "setup_logging", "get_logger"]
