"""
Time helpers for the NexusCloud theme.

The copyright line in the footers shows the calendar year of the
configured timezone, not of the server's local clock.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


def resolve_timezone(tz: Optional[str]) -> ZoneInfo | timezone:
    """
    Resolve an IANA timezone name.

    Args:
        tz: IANA name such as "Europe/Berlin" (None means UTC)

    Returns:
        The matching tzinfo, or UTC for unknown names
    """
    if not tz:
        return timezone.utc
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone '{tz}', using UTC")
        return timezone.utc


def now(tz: Optional[str] = None) -> datetime:
    """Current time in the given timezone."""
    return datetime.now(resolve_timezone(tz))


def current_year(tz: Optional[str] = None) -> int:
    """Current calendar year in the given timezone."""
    return now(tz).year
