"""Version string shown in the long footer."""

from importlib.metadata import version

from ..config import get_settings

DISTRIBUTION_NAME = "nexus-theme"


def get_version_string() -> str:
    """
    Get the display version.

    Returns:
        Settings.version_override if set, else the installed package version

    Raises:
        PackageNotFoundError: If no override is set and the package is not installed
    """
    override = get_settings().version_override
    if override:
        return override
    return version(DISTRIBUTION_NAME)
