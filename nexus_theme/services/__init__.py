"""External collaborators of the NexusCloud theme."""

from .app_config import (
    AppConfigError,
    AppConfigLoadError,
    AppConfigStore,
    get_app_config,
    reset_app_config,
)
from .l10n import (
    L10N,
    available_languages,
    get_l10n,
    load_catalog,
)
from .version import get_version_string

__all__ = [
    # App config
    "AppConfigError",
    "AppConfigLoadError",
    "AppConfigStore",
    "get_app_config",
    "reset_app_config",
    # Localisation
    "L10N",
    "available_languages",
    "get_l10n",
    "load_catalog",
    # Version
    "get_version_string",
]
