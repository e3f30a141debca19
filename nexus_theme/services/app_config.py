"""
App configuration store for the NexusCloud theme.

A small key-value store scoped per app, e.g.::

    {"core": {"legal.privacy_policy_url": "https://example.com/privacy"}}

The store is backed by an optional JSON file. The file is read lazily on
the first lookup so that a broken file surfaces as an AppConfigError at
the call site instead of at import time.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import get_settings

logger = logging.getLogger(__name__)


class AppConfigError(Exception):
    """Base exception for app config errors."""
    pass


class AppConfigLoadError(AppConfigError):
    """Raised when the backing file cannot be read or parsed."""
    pass


class AppConfigStore:
    """
    Per-app key-value configuration.

    Values are always strings. A missing backing file means an empty store.
    """

    def __init__(self, data_path: Optional[Path] = None, values: Optional[dict[str, dict[str, str]]] = None):
        """
        Initialize the store.

        Args:
            data_path: JSON file to load values from (optional)
            values: Initial values, used instead of the file when given
        """
        self.data_path = Path(data_path) if data_path else None
        self._values: dict[str, dict[str, str]] = {}
        self._loaded = False

        if values is not None:
            self._values = {app: dict(keys) for app, keys in values.items()}
            self._loaded = True

    def _load(self) -> None:
        if self._loaded:
            return

        if self.data_path is None or not self.data_path.exists():
            if self.data_path is not None:
                logger.debug(f"App config file not found: {self.data_path}")
            self._loaded = True
            return

        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise AppConfigLoadError(f"Cannot read app config {self.data_path}: {e}") from e

        if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
            raise AppConfigLoadError(
                f"App config {self.data_path} must map app names to objects"
            )

        self._values = {
            app: {str(k): str(v) for k, v in keys.items()}
            for app, keys in data.items()
        }
        self._loaded = True
        logger.info(f"Loaded app config for {len(self._values)} apps from {self.data_path}")

    def get_app_value(self, app: str, key: str, default: str = "") -> str:
        """
        Look up a value.

        Args:
            app: App scope (e.g. "core")
            key: Setting name (e.g. "legal.imprint_url")
            default: Returned when the key is not set

        Returns:
            Stored value or default

        Raises:
            AppConfigError: If the backing file is unreadable
        """
        self._load()
        return self._values.get(app, {}).get(key, default)

    def set_app_value(self, app: str, key: str, value: str) -> None:
        """Set a value in memory."""
        self._load()
        self._values.setdefault(app, {})[key] = str(value)

    def delete_app_value(self, app: str, key: str) -> bool:
        """Remove a value. Returns True if it existed."""
        self._load()
        keys = self._values.get(app)
        if not keys or key not in keys:
            return False
        del keys[key]
        if not keys:
            del self._values[app]
        return True

    def get_app_keys(self, app: str) -> list[str]:
        """List the keys set for an app, sorted."""
        self._load()
        return sorted(self._values.get(app, {}))

    def save(self, data_path: Optional[Path] = None) -> None:
        """Write the current values back to JSON."""
        target = Path(data_path) if data_path else self.data_path
        if target is None:
            raise AppConfigError("No file to save app config to")

        self._load()
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            json.dump(self._values, f, indent=2, sort_keys=True)


# Global store instance
_app_config: Optional[AppConfigStore] = None


def get_app_config() -> AppConfigStore:
    """Get or create the global app config store."""
    global _app_config
    if _app_config is None:
        settings = get_settings()
        _app_config = AppConfigStore(data_path=settings.app_config_file)
    return _app_config


def reset_app_config() -> None:
    """Drop the global store so the next call re-reads settings."""
    global _app_config
    _app_config = None
