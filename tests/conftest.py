"""
Shared fixtures for the theme tests.
"""

import pytest

from nexus_theme.config import get_settings, get_theme_defaults
from nexus_theme.services import get_l10n, reset_app_config

THEME_ENV_VARS = [
    "ENVIRONMENT",
    "DEBUG",
    "LOG_LEVEL",
    "JSON_LOGS",
    "DEFAULT_LANGUAGE",
    "L10N_DIR",
    "TIMEZONE",
    "APP_CONFIG_FILE",
    "VERSION_OVERRIDE",
    "THEME_FILE",
]


def _clear_caches():
    get_settings.cache_clear()
    get_theme_defaults.cache_clear()
    get_l10n.cache_clear()
    reset_app_config()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test with default settings and empty global caches."""
    for name in THEME_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a stray .env in the working directory out of the tests
    monkeypatch.chdir(tmp_path)
    _clear_caches()
    yield
    _clear_caches()
