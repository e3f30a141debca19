"""
Localisation service for the NexusCloud theme.

Translation catalogs are JSON files named after the language code and keyed
by app, then by source string::

    {"core": {"Privacy": "Datenschutz"}}

Bundled catalogs live in ``nexus_theme/l10n``. An extra directory set via
``Settings.l10n_dir`` is searched first so operators can override strings.
Untranslated strings fall through unchanged.
"""

import json
import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ..config import get_settings

logger = logging.getLogger(__name__)

BUNDLED_L10N_DIR = Path(__file__).parent.parent / "l10n"

# Source strings are written in English, so it never needs a catalog
SOURCE_LANGUAGE = "en"

LANGUAGE_RE = re.compile(r"^[A-Za-z]{2,3}(_[A-Za-z]{2})?$")


class L10N:
    """Translations for one app in one language."""

    def __init__(self, app: str, language: str, catalog: Optional[dict[str, str]] = None):
        self.app = app
        self.language = language
        self.catalog = catalog or {}

    def t(self, text: str, *args) -> str:
        """
        Translate a string.

        Args:
            text: Source string, may contain %s placeholders
            *args: Values substituted into the placeholders

        Returns:
            Translated string, or the source string when untranslated
        """
        translated = self.catalog.get(text, text)
        if args:
            try:
                return translated % args
            except (TypeError, ValueError):
                logger.warning(f"Bad placeholders in translation of '{text}' ({self.language})")
                return text % args
        return translated

    translate = t

    def __repr__(self) -> str:
        return f"L10N(app={self.app!r}, language={self.language!r}, entries={len(self.catalog)})"


def _catalog_dirs() -> list[Path]:
    settings = get_settings()
    dirs = []
    if settings.l10n_dir:
        dirs.append(Path(settings.l10n_dir))
    dirs.append(BUNDLED_L10N_DIR)
    return dirs


def is_valid_language(language: str) -> bool:
    """Check a code like 'de' or 'de_DE' before it becomes part of a file name."""
    return bool(LANGUAGE_RE.match(language))


def _candidate_languages(language: str) -> list[str]:
    """'de_DE' -> ['de_DE', 'de']"""
    candidates = [language]
    base = language.split("_", 1)[0]
    if base != language:
        candidates.append(base)
    return candidates


def load_catalog(app: str, language: str, dirs: Optional[list[Path]] = None) -> Optional[dict[str, str]]:
    """
    Load the catalog for an app and language.

    Entries from earlier directories win over later ones.

    Returns:
        Merged catalog, or None if no file provides the language
    """
    if not is_valid_language(language):
        logger.warning(f"Rejecting language code {language!r}")
        return None

    if dirs is None:
        dirs = _catalog_dirs()

    merged: dict[str, str] = {}
    found = False

    for lang in _candidate_languages(language):
        for directory in reversed(dirs):
            catalog_file = directory / f"{lang}.json"
            if not catalog_file.exists():
                continue
            try:
                with open(catalog_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to load catalog {catalog_file}: {e}")
                continue

            section = data.get(app, {}) if isinstance(data, dict) else None
            if not isinstance(section, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in section.items()
            ):
                logger.warning(f"Ignoring catalog {catalog_file}: '{app}' must map strings to strings")
                continue

            merged.update(section)
            found = True
        if found:
            return merged

    return None


@lru_cache
def get_l10n(app: str = "core", language: Optional[str] = None) -> L10N:
    """
    Get the translations for an app.

    Args:
        app: App scope of the catalog entries
        language: Language code (default: Settings.default_language)

    Returns:
        Cached L10N instance
    """
    if language is None:
        language = get_settings().default_language
    language = language.replace("-", "_")

    if language == SOURCE_LANGUAGE:
        return L10N(app, language)

    catalog = load_catalog(app, language)
    if catalog is None:
        logger.warning(f"No '{language}' translations for app '{app}', using source strings")
        return L10N(app, language)

    return L10N(app, language, catalog)


def available_languages() -> list[str]:
    """List languages with a catalog file, plus the source language."""
    languages = {SOURCE_LANGUAGE}
    for directory in _catalog_dirs():
        if directory.exists():
            for catalog_file in directory.glob("*.json"):
                languages.add(catalog_file.stem)
    return sorted(languages)
