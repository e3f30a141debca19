"""
NexusCloud theme provider.

The host application asks a Theme for everything brand-specific: names,
URLs, colors, footer HTML and social metadata. Most values are constants
from ThemeDefaults. Three pieces come from collaborators:

- the privacy policy and imprint URLs can be overridden in the app config
  store (scope "core")
- footer labels are translated through the "core" L10N
- the long footer shows the version string

Failures of those collaborators never reach the caller; the built-in value
is used instead.
"""

import html
import logging
from typing import Callable, Optional

from .config import ThemeDefaults, get_settings, get_theme_defaults
from .services import AppConfigStore, L10N, get_app_config, get_l10n, get_version_string
from .services.l10n import SOURCE_LANGUAGE
from .utils import current_year

logger = logging.getLogger(__name__)

CONFIG_SCOPE = "core"
PRIVACY_POLICY_KEY = "legal.privacy_policy_url"
IMPRINT_KEY = "legal.imprint_url"


class Theme:
    """Branding configuration provider."""

    def __init__(
        self,
        defaults: Optional[ThemeDefaults] = None,
        app_config: Optional[AppConfigStore] = None,
        language: Optional[str] = None,
        l10n_factory: Callable[[str, Optional[str]], L10N] = get_l10n,
        version_provider: Callable[[], str] = get_version_string,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Initialize the theme.

        Args:
            defaults: Static branding values (default: active theme defaults)
            app_config: Store for the legal URL overrides (default: global store)
            language: Language for footer labels (default: Settings.default_language)
            l10n_factory: Called as l10n_factory(app, language)
            version_provider: Returns the version shown in the long footer
            clock: Returns the copyright year (default: current year in Settings.timezone)
        """
        self.defaults = defaults if defaults is not None else get_theme_defaults()
        self._app_config = app_config
        self.language = language
        self._l10n_factory = l10n_factory
        self._version_provider = version_provider
        self._clock = clock

    @property
    def app_config(self) -> AppConfigStore:
        if self._app_config is None:
            self._app_config = get_app_config()
        return self._app_config

    # -------------------------------------------------------------------------
    # URLs
    # -------------------------------------------------------------------------

    def get_base_url(self) -> str:
        return self.defaults.base_url

    def get_sync_client_url(self) -> str:
        """URL where the desktop sync clients are listed."""
        return self.defaults.sync_client_url

    def get_ios_client_url(self) -> str:
        return self.defaults.ios_client_url

    def get_itunes_app_id(self) -> str:
        return self.defaults.itunes_app_id

    def get_android_client_url(self) -> str:
        return self.defaults.android_client_url

    def get_doc_base_url(self) -> str:
        return self.defaults.doc_base_url

    def get_terms_url(self) -> str:
        return self.defaults.terms_url

    def get_support_url(self) -> str:
        return self.defaults.support_url

    def get_privacy_policy_url(self) -> str:
        """Privacy policy URL, overridable via the app config store."""
        return self._get_legal_url(PRIVACY_POLICY_KEY, self.defaults.privacy_policy_url)

    def get_imprint_url(self) -> str:
        """Imprint URL, overridable via the app config store."""
        return self._get_legal_url(IMPRINT_KEY, self.defaults.imprint_url)

    def _get_legal_url(self, key: str, default: str) -> str:
        try:
            return self.app_config.get_app_value(CONFIG_SCOPE, key, default)
        except Exception as e:
            logger.warning(f"App config lookup for '{key}' failed, using default: {e}")
            return default

    def build_doc_link_to_key(self, key: str) -> str:
        """
        Build a documentation link for a topic.

        Args:
            key: Documentation section key (e.g. "sync")

        Returns:
            Complete documentation URL
        """
        return self.get_doc_base_url() + "/guides/" + key

    # -------------------------------------------------------------------------
    # Names and texts
    # -------------------------------------------------------------------------

    def get_title(self) -> str:
        return self.defaults.title

    def get_name(self) -> str:
        return self.defaults.name

    def get_html_name(self) -> str:
        return self.defaults.html_name

    def get_entity(self) -> str:
        return self.defaults.entity

    def get_slogan(self) -> str:
        return self.defaults.slogan

    def get_logo_claim(self) -> str:
        return self.defaults.logo_claim

    def get_login_message(self) -> str:
        return self.defaults.login_message

    def get_dashboard_welcome(self) -> str:
        return self.defaults.dashboard_welcome

    # -------------------------------------------------------------------------
    # Colors and styling
    # -------------------------------------------------------------------------

    def get_mail_header_color(self) -> str:
        """Primary brand color, used for email headers."""
        return self.defaults.colors.mail_header

    def get_accent_color(self) -> str:
        return self.defaults.colors.accent

    def get_background_color(self) -> str:
        return self.defaults.colors.background

    def get_text_color(self) -> str:
        return self.defaults.colors.text

    def get_theme_classes(self) -> dict[str, str]:
        """CSS class names for theme elements."""
        return dict(self.defaults.theme_classes)

    def to_css_variables(self) -> dict[str, str]:
        """Convert the theme colors to CSS custom properties."""
        return {
            "--nexus-mail-header": self.get_mail_header_color(),
            "--nexus-accent": self.get_accent_color(),
            "--nexus-background": self.get_background_color(),
            "--nexus-text": self.get_text_color(),
        }

    def to_css_string(self) -> str:
        """Generate CSS :root block with theme variables."""
        lines = [":root {"]
        for name, value in self.to_css_variables().items():
            lines.append(f"  {name}: {value};")
        lines.append("}")
        return "\n".join(lines)

    # -------------------------------------------------------------------------
    # Social metadata
    # -------------------------------------------------------------------------

    def get_open_graph_data(self) -> dict[str, str]:
        """OpenGraph and Twitter card metadata for social sharing."""
        return {
            "og:site_name": self.get_name(),
            "og:title": self.get_title(),
            "og:description": self.get_slogan(),
            "og:url": self.get_base_url(),
            "og:type": "website",
            "og:image": self.get_base_url() + self.defaults.og_image_path,
            "twitter:card": "summary_large_image",
            "twitter:site": self.defaults.twitter_site,
        }

    # -------------------------------------------------------------------------
    # Footers
    # -------------------------------------------------------------------------

    def get_l10n(self) -> L10N:
        """Translations for the "core" app in this theme's language."""
        try:
            return self._l10n_factory(CONFIG_SCOPE, self.language)
        except Exception as e:
            logger.warning(f"Translations for '{self.language}' unavailable, using source strings: {e}")
            return L10N(CONFIG_SCOPE, self.language or SOURCE_LANGUAGE)

    def _current_year(self) -> int:
        if self._clock is not None:
            return self._clock()
        return current_year(get_settings().timezone)

    def _get_version_string(self) -> str:
        try:
            return self._version_provider()
        except Exception as e:
            logger.debug(f"Version lookup failed, using {self.defaults.fallback_version}: {e}")
            return self.defaults.fallback_version

    @staticmethod
    def _link(href: str, label: str, css_class: Optional[str] = None) -> str:
        class_attr = f' class="{css_class}"' if css_class else ""
        return (
            f'<a href="{html.escape(href)}" target="_blank" rel="noopener"{class_attr}>'
            f"{html.escape(label, quote=False)}</a>"
        )

    def get_short_footer(self) -> str:
        """
        Compact footer with the copyright line and essential links.

        Privacy and imprint links are left out when their URL is empty.
        """
        l10n = self.get_l10n()
        year = self._current_year()

        parts = [
            '<div class="footer-content">',
            '<div class="footer-main">',
            f"© {year} " + self._link(self.get_base_url(), self.get_entity(), "entity-link"),
            '<span class="footer-separator">•</span>',
            f'<span class="footer-slogan">{self.get_slogan()}</span>',
            "</div>",
            '<div class="footer-links">',
        ]

        privacy_url = self.get_privacy_policy_url()
        if privacy_url:
            parts.append(self._link(privacy_url, l10n.t("Privacy"), "footer-link"))

        imprint_url = self.get_imprint_url()
        if imprint_url:
            parts.append(self._link(imprint_url, l10n.t("Legal"), "footer-link"))

        parts.append(self._link(self.get_terms_url(), l10n.t("Terms"), "footer-link"))
        parts.append(self._link(self.get_support_url(), l10n.t("Support"), "footer-link"))
        parts.append("</div>")
        parts.append("</div>")

        return "".join(parts)

    def get_long_footer(self) -> str:
        """
        Expanded footer with brand block, link sections and version info.
        """
        l10n = self.get_l10n()
        year = self._current_year()

        parts = [
            '<div class="footer-extended">',
            '<div class="footer-brand">',
            f'<div class="footer-logo">{self.get_html_name()}</div>',
            f'<p class="footer-description">{self.get_slogan()}</p>',
            "</div>",
            '<div class="footer-sections">',
            '<div class="footer-section">',
            "<h4>Platform</h4>",
            self._link(self.get_sync_client_url(), l10n.t("Downloads")),
            self._link(self.get_doc_base_url(), l10n.t("Documentation")),
            self._link(self.get_support_url(), l10n.t("Support")),
            "</div>",
            '<div class="footer-section">',
            "<h4>Legal</h4>",
        ]

        privacy_url = self.get_privacy_policy_url()
        if privacy_url:
            parts.append(self._link(privacy_url, l10n.t("Privacy Policy")))

        imprint_url = self.get_imprint_url()
        if imprint_url:
            parts.append(self._link(imprint_url, l10n.t("Imprint")))

        parts.extend([
            self._link(self.get_terms_url(), l10n.t("Terms of Service")),
            "</div>",
            "</div>",
            '<div class="footer-bottom">',
            f'<p class="copyright">© {year} {html.escape(self.get_entity(), quote=False)}. '
            f'{html.escape(l10n.t("All rights reserved."), quote=False)}</p>',
            '<div class="footer-meta">',
            f'<span class="version-info">v{html.escape(self._get_version_string())}</span>',
            '<span class="build-info">Built with ❤️</span>',
            "</div>",
            "</div>",
            "</div>",
        ])

        return "".join(parts)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Snapshot of the theme for the frontend."""
        return {
            "name": self.get_name(),
            "title": self.get_title(),
            "html_name": self.get_html_name(),
            "entity": self.get_entity(),
            "slogan": self.get_slogan(),
            "logo_claim": self.get_logo_claim(),
            "login_message": self.get_login_message(),
            "dashboard_welcome": self.get_dashboard_welcome(),
            "urls": {
                "base": self.get_base_url(),
                "sync_client": self.get_sync_client_url(),
                "ios_client": self.get_ios_client_url(),
                "android_client": self.get_android_client_url(),
                "docs": self.get_doc_base_url(),
                "privacy_policy": self.get_privacy_policy_url(),
                "imprint": self.get_imprint_url(),
                "terms": self.get_terms_url(),
                "support": self.get_support_url(),
            },
            "itunes_app_id": self.get_itunes_app_id(),
            "colors": {
                "mail_header": self.get_mail_header_color(),
                "accent": self.get_accent_color(),
                "background": self.get_background_color(),
                "text": self.get_text_color(),
            },
            "theme_classes": self.get_theme_classes(),
            "open_graph": self.get_open_graph_data(),
        }


def get_theme(language: Optional[str] = None) -> Theme:
    """Create a theme wired to the global collaborators."""
    return Theme(language=language)
