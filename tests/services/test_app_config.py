"""
Tests for the app config store.
"""

import json

import pytest

from nexus_theme.services import (
    AppConfigError,
    AppConfigLoadError,
    AppConfigStore,
    get_app_config,
    reset_app_config,
)


class TestAppConfigStore:
    """Tests for AppConfigStore lookups and updates."""

    def test_missing_file_is_empty(self, tmp_path):
        """Test a missing file behaves like an empty store."""
        store = AppConfigStore(data_path=tmp_path / "missing.json")

        assert store.get_app_value("core", "legal.imprint_url", "fallback") == "fallback"
        assert store.get_app_keys("core") == []

    def test_no_file(self):
        """Test a store without backing file."""
        assert AppConfigStore().get_app_value("core", "anything") == ""

    def test_load_from_file(self, tmp_path):
        """Test values are read from JSON."""
        config_file = tmp_path / "app_config.json"
        config_file.write_text(json.dumps({
            "core": {"legal.imprint_url": "https://example.com/imprint", "retries": 3},
        }), encoding="utf-8")

        store = AppConfigStore(data_path=config_file)

        assert store.get_app_value("core", "legal.imprint_url") == "https://example.com/imprint"
        assert store.get_app_value("core", "retries") == "3"
        assert store.get_app_value("files", "legal.imprint_url", "x") == "x"

    def test_malformed_file(self, tmp_path):
        """Test broken JSON raises on lookup."""
        config_file = tmp_path / "app_config.json"
        config_file.write_text("{", encoding="utf-8")
        store = AppConfigStore(data_path=config_file)

        with pytest.raises(AppConfigLoadError):
            store.get_app_value("core", "legal.imprint_url")

    def test_wrong_shape(self, tmp_path):
        """Test a file that does not map apps to objects is rejected."""
        config_file = tmp_path / "app_config.json"
        config_file.write_text(json.dumps({"core": "https://example.com"}), encoding="utf-8")
        store = AppConfigStore(data_path=config_file)

        with pytest.raises(AppConfigError):
            store.get_app_value("core", "legal.imprint_url")

    def test_set_and_delete(self):
        """Test in-memory updates."""
        store = AppConfigStore(values={})

        store.set_app_value("core", "legal.imprint_url", "https://example.com/imprint")
        store.set_app_value("core", "legal.privacy_policy_url", "https://example.com/privacy")

        assert store.get_app_keys("core") == ["legal.imprint_url", "legal.privacy_policy_url"]
        assert store.delete_app_value("core", "legal.imprint_url") is True
        assert store.delete_app_value("core", "legal.imprint_url") is False
        assert store.get_app_value("core", "legal.imprint_url", "gone") == "gone"

    def test_save(self, tmp_path):
        """Test saving writes a file the store can read again."""
        target = tmp_path / "out" / "app_config.json"
        store = AppConfigStore(values={"core": {"legal.imprint_url": "https://example.com/imprint"}})

        store.save(target)

        reloaded = AppConfigStore(data_path=target)
        assert reloaded.get_app_value("core", "legal.imprint_url") == "https://example.com/imprint"

    def test_save_without_path(self):
        """Test saving needs a target file."""
        with pytest.raises(AppConfigError):
            AppConfigStore(values={}).save()


class TestGlobalAppConfig:
    """Tests for the process-wide store."""

    def test_uses_settings_file(self, monkeypatch, tmp_path):
        """Test the global store is backed by Settings.app_config_file."""
        config_file = tmp_path / "app_config.json"
        config_file.write_text(json.dumps({"core": {"k": "v"}}), encoding="utf-8")
        monkeypatch.setenv("APP_CONFIG_FILE", str(config_file))

        store = get_app_config()

        assert store.data_path == config_file
        assert store.get_app_value("core", "k") == "v"
        assert get_app_config() is store

    def test_reset(self):
        """Test reset creates a new store on next access."""
        first = get_app_config()
        reset_app_config()
        assert get_app_config() is not first
