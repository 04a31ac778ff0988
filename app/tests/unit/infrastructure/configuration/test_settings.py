"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- I18nSettings validation and defaults
- Settings class initialization
- Integration with Pydantic BaseSettings
"""

import pydantic
import pytest

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.services.providers import get_settings


class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_i18n_settings_defaults(self, monkeypatch):
        """Test I18nSettings uses correct default values."""
        for name in (
            "I18N_DEFAULT_LOCALE",
            "I18N_BUILTIN_LOCALES",
            "I18N_LOCALES_DIR",
            "I18N_REMOTE_TIMEOUT_SECONDS",
            "I18N_LANGUAGE",
        ):
            monkeypatch.delenv(name, raising=False)

        i18n = I18nSettings()

        assert i18n.default_locale == "en"
        assert i18n.builtin_locales == ["en", "ja"]
        assert i18n.locales_dir is None
        assert i18n.remote_timeout_seconds is None
        assert i18n.language is None

    def test_i18n_settings_custom_values(self, monkeypatch):
        """Test I18nSettings accepts custom configuration."""
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "ja")
        monkeypatch.setenv("I18N_BUILTIN_LOCALES", '["ja", "en"]')
        monkeypatch.setenv("I18N_LOCALES_DIR", "/srv/locales")
        monkeypatch.setenv("I18N_REMOTE_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("I18N_LANGUAGE", "ja-JP")

        i18n = I18nSettings()

        assert i18n.default_locale == "ja"
        assert i18n.builtin_locales == ["ja", "en"]
        assert i18n.locales_dir == "/srv/locales"
        assert i18n.remote_timeout_seconds == 2.5
        assert i18n.language == "ja-JP"

    def test_i18n_settings_rejects_blank_default_locale(self, monkeypatch):
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "   ")

        with pytest.raises(pydantic.ValidationError):
            I18nSettings()

    def test_i18n_settings_rejects_non_positive_timeout(self, monkeypatch):
        monkeypatch.setenv("I18N_REMOTE_TIMEOUT_SECONDS", "0")

        with pytest.raises(pydantic.ValidationError):
            I18nSettings()


class TestSettings:
    """Test suite for the aggregate Settings class."""

    def test_settings_builds_i18n_section(self):
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)

    def test_settings_accepts_section_override(self, monkeypatch):
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "ja")
        custom = I18nSettings()
        monkeypatch.delenv("I18N_DEFAULT_LOCALE")

        settings = Settings(i18n=custom)

        assert settings.i18n.default_locale == "ja"

    def test_is_production_without_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "")

        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")

        assert Settings().is_production is False

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
