"""
Unit tests for application-scoped providers.

Tests cover:
- get_settings() caching behavior
- get_translator() caching behavior and settings wiring
- Cache clearing for test isolation
"""

from infrastructure.configuration import Settings
from infrastructure.i18n import Translator
from infrastructure.services.providers import get_settings, get_translator


class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_settings_instance(self):
        """get_settings() returns a Settings instance."""
        result = get_settings()
        assert isinstance(result, Settings)

    def test_get_settings_returns_cached_instance(self):
        """get_settings() returns the same instance (caching)."""
        assert get_settings() is get_settings()

    def test_get_settings_cache_can_be_cleared(self):
        """get_settings() cache can be cleared for testing."""
        instance1 = get_settings()
        get_settings.cache_clear()
        instance2 = get_settings()
        assert instance1 is not instance2


class TestGetTranslator:
    """Tests for get_translator() provider function."""

    def test_returns_translator_instance(self):
        assert isinstance(get_translator(), Translator)

    def test_returns_cached_instance(self):
        """Locale changes made through one caller are seen by every caller."""
        get_translator().set_active_locale("ja")

        assert get_translator().get_active_locale() == "ja"

    def test_cache_clear_drops_state(self):
        get_translator().set_active_locale("ja")
        get_translator.cache_clear()

        assert get_translator().get_active_locale() == "en"

    def test_uses_i18n_settings(self, monkeypatch):
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "ja")

        translator = get_translator()

        assert translator.default_locale == "ja"
        assert translator.translate("html5QrcodeScanner.scanningStatus") == "スキャン中"
