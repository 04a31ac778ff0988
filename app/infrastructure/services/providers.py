"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.translator import Translator


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """
    Get the process-wide translator singleton.

    The translator initializes itself lazily on first use. Tests that need an
    isolated instance should construct a Translator directly, or call
    ``get_translator.cache_clear()`` to drop the shared one.

    Returns:
        Translator: Cached translator configured from application settings.

    Usage:
        translator = get_translator()
        translator.set_active_locale("ja")
        text = translator.translate("html5QrcodeScanner.scanningStatus")
    """
    settings = get_settings()
    return create_translator(settings=settings.i18n)
