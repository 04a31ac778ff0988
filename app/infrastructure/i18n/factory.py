"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with default
configurations suitable for the application.
"""

from pathlib import Path
from typing import Callable, Optional

import httpx

from infrastructure.configuration import I18nSettings
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()

BUILTIN_LOCALES_DIR = Path(__file__).resolve().parent / "locales"


def create_translator(
    settings: Optional[I18nSettings] = None,
    builtin_dir: Optional[Path] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    language_provider: Optional[Callable[[], Optional[str]]] = None,
    preload: bool = False,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        settings: I18n settings (default: read from the environment)
        builtin_dir: Directory of built-in bundles (default: the packaged locales)
        transport: Optional httpx transport for remote bundle loads
        language_provider: Callable reporting the runtime language tag
        preload: Whether to run lazy initialization immediately (default: False)

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use defaults (packaged en/ja bundles, lazy initialization)
        translator = create_translator()

        # Eager loading
        translator = create_translator(preload=True)
    """
    settings = settings or I18nSettings()

    loader = TranslationLoader(
        remote_timeout=settings.remote_timeout_seconds,
        transport=transport,
    )
    resolver = LocaleResolver(
        language_provider=language_provider,
        settings=settings,
    )
    extra_dirs = [Path(settings.locales_dir)] if settings.locales_dir else []

    translator = Translator(
        loader=loader,
        default_locale=settings.default_locale,
        builtin_locales=settings.builtin_locales,
        builtin_dir=builtin_dir or BUILTIN_LOCALES_DIR,
        extra_dirs=extra_dirs,
        resolver=resolver,
    )

    if preload:
        translator.initialize()
        logger.info(
            "translator_created_with_preload",
            locale_count=len(translator.available_locales()),
        )
    else:
        logger.info("translator_created_lazy", default_locale=settings.default_locale)

    return translator
