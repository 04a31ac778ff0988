"""i18n system - locale resolution and string interpolation.

Serves localized, parameter-substituted display strings for the scanner UI,
with deterministic fallback when a locale, key or value is missing.

Main components:
- schema: required sections/keys, validation and template generation
- models: SupportedLocale, TranslationKey, TranslationBundle, TranslationStore
- loader: TranslationLoader for object, string, file and remote bundles
- translator: Translator service with overrides and interpolation
- resolvers: LocaleResolver and LanguageNegotiator for locale detection
- factory: create_translator() wired from settings
"""

from infrastructure.i18n.exceptions import (
    ParseError,
    TranslationError,
    TransportError,
    ValidationError,
)
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    SupportedLocale,
    TranslationBundle,
    TranslationKey,
    TranslationStore,
)
from infrastructure.i18n.resolvers import LanguageNegotiator, LocaleResolver
from infrastructure.i18n.translator import Translator, deep_merge, interpolate

__all__ = [
    "SupportedLocale",
    "TranslationKey",
    "TranslationBundle",
    "TranslationStore",
    "TranslationLoader",
    "Translator",
    "LocaleResolver",
    "LanguageNegotiator",
    "create_translator",
    "deep_merge",
    "interpolate",
    "TranslationError",
    "ValidationError",
    "ParseError",
    "TransportError",
]
