"""Translation models for i18n system.

Defines core data structures for managing translation bundles and locales.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


class SupportedLocale(str, Enum):
    """Built-in locale identifiers.

    Provided for convenience; the locale namespace is open and callers may
    register bundles under any other identifier.
    """

    EN = "en"
    JA = "ja"
    ES = "es"
    FR = "fr"
    DE = "de"
    ZH_CN = "zh-CN"
    ZH_TW = "zh-TW"
    KO = "ko"
    IT = "it"
    PT = "pt"
    RU = "ru"
    AR = "ar"
    HI = "hi"


LocaleId = Union[str, SupportedLocale]


def normalize_locale(locale: LocaleId) -> str:
    """Return the plain string identifier for a locale.

    Enum members are unwrapped to their value so that table keys and log
    fields are always plain strings.
    """
    if isinstance(locale, SupportedLocale):
        return locale.value
    return str(locale)


@dataclass(frozen=True)
class TranslationKey:
    """Represents a dotted translation key.

    Attributes:
        namespace: Bundle section (e.g., "html5QrcodeScanner").
        message_key: Leaf key within the section (e.g., "scanningStatus").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"


@dataclass(frozen=True)
class TranslationBundle:
    """A complete, schema-valid set of translations for one locale.

    Immutable by convention: the translator never edits ``messages`` in place,
    overrides are layered on a merged copy at lookup time.

    Attributes:
        locale: Locale identifier this bundle was loaded for.
        messages: Nested dict structure {section: {key: message_string}}.
        source: Where the bundle came from (file path, URL or "object").
        loaded_at: Timestamp (ISO 8601) when the bundle was loaded.
    """

    locale: str
    messages: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    source: Optional[str] = None
    loaded_at: Optional[str] = None


@dataclass
class TranslationStore:
    """Process-wide state owned by a Translator.

    Held separately from the Translator so that tests and embedders can inject
    isolated storage.

    Attributes:
        bundles: Locale -> full TranslationBundle.
        overrides: Locale -> sparse nested dict layered over the bundle.
        active_locale: Locale used for lookups.
        initialized: Whether built-in bundles have been loaded.
    """

    bundles: Dict[str, TranslationBundle] = field(default_factory=dict)
    overrides: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    active_locale: Optional[str] = None
    initialized: bool = False
