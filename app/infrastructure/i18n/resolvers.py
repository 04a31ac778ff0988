"""Locale resolution logic for determining the user's preferred language.

Provides strategies for resolving the appropriate locale from the language
tag reported by the runtime environment.
"""

import os
from typing import Callable, Iterable, Mapping, Optional

from infrastructure.configuration import I18nSettings
from infrastructure.logging import get_module_logger

logger = get_module_logger()

POSIX_LOCALE_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG")
POSIX_NEUTRAL_LOCALES = ("C", "POSIX")


class LanguageNegotiator:
    """Matches a requested language tag against available locale identifiers.

    Matching order:
    1. Exact case-insensitive match (e.g. "ZH-cn" matches "zh-CN")
    2. Primary subtag as a case-insensitive prefix (e.g. "ja-JP" matches "ja")
    """

    @staticmethod
    def primary_subtag(tag: str) -> str:
        return tag.split("-")[0]

    @staticmethod
    def matches_language(requested: str, available: str, strict: bool = False) -> bool:
        """Check if an available identifier matches the requested tag.

        Args:
            requested: Requested language tag (e.g., "ja-JP").
            available: Available locale identifier (e.g., "ja").
            strict: If True, requires an exact case-insensitive match.

        Returns:
            True if the identifiers match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        primary = LanguageNegotiator.primary_subtag(requested).lower()
        return bool(primary) and available.lower().startswith(primary)

    @staticmethod
    def match(requested: Optional[str], available: Iterable[str]) -> Optional[str]:
        """Find the best available locale for a single requested tag.

        Exact matches across every candidate win over prefix matches.
        Candidates are tried in the given order.

        Returns:
            The matching identifier from ``available``, or None.
        """
        if not requested:
            return None

        candidates = list(available)
        for avail in candidates:
            if LanguageNegotiator.matches_language(requested, avail, strict=True):
                return avail

        for avail in candidates:
            if LanguageNegotiator.matches_language(requested, avail, strict=False):
                return avail

        return None


def normalize_language_tag(raw: Optional[str]) -> Optional[str]:
    """Turn a POSIX locale string into a BCP 47 style tag.

    "ja_JP.UTF-8" -> "ja-JP", "de_DE@euro" -> "de-DE". Neutral locales
    ("C", "POSIX") and empty values yield None.
    """
    if not raw:
        return None
    tag = raw.split(".")[0].split("@")[0].strip()
    if not tag or tag in POSIX_NEUTRAL_LOCALES:
        return None
    return tag.replace("_", "-")


class LocaleResolver:
    """Resolves the preferred language tag from context sources.

    Fallback chain for the reported language:
    1. Injected language provider
    2. I18N_LANGUAGE setting
    3. POSIX locale environment variables (LC_ALL, LC_MESSAGES, LANG)

    The reported tag is then matched against registered locales by
    LanguageNegotiator.
    """

    def __init__(
        self,
        language_provider: Optional[Callable[[], Optional[str]]] = None,
        settings: Optional[I18nSettings] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize locale resolver.

        Args:
            language_provider: Callable returning the runtime's language tag.
            settings: I18n settings; only ``language`` is consulted.
            environ: Environment mapping, defaults to ``os.environ``.
        """
        self.language_provider = language_provider
        self.settings = settings
        self.environ = environ if environ is not None else os.environ
        self.log = logger

    def reported_language(self) -> Optional[str]:
        """Read the language tag reported by the runtime environment.

        Returns:
            Language tag such as "ja-JP", or None if nothing is reported.
        """
        if self.language_provider is not None:
            return normalize_language_tag(self.language_provider())

        if self.settings is not None and self.settings.language:
            return normalize_language_tag(self.settings.language)

        for variable in POSIX_LOCALE_VARIABLES:
            tag = normalize_language_tag(self.environ.get(variable))
            if tag:
                return tag
        return None

    def resolve(self, available: Iterable[str]) -> Optional[str]:
        """Match the reported language against available locales.

        Returns:
            The matching identifier from ``available``, or None when nothing
            is reported or nothing matches.
        """
        reported = self.reported_language()
        matched = LanguageNegotiator.match(reported, available)
        self.log.info("resolved_reported_language", reported=reported, locale=matched)
        return matched

