"""Locale resolution service for retrieving and interpolating translated strings.

The Translator owns the active locale, the table of registered bundles and
the table of per-locale overrides. Lookups never raise: a missing key or a
non-string value is logged and the key itself is returned, so a missing
translation can never break the scanner UI that asked for it.
"""

import collections.abc
import copy
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from infrastructure.i18n.exceptions import TranslationError
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    LocaleId,
    TranslationBundle,
    TranslationKey,
    TranslationStore,
    normalize_locale,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``.

    Mappings present on both sides are merged recursively; any other
    override value (lists included) replaces the base value outright.
    Nested mappings come back as plain dicts. Neither input is mutated.
    """
    output = {key: _copy_value(value) for key, value in base.items()}
    for key, value in override.items():
        if isinstance(value, collections.abc.Mapping) and isinstance(output.get(key), dict):
            output[key] = deep_merge(output[key], value)
        else:
            output[key] = _copy_value(value)
    return output


def _copy_value(value: Any) -> Any:
    if isinstance(value, collections.abc.Mapping):
        return deep_merge({}, value)
    return copy.deepcopy(value)


def interpolate(message: str, params: Mapping[str, Any]) -> str:
    """Replace ``{name}`` placeholders with ``str(params[name])``.

    Placeholders whose name is not in ``params`` are left verbatim.
    """

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, message)


class Translator:
    """Service for translating dotted keys with parameter substitution.

    Initialization is lazy: the first public call loads the built-in bundles.
    A bundle that fails to load is logged and skipped, and initialization is
    never retried.

    Attributes:
        loader: TranslationLoader used for built-in and caller-supplied bundles.
        store: TranslationStore holding bundles, overrides and the active locale.
        default_locale: Guaranteed-present fallback locale.
        builtin_locales: Locales loaded from ``builtin_dir`` on initialization.
        builtin_dir: Directory holding ``<locale>.json`` built-in bundles.
        extra_dirs: Additional bundle directories loaded on initialization.
        resolver: LocaleResolver used for locale detection.
    """

    def __init__(
        self,
        loader: Optional[TranslationLoader] = None,
        store: Optional[TranslationStore] = None,
        default_locale: LocaleId = "en",
        builtin_locales: Optional[Sequence[LocaleId]] = None,
        builtin_dir: Optional[Union[str, Path]] = None,
        extra_dirs: Optional[Sequence[Union[str, Path]]] = None,
        resolver: Optional[LocaleResolver] = None,
        log=None,
    ):
        """Initialize Translator.

        Args:
            loader: TranslationLoader instance, a fresh one if not provided.
            store: Storage for translator state, a fresh one if not provided.
            default_locale: Locale used when the active one has no bundle.
            builtin_locales: Locales to load from ``builtin_dir``
                (default: just the default locale).
            builtin_dir: Directory of built-in bundles. No built-ins are
                loaded if not provided.
            extra_dirs: Directories whose bundles are loaded after built-ins.
            resolver: LocaleResolver for ``detect_active_locale``.
            log: Optional structlog logger receiving lookup diagnostics.
        """
        self.default_locale = normalize_locale(default_locale)
        self.loader = loader or TranslationLoader()
        self.store = store or TranslationStore()
        if self.store.active_locale is None:
            self.store.active_locale = self.default_locale
        self.builtin_locales = [
            normalize_locale(locale) for locale in (builtin_locales or [self.default_locale])
        ]
        self.builtin_dir = Path(builtin_dir) if builtin_dir else None
        self.extra_dirs = [Path(d) for d in (extra_dirs or [])]
        self.resolver = resolver or LocaleResolver()
        self.log = log if log is not None else logger

    # Lifecycle

    def initialize(self) -> None:
        """Load built-in bundles on first call; later calls are no-ops.

        Bundles already present in the store are left untouched.
        """
        if self.store.initialized:
            return
        self.store.initialized = True

        if self.builtin_dir is not None:
            for locale in self.builtin_locales:
                if locale in self.store.bundles:
                    continue
                path = self.builtin_dir / f"{locale}.json"
                try:
                    self.store.bundles[locale] = self.loader.load_from_file(locale, path)
                except TranslationError as e:
                    self.log.error(
                        "builtin_translation_load_failed",
                        locale=locale,
                        path=str(path),
                        error=str(e),
                    )

        for directory in self.extra_dirs:
            try:
                bundles = self.loader.load_directory(directory)
            except (ValueError, OSError) as e:
                self.log.error(
                    "translation_directory_load_failed",
                    directory=str(directory),
                    error=str(e),
                )
                continue
            for locale, bundle in bundles.items():
                self.store.bundles.setdefault(locale, bundle)

        self.log.info(
            "initialized_translator",
            default_locale=self.default_locale,
            locales=list(self.store.bundles),
        )

    def reset(self) -> None:
        """Discard all bundles, overrides and the active locale.

        The store is cleared in place, so an injected store stays attached.
        The next public call re-runs initialization. The loader's cache is a
        separate store and is left alone.
        """
        self.store.bundles.clear()
        self.store.overrides.clear()
        self.store.active_locale = self.default_locale
        self.store.initialized = False
        self.log.info("reset_translator")

    # Locale state

    def set_active_locale(self, locale: LocaleId) -> None:
        """Switch the active locale.

        An unregistered locale logs an ``unsupported_locale`` warning and
        resets the active locale to the default locale.
        """
        self.initialize()
        locale = normalize_locale(locale)

        if locale not in self.store.bundles:
            self.log.warning(
                "unsupported_locale",
                requested_locale=locale,
                fallback_locale=self.default_locale,
            )
            self.store.active_locale = self.default_locale
            return

        self.store.active_locale = locale
        self.log.info("active_locale_changed", locale=locale)

    def get_active_locale(self) -> str:
        self.initialize()
        return self.store.active_locale

    def available_locales(self) -> List[str]:
        """Get list of locales with a registered bundle."""
        self.initialize()
        return list(self.store.bundles)

    def detect_active_locale(self) -> str:
        """Detect the runtime's language and activate the best registered match.

        Tries an exact case-insensitive match, then a primary-subtag prefix
        match. Without a match the default locale is returned and the active
        locale is left as it was.
        """
        self.initialize()
        matched = self.resolver.resolve(list(self.store.bundles))

        if matched is None:
            self.log.info(
                "locale_detection_fell_back", fallback_locale=self.default_locale
            )
            return self.default_locale

        self.set_active_locale(matched)
        self.log.info("detected_locale", locale=matched)
        return matched

    # Bundle and override registration

    def register_bundle(self, locale: LocaleId, bundle: TranslationBundle) -> None:
        """Insert or replace the full bundle for a locale.

        The bundle is not re-validated.
        """
        self.initialize()
        locale = normalize_locale(locale)
        self.store.bundles[locale] = bundle
        self.log.info("registered_bundle", locale=locale)

    def register_overrides(self, locale: LocaleId, overrides: Mapping[str, Any]) -> None:
        """Layer caller-supplied strings over a locale's bundle.

        Repeated calls accumulate: they are deep-merged in call order, later
        calls winning on conflicting leaves. A base bundle for the locale is
        not required.
        """
        self.initialize()
        locale = normalize_locale(locale)
        existing = self.store.overrides.get(locale, {})
        self.store.overrides[locale] = deep_merge(existing, overrides)
        self.log.info("registered_overrides", locale=locale, sections=list(overrides))

    def get_overrides(self, locale: LocaleId) -> Dict[str, Any]:
        """Return a copy of the accumulated overrides for a locale."""
        self.initialize()
        return copy.deepcopy(self.store.overrides.get(normalize_locale(locale), {}))

    def load_translation_from_object(self, locale: LocaleId, raw: Any) -> TranslationBundle:
        """Validate a decoded object and register it as the locale's bundle."""
        self.initialize()
        bundle = self.loader.load_from_object(locale, raw)
        self.register_bundle(locale, bundle)
        return bundle

    def load_translation_from_string(self, locale: LocaleId, raw_json: str) -> TranslationBundle:
        """Parse and validate JSON text, then register it."""
        self.initialize()
        bundle = self.loader.load_from_string(locale, raw_json)
        self.register_bundle(locale, bundle)
        return bundle

    def load_translation_from_file(
        self, locale: LocaleId, path: Union[str, Path]
    ) -> TranslationBundle:
        """Load a JSON or YAML bundle file, then register it."""
        self.initialize()
        bundle = self.loader.load_from_file(locale, path)
        self.register_bundle(locale, bundle)
        return bundle

    async def load_translation_from_remote(
        self, locale: LocaleId, location: str
    ) -> TranslationBundle:
        """Fetch a bundle over HTTP, then register it.

        Registration happens only after the request completes and the body
        validates; a failure leaves the bundle table untouched.
        """
        self.initialize()
        bundle = await self.loader.load_from_remote(locale, location)
        self.register_bundle(locale, bundle)
        return bundle

    # Lookup

    def get_effective_bundle(self) -> Optional[Dict[str, Any]]:
        """Return a copy of the merged bundle data for the active locale."""
        self.initialize()
        messages = self._effective_messages()
        return copy.deepcopy(messages) if messages is not None else None

    def translate(
        self,
        key: Union[str, TranslationKey],
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve a dotted key for the active locale.

        Args:
            key: Dotted key path, e.g. "html5QrcodeScanner.scanningStatus".
            params: Values for ``{name}`` placeholders.

        Returns:
            The interpolated string, or ``key`` unchanged if it cannot be
            resolved to a string.
        """
        self.initialize()
        key = str(key)

        messages = self._effective_messages()
        if messages is None:
            self.log.error(
                "no_translations_available",
                key=key,
                locale=self.store.active_locale,
            )
            return key

        value: Any = messages
        for segment in key.split("."):
            if isinstance(value, collections.abc.Mapping) and segment in value:
                value = value[segment]
            else:
                self.log.warning(
                    "translation_key_not_found",
                    key=key,
                    locale=self.store.active_locale,
                )
                return key

        if not isinstance(value, str):
            self.log.warning(
                "translation_value_not_string",
                key=key,
                locale=self.store.active_locale,
            )
            return key

        if params:
            return interpolate(value, params)
        return value

    def has_translation(self, key: Union[str, TranslationKey]) -> bool:
        """Check whether a key resolves to a string for the active locale."""
        self.initialize()
        value: Any = self._effective_messages()
        for segment in str(key).split("."):
            if not isinstance(value, collections.abc.Mapping) or segment not in value:
                return False
            value = value[segment]
        return isinstance(value, str)

    def _effective_messages(self) -> Optional[Dict[str, Any]]:
        active = self.store.active_locale
        base = self.store.bundles.get(active) or self.store.bundles.get(self.default_locale)
        if base is None:
            return None

        overrides = self.store.overrides.get(active)
        if not overrides:
            return base.messages
        return deep_merge(base.messages, overrides)
