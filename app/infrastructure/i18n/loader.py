"""Translation bundle loading and validation.

Turns untrusted input (a decoded object, JSON/YAML text, a file or a remote
URL) into a TranslationBundle that satisfies the schema, or fails with a
TranslationError. The loader keeps its own locale-keyed cache which is
independent of any Translator's bundle table.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

import httpx
import yaml

from infrastructure.i18n import schema
from infrastructure.i18n.exceptions import (
    ParseError,
    TranslationError,
    TransportError,
    ValidationError,
)
from infrastructure.i18n.models import LocaleId, TranslationBundle, normalize_locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yml", ".yaml")


class TranslationLoader:
    """Loader for JSON (and YAML) translation bundles.

    Attributes:
        remote_timeout: Timeout in seconds for remote fetches, None to wait
            indefinitely.
        cache: Bundles loaded so far, keyed by locale.
    """

    def __init__(
        self,
        remote_timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        log=None,
    ):
        """Initialize translation loader.

        Args:
            remote_timeout: Timeout for remote bundle requests.
            transport: Optional httpx transport, used to stub the network.
            log: Optional structlog logger; defaults to the module logger.
        """
        self.remote_timeout = remote_timeout
        self.transport = transport
        self.log = log if log is not None else logger
        self.cache: Dict[str, TranslationBundle] = {}

    def load_from_object(
        self, locale: LocaleId, raw: Any, source: str = "object"
    ) -> TranslationBundle:
        """Validate a decoded JSON object and cache it as a bundle.

        Args:
            locale: Locale the bundle is for.
            raw: Decoded JSON value.
            source: Description of where the data came from, for logging.

        Returns:
            The validated TranslationBundle.

        Raises:
            ValidationError: If ``raw`` does not satisfy the schema.
        """
        locale = normalize_locale(locale)
        try:
            schema.validate_bundle_data(locale, raw)
        except ValidationError as e:
            self.log.error(
                "translation_validation_failed",
                locale=locale,
                source=source,
                problems=[problem.reason for problem in e.problems],
            )
            raise

        bundle = TranslationBundle(
            locale=locale,
            messages=schema.copy_bundle_data(raw),
            source=source,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        self.cache[locale] = bundle
        self.log.info("loaded_translations", locale=locale, source=source)
        return bundle

    def load_from_string(
        self, locale: LocaleId, raw_json: str, source: str = "string"
    ) -> TranslationBundle:
        """Parse JSON text and load it as a bundle.

        Raises:
            ParseError: If ``raw_json`` is not valid JSON.
            ValidationError: If the parsed value does not satisfy the schema.
        """
        locale = normalize_locale(locale)
        try:
            data = json.loads(raw_json)
        except json.JSONDecodeError as e:
            self.log.error("json_parse_error", locale=locale, source=source, error=str(e))
            raise ParseError(
                f"Failed to parse JSON for locale {locale}: {e}",
                locale=locale,
                diagnostic=str(e),
            ) from e
        return self.load_from_object(locale, data, source=source)

    def load_from_file(self, locale: LocaleId, path: Union[str, Path]) -> TranslationBundle:
        """Load a bundle from a ``.json``, ``.yml`` or ``.yaml`` file.

        Raises:
            ParseError: If the file type is unsupported, the file cannot be
                read or decoded as UTF-8, or the content fails to parse.
            ValidationError: If the content does not satisfy the schema.
        """
        locale = normalize_locale(locale)
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
            raise ParseError(
                f"Unsupported translation file type for locale {locale}: {path.name}",
                locale=locale,
                diagnostic=f"unsupported suffix {suffix or '(none)'}",
            )

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.log.error("translation_file_read_failed", file=str(path), error=str(e))
            raise ParseError(
                f"Failed to read {path}: {e}", locale=locale, diagnostic=str(e)
            ) from e

        if suffix in JSON_SUFFIXES:
            return self.load_from_string(locale, text, source=str(path))

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            self.log.error("yaml_parse_error", file=str(path), error=str(e))
            raise ParseError(
                f"Failed to parse {path}: {e}", locale=locale, diagnostic=str(e)
            ) from e
        return self.load_from_object(locale, data, source=str(path))

    def load_directory(self, directory: Union[str, Path]) -> Dict[str, TranslationBundle]:
        """Load every ``<locale>.json|yml|yaml`` bundle in a directory.

        Files that cannot be read, parsed or validated are logged and skipped,
        so one bad file never hides the valid bundles beside it.

        Returns:
            Dict mapping locale to its TranslationBundle.

        Raises:
            ValueError: If the directory does not exist.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise ValueError(f"Translations directory not found: {directory}")

        result = {}
        for path in sorted(directory.iterdir()):
            if path.suffix.lower() not in JSON_SUFFIXES + YAML_SUFFIXES:
                continue
            try:
                result[path.stem] = self.load_from_file(path.stem, path)
            except TranslationError as e:
                self.log.warning(
                    "skipped_invalid_bundle_file", file=str(path), error=str(e)
                )

        self.log.info(
            "loaded_translation_directory",
            directory=str(directory),
            locale_count=len(result),
        )
        return result

    async def load_from_remote(self, locale: LocaleId, location: str) -> TranslationBundle:
        """Fetch a bundle over HTTP and load it.

        Issues a single GET request. The caller is suspended until the response
        arrives; nothing is cached unless the body validates.

        Raises:
            TransportError: If the location is malformed, the request fails
                or the status is not 2xx.
            ParseError: If the body is not valid JSON.
            ValidationError: If the body does not satisfy the schema.
        """
        locale = normalize_locale(locale)
        log = self.log.bind(locale=locale, location=location)

        try:
            async with httpx.AsyncClient(
                timeout=self.remote_timeout,
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(location)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.error("remote_translation_request_failed", error=str(e))
            raise TransportError(
                f"Failed to load translation from {location}: {e}",
                locale=locale,
                location=location,
            ) from e

        if not response.is_success:
            log.error("remote_translation_http_error", status_code=response.status_code)
            raise TransportError(
                f"Failed to load translation from {location}: "
                f"HTTP error status {response.status_code}",
                locale=locale,
                location=location,
                status_code=response.status_code,
            )

        return self.load_from_string(locale, response.text, source=location)

    def get_cached(self, locale: LocaleId) -> Optional[TranslationBundle]:
        """Return the cached bundle for a locale, or None."""
        return self.cache.get(normalize_locale(locale))

    def is_cached(self, locale: LocaleId) -> bool:
        return normalize_locale(locale) in self.cache

    def clear_cache(self) -> None:
        """Clear all cached bundles.

        Only the loader's own store is affected; bundles already registered
        with a Translator stay registered.
        """
        self.cache.clear()
        self.log.info("cleared_translation_cache")

    @staticmethod
    def build_template() -> Dict[str, Dict[str, str]]:
        """Return bundle data with every required key set to a placeholder."""
        return schema.build_template()
