"""Feature-level fixtures for i18n system tests.

Provides loaders, translators and bundle files for locale resolution and
translation scenarios.
"""

import json
from unittest.mock import MagicMock

import httpx
import pytest
import yaml

from infrastructure.i18n import LocaleResolver, TranslationLoader, Translator
from infrastructure.i18n.factory import BUILTIN_LOCALES_DIR
from tests.factories.i18n import load_builtin_data, make_spanish_bundle_data


@pytest.fixture
def mock_logger():
    """Logger double; MagicMock so that .bind() chains keep working."""
    return MagicMock()


@pytest.fixture
def english_data():
    return load_builtin_data("en")


@pytest.fixture
def japanese_data():
    return load_builtin_data("ja")


@pytest.fixture
def loader(mock_logger):
    """TranslationLoader with a mock logger and no network."""
    return TranslationLoader(log=mock_logger)


@pytest.fixture
def reported_language():
    """Mutable holder for the language tag seen by locale detection."""
    return {"tag": None}


@pytest.fixture
def translator(loader, mock_logger, reported_language):
    """Isolated Translator loading the packaged en/ja bundles."""
    resolver = LocaleResolver(language_provider=lambda: reported_language["tag"])
    return Translator(
        loader=loader,
        default_locale="en",
        builtin_locales=["en", "ja"],
        builtin_dir=BUILTIN_LOCALES_DIR,
        resolver=resolver,
        log=mock_logger,
    )


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample bundle files.

    Returns a directory structure like:
    - es.json   (valid)
    - fr.yml    (valid)
    - broken.json (invalid JSON)
    - de.json   (missing a required key)
    - notes.txt (ignored)
    """
    with open(tmp_path / "es.json", "w", encoding="utf-8") as f:
        json.dump(make_spanish_bundle_data(), f, ensure_ascii=False)

    french = load_builtin_data("en")
    french["html5QrcodeScanner"]["scanningStatus"] = "Analyse en cours"
    with open(tmp_path / "fr.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(french, f, allow_unicode=True)

    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")

    german = load_builtin_data("en")
    del german["libraryInfo"]["poweredBy"]
    with open(tmp_path / "de.json", "w", encoding="utf-8") as f:
        json.dump(german, f)

    (tmp_path / "notes.txt").write_text("not a bundle", encoding="utf-8")

    return tmp_path


def make_transport(status_code=200, json_body=None, text=None, exc=None, calls=None):
    """Build an httpx.MockTransport answering every request the same way."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if exc is not None:
            raise exc(f"simulated failure for {request.url}", request=request)
        if json_body is not None:
            return httpx.Response(status_code, json=json_body)
        return httpx.Response(status_code, text=text or "")

    return httpx.MockTransport(handler)


@pytest.fixture
def transport_factory():
    return make_transport
