"""Tests for infrastructure.i18n.strings accessors."""

import pytest

from infrastructure.i18n.strings import (
    Html5QrcodeScannerStrings,
    Html5QrcodeStrings,
    LibraryInfoStrings,
)
from infrastructure.services.providers import get_translator


@pytest.fixture(autouse=True)
def english_environment(monkeypatch):
    """Pin the process-wide translator to the packaged defaults."""
    for name in ("I18N_DEFAULT_LOCALE", "I18N_BUILTIN_LOCALES", "I18N_LOCALES_DIR"):
        monkeypatch.delenv(name, raising=False)


class TestHtml5QrcodeStrings:
    def test_code_parse_error(self):
        assert Html5QrcodeStrings.code_parse_error("bad") == "QR code parse error, error = bad"

    def test_error_getting_user_media(self):
        assert (
            Html5QrcodeStrings.error_getting_user_media("NotAllowedError")
            == "Error getting userMedia, error = NotAllowedError"
        )

    def test_scanner_paused(self):
        assert Html5QrcodeStrings.scanner_paused() == "Scanner paused"


class TestHtml5QrcodeScannerStrings:
    def test_plain_strings(self):
        assert Html5QrcodeScannerStrings.scanning_status() == "Scanning"
        assert Html5QrcodeScannerStrings.idle_status() == "Idle"
        assert Html5QrcodeScannerStrings.zoom() == "zoom"
        assert Html5QrcodeScannerStrings.scan_button_start_scanning_text() == "Start Scanning"

    def test_last_match(self):
        assert Html5QrcodeScannerStrings.last_match("https://example.com") == (
            "Last Match: https://example.com"
        )

    def test_follows_active_locale(self):
        get_translator().set_active_locale("ja")

        assert Html5QrcodeScannerStrings.scanning_status() == "スキャン中"
        assert LibraryInfoStrings.report_issues() == "問題を報告"

    def test_follows_overrides(self):
        get_translator().register_overrides(
            "en", {"html5QrcodeScanner": {"codeScannerTitle": "My Custom Scanner"}}
        )

        assert Html5QrcodeScannerStrings.code_scanner_title() == "My Custom Scanner"


class TestLibraryInfoStrings:
    def test_powered_by_keeps_trailing_space(self):
        assert LibraryInfoStrings.powered_by() == "Powered by "
