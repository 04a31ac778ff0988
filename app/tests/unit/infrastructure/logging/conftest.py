"""Fixtures for infrastructure.logging tests."""

import pytest
import structlog

from infrastructure.configuration import I18nSettings, Settings


@pytest.fixture
def make_settings():
    """Build Settings for a deployment prefix without reading the environment."""

    def _make(prefix: str = "", log_level: str = "INFO") -> Settings:
        return Settings(
            PREFIX=prefix,
            LOG_LEVEL=log_level,
            i18n=I18nSettings(_env_file=None),
            _env_file=None,
        )

    return _make


@pytest.fixture(autouse=True)
def restore_structlog_config():
    """Restore the global structlog configuration changed by configure_logging."""
    saved = structlog.get_config()
    yield
    structlog.configure(**saved)
