import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection
# regardless of how pytest was invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.services.providers import get_settings, get_translator  # noqa: E402


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop process-wide settings and translator between tests."""
    get_settings.cache_clear()
    get_translator.cache_clear()
    yield
    get_settings.cache_clear()
    get_translator.cache_clear()
