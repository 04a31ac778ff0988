"""Translation and locale resolution infrastructure settings."""

from typing import List, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Locale resolution and translation bundle configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Guaranteed-present fallback locale (default: en)
        I18N_BUILTIN_LOCALES: JSON list of bundled locales loaded on first use
            (default: ["en", "ja"])
        I18N_LOCALES_DIR: Optional directory of extra <locale>.json/.yml bundles
            loaded alongside the built-in ones
        I18N_REMOTE_TIMEOUT_SECONDS: Timeout for remote bundle fetches
            (default: unset, waits indefinitely)
        I18N_LANGUAGE: Overrides the language tag reported by the runtime
            environment during locale detection

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        default_locale = settings.i18n.default_locale
        timeout = settings.i18n.remote_timeout_seconds
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Fallback locale used when the requested one is not registered",
    )
    builtin_locales: List[str] = Field(
        default_factory=lambda: ["en", "ja"],
        alias="I18N_BUILTIN_LOCALES",
        description="Bundled locales loaded during lazy initialization",
    )
    locales_dir: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALES_DIR",
        description="Extra directory of translation bundles loaded at initialization",
    )
    remote_timeout_seconds: Optional[float] = Field(
        default=None,
        alias="I18N_REMOTE_TIMEOUT_SECONDS",
        description="Timeout for remote bundle requests, None waits indefinitely",
    )
    language: Optional[str] = Field(
        default=None,
        alias="I18N_LANGUAGE",
        description="Language tag reported to locale detection",
    )

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Reject an empty default locale."""
        if not v or not v.strip():
            raise ValueError("default_locale must be a non-empty locale identifier")
        return v.strip()

    @field_validator("remote_timeout_seconds")
    @classmethod
    def validate_remote_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Ensure a configured timeout is positive."""
        if v is not None and v <= 0:
            raise ValueError("remote_timeout_seconds must be positive")
        return v
