"""Custom exceptions for the i18n system.

Load-time failures (malformed JSON, schema violations, failed remote fetches)
raise one of these. Lookup-time failures never raise; they are logged and the
translator returns a safe default instead.
"""

from typing import List, Optional, Sequence


class TranslationError(Exception):
    """Base exception for all translation loading errors.

    Example:
        try:
            loader.load_from_string("fr", payload)
        except TranslationError as e:
            logger.error("translation_load_failed", locale=e.locale, error=str(e))
    """

    def __init__(self, message: str, locale: Optional[str] = None):
        super().__init__(message)
        self.locale = locale


class ValidationError(TranslationError):
    """Raised when a bundle does not satisfy the translation schema.

    Attributes:
        section: Section of the first offense, None when the bundle itself is
            not an object.
        key: Leaf key of the first offense, None for section-level problems.
        problems: Every problem found, in schema order.

    Example:
        >>> loader.load_from_object("fr", {"html5Qrcode": {}})
        Traceback (most recent call last):
        ...
        ValidationError: Invalid translation bundle for locale 'fr': ...
    """

    def __init__(
        self,
        message: str,
        locale: Optional[str] = None,
        section: Optional[str] = None,
        key: Optional[str] = None,
        problems: Optional[Sequence] = None,
    ):
        super().__init__(message, locale)
        self.section = section
        self.key = key
        self.problems: List = list(problems or [])


class ParseError(TranslationError):
    """Raised when bundle text cannot be parsed.

    Attributes:
        diagnostic: The parser's own error message.
    """

    def __init__(self, message: str, locale: Optional[str] = None, diagnostic: str = ""):
        super().__init__(message, locale)
        self.diagnostic = diagnostic


class TransportError(TranslationError):
    """Raised when a remote bundle cannot be fetched.

    Attributes:
        location: URL that was requested.
        status_code: HTTP status of a non-success response, None when the
            request never produced a response.
    """

    def __init__(
        self,
        message: str,
        locale: Optional[str] = None,
        location: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, locale)
        self.location = location
        self.status_code = status_code
