"""Structured logging for the translation service.

Public API:
    - configure_logging(): Configure structlog from Settings
    - get_module_logger(): Get a logger bound to the calling module's component
"""

from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
