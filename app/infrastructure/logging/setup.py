"""Structlog setup for the translation service.

Rendering follows the deployment: console output while developing, one JSON
object per line in production. Under pytest everything is swallowed so that
lookup warnings do not flood test output.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.warning("translation_key_not_found", key="no.such.key", locale="ja")
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import Settings, settings as default_settings

PACKAGE_ROOT = "infrastructure"


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def build_processors(settings: Settings) -> List[Processor]:
    """Return the processor chain for ``settings``.

    The last processor is the renderer: ``JSONRenderer`` when
    ``settings.is_production``, ``ConsoleRenderer`` otherwise.
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(settings: Optional[Settings] = None) -> BoundLogger:
    """Configure structlog and the stdlib root logger from settings.

    Args:
        settings: Settings to read ``LOG_LEVEL`` and ``is_production`` from.
            Defaults to the module singleton.

    Returns:
        The configured root logger.
    """
    settings = settings or default_settings

    if _is_test_environment():
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
        return structlog.stdlib.get_logger()

    structlog.configure(
        processors=build_processors(settings),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def component_name(module_name: str) -> str:
    """Derive a log ``component`` from a module path.

    "infrastructure.i18n.loader" -> "i18n.loader". Modules outside the
    package keep their full name.
    """
    prefix = f"{PACKAGE_ROOT}."
    if module_name.startswith(prefix):
        return module_name[len(prefix):]
    return module_name


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module's ``component``.

    Example:
        # In infrastructure/i18n/translator.py
        logger = get_module_logger()
        # every event carries component="i18n.translator"
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")
    return logger.bind(component=component_name(module.__name__))
