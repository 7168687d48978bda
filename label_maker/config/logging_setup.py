"""Structured logging setup."""

import logging
from typing import Optional

import structlog

from .settings import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structlog on top of the standard library logging module.

    Args:
        settings: Settings to read the level and format from (cached settings if None)
    """
    settings = settings or get_settings()

    logging.basicConfig(format="%(message)s", level=settings.log_level)
    logging.getLogger("label_maker").setLevel(settings.log_level)

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger backed by a standard library logger.

    Events go through ``logging.getLogger(name)``, so nothing is emitted
    below that logger's level until the application configures logging.

    Args:
        name: Logger name, usually the module's ``__name__``
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
