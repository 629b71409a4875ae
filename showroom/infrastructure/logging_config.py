"""Structured logging setup."""

import logging
import sys

import structlog

from showroom.infrastructure.config import settings


def configure_logging(log_level: str | None = None, debug: bool | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        log_level: Level name; defaults to ``settings.log_level``.
        debug: Render human-readable console output instead of JSON.
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    debug = settings.debug if debug is None else debug

    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
    )
    renderer = (
        structlog.dev.ConsoleRenderer()
        if debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
