"""Structured logging configuration (structlog)."""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "measurereport"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_structlog(level: int = logging.INFO) -> None:
    """Configure structlog for human-readable console output.

    Call once at process startup. Package events are routed through the
    ``measurereport`` stdlib logger, which is given a stdout handler and
    *level* here; report builders log at ``debug``.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(level)
    if not any(
        isinstance(h, logging.StreamHandler) and h.stream is sys.stdout
        for h in pkg_logger.handlers
    ):
        pkg_logger.addHandler(logging.StreamHandler(sys.stdout))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by ``measurereport.<name>``.

    Independent of the global structlog configuration: nothing is rendered
    or emitted until the stdlib logger is enabled for the event's level.
    """
    return structlog.wrap_logger(
        logging.getLogger(f"{PACKAGE_LOGGER}.{name}"),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
