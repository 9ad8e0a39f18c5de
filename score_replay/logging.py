"""
structlog setup for score_replay.

Every record is a JSON line carrying the service, the environment and the
dotted name of the module that logged it. Callers embedding the generator can
add their own request context with ``structlog.contextvars.bind_contextvars``;
it is merged into every record.
"""

from __future__ import annotations

import logging

import structlog
from structlog.typing import FilteringBoundLogger

from .config import settings

SERVICE_NAME = "score-replay"


def _normalize_log_level(level: str | None, environment: str) -> int:
    if level:
        normalized = level.strip().upper()
    else:
        normalized = "INFO" if environment.lower() == "production" else "DEBUG"
    return logging._nameToLevel.get(normalized, logging.INFO)


def configure_logging() -> None:
    """Configure structlog to print JSON lines at the level settings ask for."""
    resolved_level = _normalize_log_level(settings.log_level, settings.environment)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.EventRenamer("message"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Package logger tagged with the module ``name`` (pass ``__name__``)."""
    return logger.bind(logger=name)


configure_logging()

logger = structlog.get_logger(SERVICE_NAME).bind(
    service=SERVICE_NAME,
    environment=settings.environment,
)
