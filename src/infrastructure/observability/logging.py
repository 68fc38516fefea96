"""Structured logging configuration with structlog.

Production renders one JSON object per line for log aggregation; development
renders colored console output. The level comes from the LOG_LEVEL
environment variable.

Log Entry Format (production):
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "event_saved",
        "correlation_id": "uuid",
        ...additional context
    }

Usage:
    from src.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output

    from structlog import get_logger
    logger = get_logger(__name__)
    logger.info("event_saved", event_id=str(event.id))
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from src.infrastructure.observability.correlation import correlation_id_processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

PRODUCTION = "production"


def get_log_level() -> int:
    """Get the configured log level from environment.

    Unknown level names fall back to INFO.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def build_processors(environment: str = PRODUCTION) -> list[Processor]:
    """Build the processor chain for an environment.

    Args:
        environment: 'production' for JSON output, anything else for console.

    Returns:
        Shared processors followed by the environment's renderer.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == PRODUCTION:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    return processors


def configure_structlog(environment: str = PRODUCTION) -> None:
    """Configure structlog for the application.

    Should be called once at startup, from the composition root.

    Args:
        environment: 'production' for JSON output, 'development' for console.
    """
    structlog.configure(
        processors=build_processors(environment),
        wrapper_class=structlog.make_filtering_bound_logger(get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
