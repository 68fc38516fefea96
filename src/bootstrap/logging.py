"""Bootstrap wiring for logging configuration.

The renderer follows ``GuardConfig.environment``: JSON lines in production,
colored console output in development.
"""

from __future__ import annotations

from src.config.guard_config import DEFAULT_GUARD_CONFIG, GuardConfig
from src.infrastructure.observability import configure_structlog


def configure_logging(config: GuardConfig = DEFAULT_GUARD_CONFIG) -> None:
    """Configure structlog once at startup from the loaded guard config.

    Example:
        >>> configure_logging(load_guard_config())
    """
    configure_structlog(environment=config.environment)


__all__ = ["configure_logging"]
