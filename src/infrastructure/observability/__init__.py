"""Observability infrastructure: structured logging and correlation ids.

Usage:
    from src.infrastructure.observability import (
        configure_structlog,
        set_correlation_id,
    )

    configure_structlog(environment="production")
    set_correlation_id(request_correlation_id)
"""

from src.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from src.infrastructure.observability.logging import (
    build_processors,
    configure_structlog,
    get_log_level,
)

__all__: list[str] = [
    "build_processors",
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_log_level",
    "set_correlation_id",
]
