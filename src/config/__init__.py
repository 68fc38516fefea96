"""Configuration module for RSVP Event Guard.

Available Configurations:
- GuardConfig: logging environment and email validation options
"""

from src.config.guard_config import (
    DEFAULT_GUARD_CONFIG,
    DEVELOPMENT_GUARD_CONFIG,
    GuardConfig,
)

__all__ = [
    "DEFAULT_GUARD_CONFIG",
    "DEVELOPMENT_GUARD_CONFIG",
    "GuardConfig",
]
