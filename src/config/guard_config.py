"""Event guard configuration.

Environment Variables:
- RSVP_GUARD_ENVIRONMENT: "production" (JSON logs) or "development" (console
  logs). Default: production
- RSVP_GUARD_EMAIL_CHECK_DELIVERABILITY: Resolve email domains when validating
  member addresses. Performs DNS I/O. Default: false
- RSVP_GUARD_EMAIL_ALLOW_SMTPUTF8: Accept internationalized email local parts.
  Default: true
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ENVIRONMENTS = frozenset({"production", "development"})

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or unrecognized.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower()


@dataclass(frozen=True)
class GuardConfig:
    """Configuration for the guarded event repository.

    Attributes:
        environment: Selects the log renderer.
        email_check_deliverability: Whether member email validation resolves
            the domain.
        email_allow_smtputf8: Whether internationalized local parts are valid.
    """

    environment: str = "production"
    email_check_deliverability: bool = False
    email_allow_smtputf8: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )

    @classmethod
    def from_environment(cls) -> GuardConfig:
        """Create config from environment variables with defaults."""
        return cls(
            environment=_get_str_env("RSVP_GUARD_ENVIRONMENT", "production"),
            email_check_deliverability=_get_bool_env(
                "RSVP_GUARD_EMAIL_CHECK_DELIVERABILITY", False
            ),
            email_allow_smtputf8=_get_bool_env("RSVP_GUARD_EMAIL_ALLOW_SMTPUTF8", True),
        )


DEFAULT_GUARD_CONFIG = GuardConfig()

DEVELOPMENT_GUARD_CONFIG = GuardConfig(environment="development")
