"""Bootstrap wiring for the guarded event repository.

Builds the decorator chain, outer to inner:

    AuthorizingEventRepository -> ValidatingEventRepository -> base store

Permission is checked first because it denies fastest; validation only runs
once permission is confirmed. The order is fixed here, at the composition
root, not inside either decorator.
"""

from __future__ import annotations

from src.application.ports.email_validator import EmailValidatorProtocol
from src.application.ports.event_repository import EventRepositoryProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.ports.user_accessor import UserAccessorProtocol
from src.application.services.authorizing_event_repository import (
    AuthorizingEventRepository,
)
from src.application.services.event_authorizer import EventAuthorizer
from src.application.services.event_state_validator import EventStateValidator
from src.application.services.member_state_validator import MemberStateValidator
from src.application.services.validating_event_repository import (
    ValidatingEventRepository,
)
from src.config.guard_config import DEFAULT_GUARD_CONFIG, GuardConfig
from src.infrastructure.adapters.email_validator_adapter import EmailValidatorAdapter
from src.infrastructure.adapters.system_time_authority import SystemTimeAuthority


def create_event_state_validator(
    time_authority: TimeAuthorityProtocol | None = None,
    email_validator: EmailValidatorProtocol | None = None,
    config: GuardConfig = DEFAULT_GUARD_CONFIG,
) -> EventStateValidator:
    """Create the event-state validator with its member validator.

    Args:
        time_authority: Clock. Defaults to the system clock.
        email_validator: Email format checker. Defaults to the
            email-validator adapter configured from ``config``.
        config: Guard configuration.
    """
    if email_validator is None:
        email_validator = EmailValidatorAdapter(
            check_deliverability=config.email_check_deliverability,
            allow_smtputf8=config.email_allow_smtputf8,
        )
    return EventStateValidator(
        time_authority=time_authority or SystemTimeAuthority(),
        member_validator=MemberStateValidator(email_validator=email_validator),
    )


def create_guarded_event_repository(
    base: EventRepositoryProtocol,
    user_accessor: UserAccessorProtocol,
    time_authority: TimeAuthorityProtocol | None = None,
    email_validator: EmailValidatorProtocol | None = None,
    config: GuardConfig = DEFAULT_GUARD_CONFIG,
) -> AuthorizingEventRepository:
    """Wrap a base event store in the authorization and validation gates.

    Args:
        base: The storage repository at the inner end of the chain.
        user_accessor: Identity collaborator for the acting user.
        time_authority: Clock. Defaults to the system clock.
        email_validator: Email format checker. Defaults to the adapter.
        config: Guard configuration.

    Returns:
        The outermost link of the chain.
    """
    validating = ValidatingEventRepository(
        inner=base,
        validator=create_event_state_validator(time_authority, email_validator, config),
    )
    return AuthorizingEventRepository(
        inner=validating,
        authorizer=EventAuthorizer(user_accessor=user_accessor),
    )


__all__ = ["create_event_state_validator", "create_guarded_event_repository"]
