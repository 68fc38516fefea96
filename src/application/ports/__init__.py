"""Application ports - Abstract interfaces for infrastructure adapters.

Available ports:
- EventRepositoryProtocol: load/save contract shared by store and decorators
- TimeAuthorityProtocol: injected clock
- EmailValidatorProtocol: email format checks
- UserAccessorProtocol: current-user lookup
- StateValidatorProtocol: old -> new transition validation
- EventPolicyProtocol / EventAuthorizerProtocol: authorization predicates
"""

from src.application.ports.email_validator import EmailValidatorProtocol
from src.application.ports.event_policy import (
    EventAuthorizerProtocol,
    EventPolicyProtocol,
)
from src.application.ports.event_repository import EventRepositoryProtocol
from src.application.ports.state_validator import StateValidatorProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.ports.user_accessor import UserAccessorProtocol

__all__: list[str] = [
    "EmailValidatorProtocol",
    "EventAuthorizerProtocol",
    "EventPolicyProtocol",
    "EventRepositoryProtocol",
    "StateValidatorProtocol",
    "TimeAuthorityProtocol",
    "UserAccessorProtocol",
]
