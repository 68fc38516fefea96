"""Application services for RSVP Event Guard.

Available services:
- MemberStateValidator / EventStateValidator: state validation gate
- AuthorPolicy, OrganizerPolicy, AttendeePolicy, FrozenAttendeePolicy: policy set
- EventAuthorizer: composes the policy set per operation kind
- ValidatingEventRepository / AuthorizingEventRepository: repository decorators
"""

from src.application.services.authorizing_event_repository import (
    AuthorizingEventRepository,
)
from src.application.services.event_authorizer import EventAuthorizer
from src.application.services.event_policies import (
    AttendeePolicy,
    AuthorPolicy,
    FrozenAttendeePolicy,
    OrganizerPolicy,
    default_event_policies,
)
from src.application.services.event_state_validator import EventStateValidator
from src.application.services.member_state_validator import MemberStateValidator
from src.application.services.validating_event_repository import (
    ValidatingEventRepository,
)

__all__: list[str] = [
    "AttendeePolicy",
    "AuthorPolicy",
    "AuthorizingEventRepository",
    "EventAuthorizer",
    "EventStateValidator",
    "FrozenAttendeePolicy",
    "MemberStateValidator",
    "OrganizerPolicy",
    "ValidatingEventRepository",
    "default_event_policies",
]
