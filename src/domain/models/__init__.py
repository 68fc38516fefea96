"""Domain models for RSVP Event Guard.

Immutable value objects and entities with no infrastructure dependencies.
"""

from src.domain.models.event import Event, Form, FormPrompt
from src.domain.models.member import Member, normalize_email
from src.domain.models.operation import OperationKind
from src.domain.models.user import User

__all__: list[str] = [
    "Event",
    "Form",
    "FormPrompt",
    "Member",
    "OperationKind",
    "User",
    "normalize_email",
]
