"""Domain errors for RSVP Event Guard.

All exceptions inherit from RsvpGuardError.
"""

from src.domain.errors.authorization import NotAuthorizedError
from src.domain.errors.event import EventNotFoundError
from src.domain.errors.validation import EntityValidationError

__all__: list[str] = [
    "EntityValidationError",
    "EventNotFoundError",
    "NotAuthorizedError",
]
