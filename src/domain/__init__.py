"""
Domain layer - Pure business logic for RSVP Event Guard.

This layer contains:
- Domain models (Event, Member, User, OperationKind)
- Domain services (assertion collector, roster reconciliation)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or bootstrap.
Only stdlib and typing imports are allowed.
"""

from src.domain.errors import (
    EntityValidationError,
    EventNotFoundError,
    NotAuthorizedError,
)
from src.domain.exceptions import RsvpGuardError

__all__: list[str] = [
    "EntityValidationError",
    "EventNotFoundError",
    "NotAuthorizedError",
    "RsvpGuardError",
]
