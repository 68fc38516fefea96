"""Event lookup errors."""

from __future__ import annotations

from uuid import UUID

from src.domain.exceptions import RsvpGuardError


class EventNotFoundError(RsvpGuardError):
    """Raised when an operation targets an event id that does not exist."""

    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found")
