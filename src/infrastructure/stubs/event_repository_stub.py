"""Event Repository Stub.

In-memory implementation of EventRepositoryProtocol. It is the base store at
the inner end of the guarded repository chain in development and tests; it
enforces nothing beyond id lookup.

WARNING: This stub is for development/testing only. Production storage is a
document-store adapter outside this package.
"""

from __future__ import annotations

from uuid import UUID

from structlog import get_logger

from src.application.ports.event_repository import EventRepositoryProtocol
from src.domain.errors.event import EventNotFoundError
from src.domain.models.event import Event

logger = get_logger(__name__)


class EventRepositoryStub(EventRepositoryProtocol):
    """In-memory event storage keyed by event id.

    Attributes:
        save_count: Number of successful save() calls, for test assertions.
        delete_count: Number of successful delete() calls.
    """

    def __init__(self, events: list[Event] | None = None) -> None:
        """Initialize with optional seed events.

        Args:
            events: Events to store up front, bypassing any guard.
        """
        self._events: dict[UUID, Event] = {e.id: e for e in events or []}
        self.save_count = 0
        self.delete_count = 0

    def clear(self) -> None:
        """Clear all stored data for test cleanup."""
        self._events.clear()
        self.save_count = 0
        self.delete_count = 0

    async def get_by_id(self, event_id: UUID) -> Event | None:
        return self._events.get(event_id)

    async def list_all(self) -> list[Event]:
        return list(self._events.values())

    async def save(self, event: Event) -> Event:
        """Insert or replace the event under its id."""
        is_new = event.id not in self._events
        self._events[event.id] = event
        self.save_count += 1
        logger.info("event_saved", event_id=str(event.id), created=is_new)
        return event

    async def delete(self, event_id: UUID) -> None:
        """Remove the event.

        Raises:
            EventNotFoundError: If no event has this id.
        """
        if event_id not in self._events:
            raise EventNotFoundError(event_id)

        del self._events[event_id]
        self.delete_count += 1
        logger.info("event_deleted", event_id=str(event_id))
