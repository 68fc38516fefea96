"""Event repository port.

Defines the storage contract that the base repository implements and that
both guard decorators (authorization, validation) implement again by
wrapping an inner repository. Because every link has the same shape, the
chain can be composed in any order the caller chooses.

Read operations carry no state diff, so decorators pass them through.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.event import Event


class EventRepositoryProtocol(Protocol):
    """Protocol for event storage and retrieval."""

    async def get_by_id(self, event_id: UUID) -> Event | None:
        """Load an event by id.

        Args:
            event_id: The event to load.

        Returns:
            The persisted event, or None if not found.
        """
        ...

    async def list_all(self) -> list[Event]:
        """Return every persisted event."""
        ...

    async def save(self, event: Event) -> Event:
        """Insert or replace an event.

        Args:
            event: The proposed new state.

        Returns:
            The persisted event.

        Raises:
            EntityValidationError: From a validating layer.
            NotAuthorizedError: From an authorizing layer.
        """
        ...

    async def delete(self, event_id: UUID) -> None:
        """Delete an event.

        Guarded layers always reject deletion.

        Raises:
            EventNotFoundError: If no event has this id.
        """
        ...
