"""Validating event repository - state validation decorator.

Wraps another EventRepositoryProtocol and validates every write against the
currently persisted state before delegating. Invalid states never reach the
inner repository. Reads pass through unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from structlog import get_logger

from src.domain.errors.event import EventNotFoundError
from src.domain.errors.validation import EntityValidationError
from src.domain.models.event import Event

if TYPE_CHECKING:
    from src.application.ports.event_repository import EventRepositoryProtocol
    from src.application.ports.state_validator import StateValidatorProtocol

logger = get_logger(__name__)


class ValidatingEventRepository:
    """Repository decorator enforcing event-state validation on writes.

    The decorator re-validates against whatever "current" state the inner
    repository returns at decision time; conflict detection between
    concurrent writers belongs to the base repository.

    Example:
        >>> repository = ValidatingEventRepository(
        ...     inner=EventRepositoryStub(),
        ...     validator=event_state_validator,
        ... )
        >>> await repository.save(event)  # raises EntityValidationError if invalid
    """

    def __init__(
        self,
        inner: EventRepositoryProtocol,
        validator: StateValidatorProtocol[Event],
    ) -> None:
        """Initialize the decorator.

        Args:
            inner: Next link in the repository chain.
            validator: Event-state validator run before every write.
        """
        self._inner = inner
        self._validator = validator

    async def get_by_id(self, event_id: UUID) -> Event | None:
        return await self._inner.get_by_id(event_id)

    async def list_all(self) -> list[Event]:
        return await self._inner.list_all()

    async def save(self, event: Event) -> Event:
        """Validate the proposed state, then delegate the save.

        Args:
            event: The proposed new state.

        Returns:
            The event as persisted by the inner repository.

        Raises:
            EntityValidationError: If the proposed state breaks any invariant.
        """
        current = await self._inner.get_by_id(event.id)
        self._validate(current, event, event.id)
        return await self._inner.save(event)

    async def delete(self, event_id: UUID) -> None:
        """Validate the deletion, which is always rejected.

        Raises:
            EventNotFoundError: If no event has this id.
            EntityValidationError: For any existing event.
        """
        current = await self._inner.get_by_id(event_id)
        if current is None:
            raise EventNotFoundError(event_id)

        self._validate(current, None, event_id)
        await self._inner.delete(event_id)

    def _validate(self, current: Event | None, proposed: Event | None, event_id: UUID) -> None:
        try:
            self._validator.validate_state(current, proposed)
        except EntityValidationError as exc:
            logger.info(
                "event_validation_failed",
                event_id=str(event_id),
                entity_type=exc.entity_type,
                violation_count=len(exc.messages),
            )
            raise
