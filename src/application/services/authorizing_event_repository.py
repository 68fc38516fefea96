"""Authorizing event repository - authorization decorator.

Wraps another EventRepositoryProtocol and checks the acting user's permission
for every write before delegating. An unauthorized write never reaches the
inner layers (validation, storage). Reads pass through unchanged.

Recommended chain, outer to inner:
    AuthorizingEventRepository -> ValidatingEventRepository -> base store
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from src.domain.errors.event import EventNotFoundError
from src.domain.models.event import Event
from src.domain.models.operation import OperationKind

if TYPE_CHECKING:
    from src.application.ports.event_policy import EventAuthorizerProtocol
    from src.application.ports.event_repository import EventRepositoryProtocol


class AuthorizingEventRepository:
    """Repository decorator enforcing authorization on writes.

    Example:
        >>> repository = AuthorizingEventRepository(
        ...     inner=validating_repository,
        ...     authorizer=EventAuthorizer(user_accessor=accessor),
        ... )
        >>> await repository.save(event)  # raises NotAuthorizedError if denied
    """

    def __init__(
        self,
        inner: EventRepositoryProtocol,
        authorizer: EventAuthorizerProtocol,
    ) -> None:
        """Initialize the decorator.

        Args:
            inner: Next link in the repository chain.
            authorizer: Decides permission for every write.
        """
        self._inner = inner
        self._authorizer = authorizer

    async def get_by_id(self, event_id: UUID) -> Event | None:
        return await self._inner.get_by_id(event_id)

    async def list_all(self) -> list[Event]:
        return await self._inner.list_all()

    async def save(self, event: Event) -> Event:
        """Authorize the transition, then delegate the save.

        The operation is CREATE when nothing is persisted under the event's
        id, UPDATE otherwise.

        Raises:
            NotAuthorizedError: If the current user may not make this change.
        """
        current = await self._inner.get_by_id(event.id)
        operation = OperationKind.CREATE if current is None else OperationKind.UPDATE
        self._authorizer.authorize(current, event, operation)
        return await self._inner.save(event)

    async def delete(self, event_id: UUID) -> None:
        """Authorize the deletion, which is always denied.

        Raises:
            EventNotFoundError: If no event has this id.
            NotAuthorizedError: For any existing event.
        """
        current = await self._inner.get_by_id(event_id)
        if current is None:
            raise EventNotFoundError(event_id)

        self._authorizer.authorize(current, None, OperationKind.DELETE)
        await self._inner.delete(event_id)
