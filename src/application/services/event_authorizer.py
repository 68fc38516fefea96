"""Event authorizer - composes the policy set into one decision per operation.

Decision per operation kind:
- CREATE: the author policy against the proposed state only
- UPDATE: any configured policy grants (logical OR, first grant wins)
- DELETE: always denied, whatever the policies say

The acting user is resolved once per decision through the identity port.
Anonymous callers are always denied.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from structlog import get_logger

from src.application.services.event_policies import AuthorPolicy, default_event_policies
from src.domain.errors.authorization import NotAuthorizedError
from src.domain.models.event import Event
from src.domain.models.operation import OperationKind

if TYPE_CHECKING:
    from src.application.ports.event_policy import EventPolicyProtocol
    from src.application.ports.user_accessor import UserAccessorProtocol

logger = get_logger(__name__)

ENTITY_TYPE = "Event"


class EventAuthorizer:
    """Decides whether the current user may perform an event transition.

    New roles are supported by appending a policy to ``policies``; existing
    policies are never modified.

    Example:
        >>> authorizer = EventAuthorizer(user_accessor=accessor)
        >>> authorizer.authorize(None, new_event, OperationKind.CREATE)
        >>> authorizer.authorize(old_event, new_event, OperationKind.UPDATE)
    """

    def __init__(
        self,
        user_accessor: UserAccessorProtocol,
        policies: Sequence[EventPolicyProtocol] | None = None,
        create_policy: EventPolicyProtocol | None = None,
    ) -> None:
        """Initialize the authorizer.

        Args:
            user_accessor: Identity collaborator for the acting user.
            policies: Policies ORed together for updates. Defaults to
                default_event_policies().
            create_policy: Policy deciding creation. Defaults to AuthorPolicy.
        """
        self._user_accessor = user_accessor
        self._policies: tuple[EventPolicyProtocol, ...] = tuple(
            policies if policies is not None else default_event_policies()
        )
        self._create_policy: EventPolicyProtocol = create_policy or AuthorPolicy()

    @property
    def policies(self) -> tuple[EventPolicyProtocol, ...]:
        return self._policies

    def authorize(
        self,
        old_state: Event | None,
        new_state: Event | None,
        operation: OperationKind,
    ) -> None:
        """Raise unless the current user may perform the transition.

        Args:
            old_state: The event as persisted, or None on creation.
            new_state: The proposed event, or None on deletion.
            operation: The requested operation kind.

        Raises:
            ValueError: If the states do not match the operation kind.
            NotAuthorizedError: If no policy grants permission.
        """
        _check_states_match(old_state, new_state, operation)

        subject = new_state or old_state
        log = logger.bind(
            entity_type=ENTITY_TYPE,
            event_id=str(subject.id) if subject else None,
            operation=operation.value,
        )

        if operation is OperationKind.DELETE:
            log.info("event_write_denied", reason="delete_forbidden")
            raise NotAuthorizedError(ENTITY_TYPE, operation, reason="events cannot be deleted")

        user = self._user_accessor.current_user()
        if user is None:
            log.info("event_write_denied", reason="anonymous")
            raise NotAuthorizedError(ENTITY_TYPE, operation, reason="not logged in")

        if operation is OperationKind.CREATE:
            candidates: Sequence[EventPolicyProtocol] = (self._create_policy,)
        else:
            candidates = self._policies

        for policy in candidates:
            if policy.evaluate(user, old_state, new_state, operation):
                log.debug("event_write_authorized", policy=type(policy).__name__)
                return

        log.info("event_write_denied", reason="no_policy_granted")
        raise NotAuthorizedError(ENTITY_TYPE, operation)


def _check_states_match(
    old_state: Event | None,
    new_state: Event | None,
    operation: OperationKind,
) -> None:
    if old_state is None and new_state is None:
        raise ValueError("old_state and new_state cannot both be None")
    if operation is OperationKind.CREATE and old_state is not None:
        raise ValueError("CREATE requires old_state to be None")
    if operation is OperationKind.UPDATE and (old_state is None or new_state is None):
        raise ValueError("UPDATE requires both old_state and new_state")
    if operation is OperationKind.DELETE and new_state is not None:
        raise ValueError("DELETE requires new_state to be None")
