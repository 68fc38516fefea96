"""Authorization policy ports.

A policy is one independent predicate answering "does this role permit this
user to make this specific transition?". Policies are composed with a logical
OR by the EventAuthorizer; new roles are added by appending a policy, never by
modifying an existing one.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.models.event import Event
from src.domain.models.operation import OperationKind
from src.domain.models.user import User


class EventPolicyProtocol(Protocol):
    """A single side-effect-free authorization predicate."""

    def evaluate(
        self,
        user: User,
        old_state: Event | None,
        new_state: Event | None,
        operation: OperationKind,
    ) -> bool:
        """Return True if this policy grants the transition.

        Args:
            user: The resolved acting user.
            old_state: Currently persisted state, or None on creation.
            new_state: Proposed state, or None on deletion.
            operation: The requested operation kind.
        """
        ...


class EventAuthorizerProtocol(Protocol):
    """Composes policies into one permission decision per operation."""

    def authorize(
        self,
        old_state: Event | None,
        new_state: Event | None,
        operation: OperationKind,
    ) -> None:
        """Raise unless the current user may perform the transition.

        Raises:
            NotAuthorizedError: If no policy grants permission.
        """
        ...
