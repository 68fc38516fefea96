"""State validator port.

A state validator decides whether an old -> new transition of an aggregate
is internally consistent. Creation is (None, new); deletion is (old, None).
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T_contra = TypeVar("T_contra", contravariant=True)


class StateValidatorProtocol(Protocol[T_contra]):
    """Validates one transition of an entity."""

    def validate_state(self, old_state: T_contra | None, new_state: T_contra | None) -> None:
        """Validate the transition from old_state to new_state.

        Args:
            old_state: Currently persisted state, or None on creation.
            new_state: Proposed state, or None on deletion.

        Raises:
            EntityValidationError: Carrying every violated rule.
            ValueError: If both states are None (caller error).
        """
        ...
