"""State validation errors.

A validation error means the caller proposed a state that breaks one or
more invariants. It is always recoverable by correcting the input and never
indicates a system fault.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.domain.exceptions import RsvpGuardError


class EntityValidationError(RsvpGuardError):
    """Raised when a proposed entity state violates one or more rules.

    Carries every violation collected during the validation pass, not just
    the first, so a single request surfaces all problems at once.

    Attributes:
        entity_type: Name of the entity being validated (e.g. "Event").
        messages: All recorded rule violations, in evaluation order.
    """

    def __init__(self, entity_type: str, messages: Iterable[str]) -> None:
        """Initialize the validation error.

        Args:
            entity_type: Name of the entity being validated.
            messages: Human-readable rule violations. Must not be empty.

        Raises:
            ValueError: If no messages are given.
        """
        self.entity_type = entity_type
        self.messages: tuple[str, ...] = tuple(messages)
        if not self.messages:
            raise ValueError("EntityValidationError requires at least one message")

        super().__init__(" ".join(self.messages))
