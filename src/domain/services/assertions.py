"""Assertion collector for validation passes.

Validation accumulates violations and raises once at the end, so a single
request surfaces every problem instead of forcing repeated round-trips.

A collector is scoped to one validation pass. Nested validators receive the
same instance by reference; it is never shared across passes.
"""

from __future__ import annotations

from src.domain.errors.validation import EntityValidationError


class Assertions:
    """Mutable builder of rule violations for one entity type.

    Example:
        >>> assertions = Assertions("Event")
        >>> assertions.record(event.form is not None, "Form cannot be null.")
        >>> assertions.record(len(event.members) > 0, "Members list cannot be empty.")
        >>> assertions.raise_if_failed()  # raises with both messages if both fail
    """

    def __init__(self, entity_type: str) -> None:
        """Initialize an empty collector.

        Args:
            entity_type: Name of the entity being validated, carried on the error.
        """
        self._entity_type = entity_type
        self._messages: list[str] = []

    @property
    def entity_type(self) -> str:
        return self._entity_type

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(self._messages)

    @property
    def has_failures(self) -> bool:
        return bool(self._messages)

    def record(self, condition: bool, message: str) -> bool:
        """Record a violation if the condition does not hold.

        Never short-circuits: later assertions are still evaluated.

        Args:
            condition: The rule that must hold.
            message: Human-readable description recorded when it does not.

        Returns:
            The condition, so callers can guard dependent checks.
        """
        if not condition:
            self._messages.append(message)
        return condition

    def raise_if_failed(self) -> None:
        """Raise one aggregated error if any violation was recorded.

        Raises:
            EntityValidationError: Carrying every recorded message.
        """
        if self._messages:
            raise EntityValidationError(self._entity_type, self._messages)
