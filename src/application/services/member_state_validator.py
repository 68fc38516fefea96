"""Member-state validator.

Validates one member's transition in isolation: insertion (None -> new),
removal (old -> None) or in-place edit (old -> new). Violations are recorded
into the collector of the enclosing event validation pass so member-level and
event-level failures aggregate into a single error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.models.member import Member
from src.domain.services.assertions import Assertions

if TYPE_CHECKING:
    from src.application.ports.email_validator import EmailValidatorProtocol


class MemberStateValidator:
    """Validates member transitions against member-level rules.

    Rules for every non-null new state:
    - the email address is well formed (delegated to the email collaborator)
    - the name is not blank
    - the member holds at least one role
    - only attendees can be frozen

    Rules for transitions:
    - the author cannot be removed from the roster

    Example:
        >>> validator = MemberStateValidator(email_validator=EmailValidatorAdapter())
        >>> assertions = Assertions("Event")
        >>> validator.validate_state(old_member, new_member, assertions)
        >>> assertions.raise_if_failed()
    """

    def __init__(self, email_validator: EmailValidatorProtocol) -> None:
        """Initialize the validator.

        Args:
            email_validator: Collaborator that checks email format.
        """
        self._email_validator = email_validator

    def validate_state(
        self,
        old_state: Member | None,
        new_state: Member | None,
        assertions: Assertions,
    ) -> None:
        """Record every rule the transition breaks.

        Args:
            old_state: The member as persisted, or None on insertion.
            new_state: The proposed member, or None on removal.
            assertions: Collector shared with the enclosing validation pass.

        Raises:
            ValueError: If both states are None.
        """
        if old_state is None and new_state is None:
            raise ValueError("old_state and new_state cannot both be None")

        if new_state is None:
            assertions.record(
                not (old_state and old_state.is_author),
                "The author of an event cannot be removed.",
            )
            return

        assertions.record(
            self._email_validator.is_valid(new_state.email_address),
            f"Email address '{new_state.email_address}' is not valid.",
        )
        assertions.record(bool(new_state.name.strip()), "Member name is required.")
        assertions.record(
            new_state.has_role,
            "Member must be an author, organizer, or attendee.",
        )
        if new_state.is_frozen:
            assertions.record(new_state.is_attendee, "Only attendees can be frozen.")
