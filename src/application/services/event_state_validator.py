"""Event-state validator.

Validates one event's old -> new transition, including reconciliation of the
roster through the member-state validator. Every invariant is evaluated on
every pass and all violations are raised together.

Invariants of every persisted Event:
- Members is non-empty
- no two members share an id
- member email addresses are case-insensitively unique
- exactly one member is the author
- a form is present
- rsvp_closes_at is set if and only if rsvp_open
- a published event has start and end times, starts before it ends, has a
  time zone, and when it was not previously published, starts in the future

Once an event has been published, later saves skip the start-in-the-future
check even if starts_at itself changes. Organizers rely on this to correct
the record of an event after the fact.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from src.domain.models.event import Event
from src.domain.models.member import normalize_email
from src.domain.services.assertions import Assertions
from src.domain.services.member_reconciliation import MemberPair, reconcile_members

if TYPE_CHECKING:
    from src.application.ports.time_authority import TimeAuthorityProtocol
    from src.application.services.member_state_validator import MemberStateValidator

ENTITY_TYPE = "Event"


def _as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so they compare with the clock."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class EventStateValidator:
    """Validates event transitions against the aggregate invariants.

    A fresh Assertions collector is created for every call, so one validator
    instance can serve concurrent validation passes.

    Example:
        >>> validator = EventStateValidator(
        ...     time_authority=SystemTimeAuthority(),
        ...     member_validator=MemberStateValidator(EmailValidatorAdapter()),
        ... )
        >>> validator.validate_state(None, new_event)  # creation
        >>> validator.validate_state(old_event, new_event)  # update
    """

    def __init__(
        self,
        time_authority: TimeAuthorityProtocol,
        member_validator: MemberStateValidator,
    ) -> None:
        """Initialize the validator.

        Args:
            time_authority: Clock used for the publish-transition rule.
            member_validator: Validates each reconciled member pair.
        """
        self._time = time_authority
        self._member_validator = member_validator

    def validate_state(self, old_state: Event | None, new_state: Event | None) -> None:
        """Validate the transition from old_state to new_state.

        Args:
            old_state: The event as persisted, or None on creation.
            new_state: The proposed event, or None on deletion.

        Raises:
            ValueError: If both states are None.
            EntityValidationError: Carrying every violated invariant.
        """
        if old_state is None and new_state is None:
            raise ValueError("old_state and new_state cannot both be None")

        assertions = Assertions(ENTITY_TYPE)

        assertions.record(new_state is not None, "Deleting an Event is not allowed.")
        if new_state is None:
            assertions.raise_if_failed()
            return

        self._validate_roster(new_state, assertions)

        for pair in self._member_pairs(old_state, new_state):
            self._member_validator.validate_state(pair.old, pair.new, assertions)

        assertions.record(new_state.form is not None, "Form cannot be null.")
        self._validate_rsvp_window(new_state, assertions)

        if new_state.is_published:
            was_published = old_state is not None and old_state.is_published
            self._validate_publication(new_state, was_published, assertions)

        assertions.raise_if_failed()

    @staticmethod
    def _member_pairs(old_state: Event | None, new_state: Event) -> list[MemberPair]:
        """Pair old and new member states for the member validator.

        A roster with a repeated id cannot be joined; every proposed record is
        then checked on its own as an insertion so none goes unvalidated.
        """
        old_members = old_state.members if old_state is not None else ()
        if new_state.has_unique_member_ids and (
            old_state is None or old_state.has_unique_member_ids
        ):
            return reconcile_members(old_members, new_state.members)
        return [MemberPair(None, member) for member in new_state.members]

    def _validate_roster(self, event: Event, assertions: Assertions) -> None:
        assertions.record(len(event.members) > 0, "Members list cannot be empty.")
        assertions.record(
            event.has_unique_member_ids,
            "Each member in list must have a unique id.",
        )

        emails = [normalize_email(m.email_address) for m in event.members]
        assertions.record(
            len(set(emails)) == len(emails),
            "Each member in list must have a unique email address.",
        )
        assertions.record(
            len(event.authors) == 1,
            "Members list must contain exactly one author of the event.",
        )

    def _validate_rsvp_window(self, event: Event, assertions: Assertions) -> None:
        if event.rsvp_open:
            assertions.record(
                event.rsvp_closes_at is not None,
                "RsvpClosesAt must be set if Rsvp is open.",
            )
        else:
            assertions.record(
                event.rsvp_closes_at is None,
                "RsvpClosesAt cannot be set if Rsvp is closed.",
            )

    def _validate_publication(
        self,
        event: Event,
        was_published: bool,
        assertions: Assertions,
    ) -> None:
        starts_at, ends_at = event.starts_at, event.ends_at
        assertions.record(starts_at is not None, "Event must have a start date and time.")
        assertions.record(ends_at is not None, "Event must have an end date and time.")

        if starts_at is not None and ends_at is not None:
            assertions.record(
                _as_utc(starts_at) < _as_utc(ends_at),
                "Start time must be before End time.",
            )

        if starts_at is not None and not was_published:
            assertions.record(
                _as_utc(starts_at) > _as_utc(self._time.now()),
                "Start time must be in the future.",
            )

        assertions.record(event.time_zone_id is not None, "Time Zone is required.")
