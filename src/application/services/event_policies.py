"""Authorization policies for event writes.

Each policy is an independent, side-effect-free predicate for one role. The
EventAuthorizer ORs them together; a transition is permitted when any policy
grants it. The acting user is resolved once by the authorizer and handed to
every policy, which links it to roster entries by email address.

Policies:
- AuthorPolicy: the event's author may do anything
- OrganizerPolicy: organizers may edit the whole event
- AttendeePolicy: attendees may join, edit or withdraw their own record only
- FrozenAttendeePolicy: frozen attendees may only withdraw
"""

from __future__ import annotations

from uuid import UUID

from src.domain.models.event import Event
from src.domain.models.member import Member
from src.domain.models.operation import OperationKind
from src.domain.models.user import User
from src.domain.services.member_reconciliation import reconcile_members


def _rosters_joinable(old_state: Event, new_state: Event) -> bool:
    """Check that neither roster repeats a member id, so a diff can be trusted."""
    return old_state.has_unique_member_ids and new_state.has_unique_member_ids


def _only_member_changed(old_state: Event, new_state: Event, member_id: UUID) -> bool:
    """Check that every roster change between the states concerns one member id."""
    if not _rosters_joinable(old_state, new_state):
        return False
    return all(
        pair.member_id == member_id
        for pair in reconcile_members(old_state.members, new_state.members)
        if pair.is_changed
    )


class AuthorPolicy:
    """Grants any create or update to the event's author.

    The author is read from the prior state when there is one, so a user
    cannot make themselves author and authorize that same edit. On creation
    the author is read from the proposed state.
    """

    def evaluate(
        self,
        user: User,
        old_state: Event | None,
        new_state: Event | None,
        operation: OperationKind,
    ) -> bool:
        if operation is OperationKind.DELETE:
            return False

        reference = old_state if old_state is not None else new_state
        if reference is None:
            return False

        author = reference.author
        return author is not None and author.has_email(user.email_address)


class OrganizerPolicy:
    """Grants updates to users who are organizers of the persisted event."""

    def evaluate(
        self,
        user: User,
        old_state: Event | None,
        new_state: Event | None,
        operation: OperationKind,
    ) -> bool:
        if operation is not OperationKind.UPDATE or old_state is None or new_state is None:
            return False

        member = old_state.find_member_by_email(user.email_address)
        return member is not None and member.is_organizer


class AttendeePolicy:
    """Grants attendees edits of their own roster entry.

    An attendee may:
    - join (add a record for themselves) while RSVP is open
    - edit their own record, e.g. form responses or name
    - withdraw (remove their own record)

    An attendee may not change event-level fields, touch any other member's
    record, grant themselves author or organizer roles, or change their frozen
    status. A proposed roster that repeats a member id is never granted,
    since one record could hide behind another in the diff. Frozen attendees
    are handled by FrozenAttendeePolicy.
    """

    def evaluate(
        self,
        user: User,
        old_state: Event | None,
        new_state: Event | None,
        operation: OperationKind,
    ) -> bool:
        if operation is not OperationKind.UPDATE or old_state is None or new_state is None:
            return False
        if not old_state.same_details_as(new_state):
            return False

        own_old = old_state.find_member_by_email(user.email_address)
        if own_old is not None:
            own_new = new_state.find_member(own_old.id)
        else:
            own_new = new_state.find_member_by_email(user.email_address)

        own = own_old or own_new
        if own is None or not _only_member_changed(old_state, new_state, own.id):
            return False

        if own_old is None:
            return old_state.rsvp_open and own_new is not None and self._is_plain_attendee(
                own_new, user
            )
        if own_old.is_frozen or not own_old.is_attendee:
            return False
        if own_new is None:
            return True

        return (
            own_new.has_email(user.email_address)
            and own_new.is_attendee
            and own_new.is_author == own_old.is_author
            and own_new.is_organizer == own_old.is_organizer
            and own_new.is_frozen == own_old.is_frozen
        )

    @staticmethod
    def _is_plain_attendee(member: Member, user: User) -> bool:
        return (
            member.has_email(user.email_address)
            and member.is_attendee
            and not member.is_author
            and not member.is_organizer
            and not member.is_frozen
        )


class FrozenAttendeePolicy:
    """Grants frozen attendees the one edit left to them: withdrawing.

    Any other change, to their own record, another member or the event itself,
    is denied.
    """

    def evaluate(
        self,
        user: User,
        old_state: Event | None,
        new_state: Event | None,
        operation: OperationKind,
    ) -> bool:
        if operation is not OperationKind.UPDATE or old_state is None or new_state is None:
            return False

        own_old = old_state.find_member_by_email(user.email_address)
        if own_old is None or not (own_old.is_attendee and own_old.is_frozen):
            return False
        if not old_state.same_details_as(new_state):
            return False
        if not _rosters_joinable(old_state, new_state):
            return False

        return all(
            pair.member_id == own_old.id and pair.is_removal
            for pair in reconcile_members(old_state.members, new_state.members)
            if pair.is_changed
        )


def default_event_policies() -> tuple[
    AuthorPolicy, OrganizerPolicy, AttendeePolicy, FrozenAttendeePolicy
]:
    """Return the standard policy set, cheapest and broadest first."""
    return (AuthorPolicy(), OrganizerPolicy(), AttendeePolicy(), FrozenAttendeePolicy())
