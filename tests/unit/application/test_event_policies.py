"""Unit tests for the event authorization policies.

Each policy is evaluated in isolation against a published roster event with
an author, an organizer, two attendees and a frozen attendee.
"""

from dataclasses import replace

import pytest

from src.application.services.event_policies import (
    AttendeePolicy,
    AuthorPolicy,
    FrozenAttendeePolicy,
    OrganizerPolicy,
    default_event_policies,
)
from src.domain.models.event import Event
from src.domain.models.operation import OperationKind
from tests.helpers.event_builders import (
    ATTENDEE_EMAIL,
    AUTHOR_EMAIL,
    FROZEN_EMAIL,
    ORGANIZER_EMAIL,
    OTHER_ATTENDEE_EMAIL,
    STRANGER_EMAIL,
    add_member,
    make_attendee,
    make_event,
    make_member,
    make_roster_event,
    member_by_email,
    remove_member,
    replace_member,
    user,
)

UPDATE = OperationKind.UPDATE
CREATE = OperationKind.CREATE
DELETE = OperationKind.DELETE


@pytest.fixture
def event() -> Event:
    return make_roster_event()


def edit_responses(event: Event, email: str, answer: str = "Renamed") -> Event:
    member = member_by_email(event, email)
    return replace_member(event, replace(member, responses={"Fursona name": answer}))


class TestAuthorPolicy:
    policy = AuthorPolicy()

    def test_author_may_update_anything(self, event: Event) -> None:
        new = replace(event, location="New Venue", members=event.members[:1])

        assert self.policy.evaluate(user(AUTHOR_EMAIL), event, new, UPDATE)

    def test_author_email_is_case_insensitive(self, event: Event) -> None:
        assert self.policy.evaluate(user(AUTHOR_EMAIL.upper()), event, event, UPDATE)

    def test_create_checks_new_state(self) -> None:
        new = make_event()

        assert self.policy.evaluate(user(AUTHOR_EMAIL), None, new, CREATE)
        assert not self.policy.evaluate(user(STRANGER_EMAIL), None, new, CREATE)

    def test_non_author_denied(self, event: Event) -> None:
        for email in (ORGANIZER_EMAIL, ATTENDEE_EMAIL, STRANGER_EMAIL):
            assert not self.policy.evaluate(user(email), event, event, UPDATE)

    def test_self_promotion_to_author_denied(self, event: Event) -> None:
        author = member_by_email(event, AUTHOR_EMAIL)
        attendee = member_by_email(event, ATTENDEE_EMAIL)
        new = replace_member(event, replace(author, is_author=False))
        new = replace_member(new, replace(attendee, is_author=True))

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_delete_denied(self, event: Event) -> None:
        assert not self.policy.evaluate(user(AUTHOR_EMAIL), event, None, DELETE)


class TestOrganizerPolicy:
    policy = OrganizerPolicy()

    def test_organizer_may_edit_event(self, event: Event) -> None:
        new = replace(event, other_details="Bring snacks")

        assert self.policy.evaluate(user(ORGANIZER_EMAIL), event, new, UPDATE)

    def test_organizer_may_edit_other_members(self, event: Event) -> None:
        new = edit_responses(event, ATTENDEE_EMAIL)

        assert self.policy.evaluate(user(ORGANIZER_EMAIL), event, new, UPDATE)

    def test_author_flagged_organizer_is_organizer(self, event: Event) -> None:
        assert self.policy.evaluate(user(AUTHOR_EMAIL), event, event, UPDATE)

    def test_attendee_denied(self, event: Event) -> None:
        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, event, UPDATE)

    def test_promotion_in_new_state_does_not_count(self, event: Event) -> None:
        attendee = member_by_email(event, ATTENDEE_EMAIL)
        new = replace_member(event, replace(attendee, is_organizer=True))

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_not_applicable_to_create(self) -> None:
        new = make_event()

        assert not self.policy.evaluate(user(AUTHOR_EMAIL), None, new, CREATE)


class TestAttendeePolicy:
    policy = AttendeePolicy()

    def test_edit_own_record(self, event: Event) -> None:
        new = edit_responses(event, ATTENDEE_EMAIL)

        assert self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_withdraw(self, event: Event) -> None:
        attendee = member_by_email(event, ATTENDEE_EMAIL)
        new = remove_member(event, attendee.id)

        assert self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_join_while_rsvp_open(self, event: Event) -> None:
        new = add_member(event, make_attendee(STRANGER_EMAIL))

        assert self.policy.evaluate(user(STRANGER_EMAIL), event, new, UPDATE)

    def test_join_while_rsvp_closed(self) -> None:
        event = make_roster_event(rsvp_open=False, rsvp_closes_at=None)
        new = add_member(event, make_attendee(STRANGER_EMAIL))

        assert not self.policy.evaluate(user(STRANGER_EMAIL), event, new, UPDATE)

    def test_join_as_organizer_denied(self, event: Event) -> None:
        joiner = replace(make_attendee(STRANGER_EMAIL), is_organizer=True)
        new = add_member(event, joiner)

        assert not self.policy.evaluate(user(STRANGER_EMAIL), event, new, UPDATE)

    def test_join_as_someone_else_denied(self, event: Event) -> None:
        new = add_member(event, make_attendee("friend@furmeet.org"))

        assert not self.policy.evaluate(user(STRANGER_EMAIL), event, new, UPDATE)

    def test_edit_other_member_denied(self, event: Event) -> None:
        new = edit_responses(event, OTHER_ATTENDEE_EMAIL)

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_edit_self_and_other_denied(self, event: Event) -> None:
        new = edit_responses(edit_responses(event, ATTENDEE_EMAIL), OTHER_ATTENDEE_EMAIL)

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_second_record_under_own_id_denied(self, event: Event) -> None:
        own = member_by_email(event, ATTENDEE_EMAIL)
        sock = make_member("sock@furmeet.org", member_id=own.id, is_organizer=True)

        new = add_member(event, sock)

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_edit_with_record_sharing_own_id_denied(self, event: Event) -> None:
        own = member_by_email(event, ATTENDEE_EMAIL)
        twin = replace(own, email_address="twin@furmeet.org")
        new = add_member(edit_responses(event, ATTENDEE_EMAIL), twin)

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_remove_other_member_denied(self, event: Event) -> None:
        other = member_by_email(event, OTHER_ATTENDEE_EMAIL)
        new = remove_member(event, other.id)

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_event_field_change_denied(self, event: Event) -> None:
        new = replace(event, name="Renamed Meet")

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    @pytest.mark.parametrize("flag", ["is_organizer", "is_author", "is_frozen"])
    def test_flag_change_on_own_record_denied(self, event: Event, flag: str) -> None:
        attendee = member_by_email(event, ATTENDEE_EMAIL)
        new = replace_member(event, replace(attendee, **{flag: True}))

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_email_change_on_own_record_denied(self, event: Event) -> None:
        attendee = member_by_email(event, ATTENDEE_EMAIL)
        new = replace_member(event, replace(attendee, email_address="moved@furmeet.org"))

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

    def test_frozen_attendee_denied(self, event: Event) -> None:
        new = edit_responses(event, FROZEN_EMAIL)

        assert not self.policy.evaluate(user(FROZEN_EMAIL), event, new, UPDATE)

    def test_frozen_attendee_cannot_unfreeze(self, event: Event) -> None:
        frozen = member_by_email(event, FROZEN_EMAIL)
        new = replace_member(event, replace(frozen, is_frozen=False))

        assert not self.policy.evaluate(user(FROZEN_EMAIL), event, new, UPDATE)

    def test_organizer_without_attendee_flag_not_covered(self, event: Event) -> None:
        new = edit_responses(event, ORGANIZER_EMAIL)

        assert not self.policy.evaluate(user(ORGANIZER_EMAIL), event, new, UPDATE)

    def test_not_applicable_to_create_or_delete(self, event: Event) -> None:
        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), None, event, CREATE)
        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, None, DELETE)


class TestFrozenAttendeePolicy:
    policy = FrozenAttendeePolicy()

    def test_withdraw(self, event: Event) -> None:
        frozen = member_by_email(event, FROZEN_EMAIL)
        new = remove_member(event, frozen.id)

        assert self.policy.evaluate(user(FROZEN_EMAIL), event, new, UPDATE)

    def test_unchanged_save(self, event: Event) -> None:
        assert self.policy.evaluate(user(FROZEN_EMAIL), event, event, UPDATE)

    def test_edit_own_record_denied(self, event: Event) -> None:
        new = edit_responses(event, FROZEN_EMAIL)

        assert not self.policy.evaluate(user(FROZEN_EMAIL), event, new, UPDATE)

    def test_remove_other_member_denied(self, event: Event) -> None:
        attendee = member_by_email(event, ATTENDEE_EMAIL)
        new = remove_member(event, attendee.id)

        assert not self.policy.evaluate(user(FROZEN_EMAIL), event, new, UPDATE)

    def test_record_sharing_own_id_denied(self, event: Event) -> None:
        frozen = member_by_email(event, FROZEN_EMAIL)
        twin = replace(frozen, email_address="thawed@furmeet.org", is_frozen=False)

        new = add_member(event, twin)

        assert not self.policy.evaluate(user(FROZEN_EMAIL), event, new, UPDATE)

    def test_withdraw_with_event_change_denied(self, event: Event) -> None:
        frozen = member_by_email(event, FROZEN_EMAIL)
        new = replace(remove_member(event, frozen.id), location="Elsewhere")

        assert not self.policy.evaluate(user(FROZEN_EMAIL), event, new, UPDATE)

    def test_non_frozen_attendee_not_covered(self, event: Event) -> None:
        attendee = member_by_email(event, ATTENDEE_EMAIL)
        new = remove_member(event, attendee.id)

        assert not self.policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)


class TestDefaultPolicies:
    def test_contains_every_role(self) -> None:
        kinds = {type(policy) for policy in default_event_policies()}

        assert kinds == {AuthorPolicy, OrganizerPolicy, AttendeePolicy, FrozenAttendeePolicy}

    def test_policies_are_side_effect_free(self, event: Event) -> None:
        new = edit_responses(event, ATTENDEE_EMAIL)
        snapshot = (event, new)

        for policy in default_event_policies():
            policy.evaluate(user(ATTENDEE_EMAIL), event, new, UPDATE)

        assert (event, new) == snapshot
