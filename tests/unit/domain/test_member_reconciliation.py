"""Unit tests for reconcile_members (full outer join by member id)."""

from dataclasses import replace

import pytest

from src.domain.services.member_reconciliation import MemberPair, reconcile_members
from tests.helpers.event_builders import make_attendee, make_author, make_organizer


class TestReconcileMembers:
    def test_creation_pairs_every_member_with_none(self) -> None:
        author = make_author()
        attendee = make_attendee()

        pairs = reconcile_members((), (author, attendee))

        assert pairs == [MemberPair(None, author), MemberPair(None, attendee)]
        assert all(pair.is_insertion for pair in pairs)

    def test_removal_pairs_with_none(self) -> None:
        author = make_author()
        attendee = make_attendee()

        pairs = reconcile_members((author, attendee), (author,))

        assert MemberPair(attendee, None) in pairs
        removal = next(p for p in pairs if p.is_removal)
        assert removal.member_id == attendee.id

    def test_edit_pairs_by_id_not_position(self) -> None:
        author = make_author()
        attendee = make_attendee()
        renamed = replace(attendee, name="Renamed")

        pairs = reconcile_members((author, attendee), (renamed, author))

        assert pairs == [MemberPair(author, author), MemberPair(attendee, renamed)]
        assert not pairs[0].is_changed
        assert pairs[1].is_changed

    def test_join_is_total_over_all_ids(self) -> None:
        author = make_author()
        removed = make_attendee()
        added = make_organizer()

        pairs = reconcile_members((author, removed), (author, added))

        assert {p.member_id for p in pairs} == {author.id, removed.id, added.id}
        assert len(pairs) == 3

    def test_empty_rosters(self) -> None:
        assert reconcile_members((), ()) == []

    def test_pair_without_members_has_no_id(self) -> None:
        with pytest.raises(ValueError):
            MemberPair(None, None).member_id

    def test_repeated_id_in_new_roster_raises(self) -> None:
        author = make_author()
        attendee = make_attendee()
        twin = replace(make_organizer(), id=attendee.id)

        with pytest.raises(ValueError, match="new roster"):
            reconcile_members((author, attendee), (author, attendee, twin))

    def test_repeated_id_in_old_roster_raises(self) -> None:
        attendee = make_attendee()

        with pytest.raises(ValueError, match="old roster"):
            reconcile_members((attendee, attendee), ())
