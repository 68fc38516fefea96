"""Roster reconciliation between two states of an event.

Pairs every old member with its new counterpart by id (a full outer join):

- present in old only: removal, paired with ``None``
- present in new only: insertion, paired with ``None``
- present in both: in-place edit

The join is total over all ids; no id is ever skipped. A roster that repeats
an id cannot be joined and is rejected rather than collapsed.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple
from uuid import UUID

from src.domain.models.member import Member


class MemberPair(NamedTuple):
    """Old and new state of one member. At most one side is None."""

    old: Member | None
    new: Member | None

    @property
    def member_id(self) -> UUID:
        if self.new is not None:
            return self.new.id
        if self.old is not None:
            return self.old.id
        raise ValueError("MemberPair requires at least one member state")

    @property
    def is_insertion(self) -> bool:
        return self.old is None

    @property
    def is_removal(self) -> bool:
        return self.new is None

    @property
    def is_changed(self) -> bool:
        return self.old != self.new


def reconcile_members(
    old_members: Iterable[Member],
    new_members: Iterable[Member],
) -> list[MemberPair]:
    """Full outer join of two rosters by member id.

    Args:
        old_members: Roster of the prior state (empty for creation).
        new_members: Roster of the proposed state (empty for deletion).

    Returns:
        One pair per distinct id, old-state ids first in their original
        order, then ids that only exist in the new state.

    Raises:
        ValueError: If either roster lists the same member id twice.
    """
    old_by_id = _index_by_id(old_members, "old")
    new_by_id = _index_by_id(new_members, "new")

    ids = list(old_by_id)
    ids.extend(member_id for member_id in new_by_id if member_id not in old_by_id)

    return [MemberPair(old_by_id.get(i), new_by_id.get(i)) for i in ids]


def _index_by_id(members: Iterable[Member], side: str) -> dict[UUID, Member]:
    by_id: dict[UUID, Member] = {}
    for member in members:
        if member.id in by_id:
            raise ValueError(f"Member id {member.id} appears twice in the {side} roster")
        by_id[member.id] = member
    return by_id
