"""Member domain model.

A Member is a child entity of an Event. Its identity is ``id``, which stays
stable across edits, so an old and a new roster can be reconciled by id.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from uuid import UUID


def normalize_email(address: str) -> str:
    """Return the case-insensitive comparison key for an email address."""
    return address.strip().casefold()


@dataclass(frozen=True, eq=True)
class Member:
    """One entry on an event roster.

    Attributes:
        id: Stable identity of the member record.
        email_address: Identity-linking attribute between a User and a Member.
        name: Display name.
        is_author: The member who created the event. Exactly one per event.
        is_organizer: May edit the whole event.
        is_attendee: Has RSVP'd to the event.
        is_frozen: Attendee whose edit window has closed.
        responses: Opaque answers to the event form, keyed by prompt id.
    """

    id: UUID
    email_address: str
    name: str
    is_author: bool = False
    is_organizer: bool = False
    is_attendee: bool = False
    is_frozen: bool = False
    responses: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def has_email(self, address: str | None) -> bool:
        """Check whether this member is linked to the given email address."""
        if address is None:
            return False
        return normalize_email(self.email_address) == normalize_email(address)

    @property
    def has_role(self) -> bool:
        return self.is_author or self.is_organizer or self.is_attendee
