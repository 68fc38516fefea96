"""Event aggregate root.

An Event owns its Members and is validated and authorized as one unit.
Instances are immutable; an edit is expressed as a new Event value that is
compared against the previously persisted one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID

from src.domain.models.member import Member


@dataclass(frozen=True, eq=True)
class FormPrompt:
    """A single question on an event's RSVP form."""

    prompt: str
    behavior: str = "text"
    options: tuple[str, ...] = ()
    required: bool = False


@dataclass(frozen=True, eq=True)
class Form:
    """The RSVP form attached to an event. Opaque to validation beyond presence."""

    prompts: tuple[FormPrompt, ...] = ()


@dataclass(frozen=True, eq=True)
class Event:
    """An RSVP-style gathering with a roster of members.

    Attributes:
        id: Stable identity of the event.
        members: Roster. Order carries no meaning.
        form: RSVP form. Must be present on every persisted state.
        rsvp_open: Whether new RSVPs are accepted.
        rsvp_closes_at: When RSVPs close. Set if and only if rsvp_open.
        starts_at: Start of the event (UTC).
        ends_at: End of the event (UTC).
        time_zone_id: IANA time zone the event is held in.
        is_published: Whether the event is publicly visible.
        name: Title of the event.
        location: Where the event takes place.
        other_details: Free-form description.
    """

    id: UUID
    members: tuple[Member, ...] = ()
    form: Form | None = None
    rsvp_open: bool = False
    rsvp_closes_at: datetime | None = None
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    time_zone_id: str | None = None
    is_published: bool = False
    name: str = ""
    location: str = ""
    other_details: str = ""

    @property
    def authors(self) -> tuple[Member, ...]:
        return tuple(m for m in self.members if m.is_author)

    @property
    def author(self) -> Member | None:
        """Return the single author, or None if there is not exactly one."""
        authors = self.authors
        return authors[0] if len(authors) == 1 else None

    def find_member_by_email(self, address: str | None) -> Member | None:
        """Find the roster entry linked to an email address.

        Args:
            address: Email address to look up (case-insensitive).

        Returns:
            The first matching member, or None.
        """
        for member in self.members:
            if member.has_email(address):
                return member
        return None

    def same_details_as(self, other: Event) -> bool:
        """Check whether every event-level field (roster aside) is unchanged."""
        return replace(self, members=()) == replace(other, members=())

    @property
    def has_unique_member_ids(self) -> bool:
        return len({m.id for m in self.members}) == len(self.members)

    def find_member(self, member_id: UUID) -> Member | None:
        """Find the roster entry with the given id."""
        for member in self.members:
            if member.id == member_id:
                return member
        return None
