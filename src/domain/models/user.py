"""Acting user as resolved by the identity collaborator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=True)
class User:
    """An authenticated user.

    Anonymous callers are represented by ``None`` rather than a User.

    Attributes:
        email_address: Links the user to Member records on an event.
        name: Optional display name from the identity provider.
    """

    email_address: str
    name: str | None = None
