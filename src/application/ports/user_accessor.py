"""Identity port - resolves the acting user for authorization.

How the user was authenticated (JWT, session cookie, ...) is the concern of
the adapter; the authorization core only asks who is acting.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.models.user import User


class UserAccessorProtocol(Protocol):
    """Provides the current user for the ongoing request."""

    def current_user(self) -> User | None:
        """Return the acting user.

        Returns:
            The authenticated User, or None for an anonymous caller.
        """
        ...
