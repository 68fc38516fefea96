"""User Accessor Stub.

Returns a fixed, settable current user. Stands in for a request-scoped
adapter that reads the user from an authenticated request context.

WARNING: This stub is for development/testing only.
"""

from __future__ import annotations

from src.application.ports.user_accessor import UserAccessorProtocol
from src.domain.models.user import User


class UserAccessorStub(UserAccessorProtocol):
    """Identity collaborator with a controllable current user.

    Example:
        >>> accessor = UserAccessorStub(User(email_address="fox@example.com"))
        >>> accessor.current_user().email_address
        'fox@example.com'
        >>> accessor.sign_out()
        >>> accessor.current_user() is None
        True
    """

    def __init__(self, user: User | None = None) -> None:
        self._user = user
        self.lookup_count = 0

    def current_user(self) -> User | None:
        self.lookup_count += 1
        return self._user

    def sign_in(self, user: User) -> None:
        """Make ``user`` the acting user for later lookups."""
        self._user = user

    def sign_out(self) -> None:
        """Make later lookups anonymous."""
        self._user = None
