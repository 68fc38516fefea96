"""Email format port used by the member-state validator."""

from __future__ import annotations

from typing import Protocol


class EmailValidatorProtocol(Protocol):
    """Checks whether an email address is well formed.

    Implementations must be side-effect free: no network lookups unless
    explicitly configured, and never raise for malformed input.
    """

    def is_valid(self, address: str) -> bool:
        """Return True if the address is a syntactically valid email address."""
        ...
