"""System clock adapter for TimeAuthorityProtocol.

This is the only production module allowed to read the wall clock directly.
"""

from datetime import datetime, timezone

from src.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Time authority backed by the system clock, always in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
