"""Time Authority port - injected source of the current time.

Validation rules that compare against "now" (e.g. a newly published event
must start in the future) read the time through this port instead of the
system clock, so validation is deterministic under test.

For production:
    Use SystemTimeAuthority from src/infrastructure/adapters/

For testing:
    Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for the clock collaborator.

    Example usage:
        class MyValidator:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def validate(self, event: Event) -> None:
                now = self._time.now()
                ...
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time.

        Returns:
            Current datetime, timezone-aware in UTC.
        """
        ...
