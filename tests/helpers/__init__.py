"""Test helpers for RSVP Event Guard tests.

Helpers:
    FakeTimeAuthority: Controllable clock for deterministic tests
    FakeEmailValidator: Scripted email format collaborator
    event_builders: Valid Event / Member test data

Usage:
    from tests.helpers import FakeTimeAuthority
"""

from tests.helpers.fake_email_validator import FakeEmailValidator
from tests.helpers.fake_time_authority import DEFAULT_FROZEN_AT, FakeTimeAuthority

__all__ = ["DEFAULT_FROZEN_AT", "FakeEmailValidator", "FakeTimeAuthority"]
