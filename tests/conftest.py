"""
Pytest configuration and shared fixtures for RSVP Event Guard tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async collaborator mocking
- Unit tests go in tests/unit/<layer>/
- Wiring tests go in tests/integration/
- Time-dependent tests use FakeTimeAuthority, never the system clock
"""

import pytest

from src.application.services.event_authorizer import EventAuthorizer
from src.application.services.event_state_validator import EventStateValidator
from src.application.services.member_state_validator import MemberStateValidator
from src.infrastructure.stubs.user_accessor_stub import UserAccessorStub
from tests.helpers import FakeEmailValidator, FakeTimeAuthority


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Clock frozen at DEFAULT_FROZEN_AT."""
    return FakeTimeAuthority()


@pytest.fixture
def email_validator() -> FakeEmailValidator:
    return FakeEmailValidator()


@pytest.fixture
def member_validator(email_validator: FakeEmailValidator) -> MemberStateValidator:
    return MemberStateValidator(email_validator=email_validator)


@pytest.fixture
def event_validator(
    fake_time_authority: FakeTimeAuthority,
    member_validator: MemberStateValidator,
) -> EventStateValidator:
    return EventStateValidator(
        time_authority=fake_time_authority,
        member_validator=member_validator,
    )


@pytest.fixture
def user_accessor() -> UserAccessorStub:
    """Anonymous until a test signs a user in."""
    return UserAccessorStub()


@pytest.fixture
def authorizer(user_accessor: UserAccessorStub) -> EventAuthorizer:
    return EventAuthorizer(user_accessor=user_accessor)
