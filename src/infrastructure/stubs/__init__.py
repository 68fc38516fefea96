"""Infrastructure stubs for development and testing.

Available stubs:
- EventRepositoryStub: In-memory base event store
- UserAccessorStub: Settable current user

WARNING: These stubs are NOT for production use.
"""

from src.infrastructure.stubs.event_repository_stub import EventRepositoryStub
from src.infrastructure.stubs.user_accessor_stub import UserAccessorStub

__all__: list[str] = ["EventRepositoryStub", "UserAccessorStub"]
