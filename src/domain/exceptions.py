"""Base exception classes for the RSVP Event Guard domain layer."""


class RsvpGuardError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class so callers
    outside the core (e.g. a transport layer) can map them in one place.

    Subclasses:
    - EntityValidationError: a proposed state breaks an invariant
    - NotAuthorizedError: no policy grants the requested transition
    - EventNotFoundError: a repository lookup found nothing
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
