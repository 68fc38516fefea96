"""Authorization errors.

Kept apart from validation errors so callers can tell "fix your input"
from "you may not do this".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.exceptions import RsvpGuardError

if TYPE_CHECKING:
    from src.domain.models.operation import OperationKind


class NotAuthorizedError(RsvpGuardError):
    """Raised when no policy grants the acting user the requested transition.

    Attributes:
        entity_type: Name of the entity the operation targeted.
        operation: The denied operation, if known.
        reason: Optional detail for logs. Never includes other members' data.
    """

    def __init__(
        self,
        entity_type: str,
        operation: OperationKind | None = None,
        reason: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            entity_type: Name of the entity the operation targeted.
            operation: The denied operation kind.
            reason: Optional additional reason for denial.
        """
        self.entity_type = entity_type
        self.operation = operation
        self.reason = reason

        if operation is not None:
            msg = f"Not authorized to {operation.value} {entity_type}"
        else:
            msg = f"Not authorized to modify {entity_type}"
        if reason:
            msg = f"{msg}: {reason}"

        super().__init__(msg)
