"""Email format adapter backed by the email-validator package.

Deliverability (DNS) checks are off by default so validation stays pure and
offline; enable them through GuardConfig for deployments that want them.
"""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email
from structlog import get_logger

logger = get_logger(__name__)


class EmailValidatorAdapter:
    """Implements EmailValidatorProtocol with ``email_validator.validate_email``.

    Example:
        >>> adapter = EmailValidatorAdapter()
        >>> adapter.is_valid("fox@example.com")
        True
        >>> adapter.is_valid("not an email")
        False
    """

    def __init__(
        self,
        check_deliverability: bool = False,
        allow_smtputf8: bool = True,
    ) -> None:
        """Initialize the adapter.

        Args:
            check_deliverability: Resolve the domain's MX records. Performs I/O.
            allow_smtputf8: Accept internationalized local parts.
        """
        self._check_deliverability = check_deliverability
        self._allow_smtputf8 = allow_smtputf8

    def is_valid(self, address: str) -> bool:
        try:
            validate_email(
                address,
                check_deliverability=self._check_deliverability,
                allow_smtputf8=self._allow_smtputf8,
            )
        except EmailNotValidError as exc:
            logger.debug("email_address_rejected", reason=str(exc))
            return False
        return True
