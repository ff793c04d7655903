"""
Email validator adapter - Implements EmailValidator protocol.

Backed by the email-validator library (the same one pydantic's EmailStr
relies on).
"""

import logging

from email_validator import EmailNotValidError, validate_email

logger = logging.getLogger(__name__)


class EmailValidatorAdapter:
    """
    Implements EmailValidator protocol via email-validator.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, check_deliverability: bool = False) -> None:
        """
        Args:
            check_deliverability: Also resolve the domain's MX records
        """
        self.check_deliverability = check_deliverability

    def is_valid(self, email: str) -> bool:
        """
        Return True if the address is syntactically valid.

        Only EmailNotValidError is treated as a rejection. Anything else
        raised by the library propagates to the caller.
        """
        try:
            validate_email(email, check_deliverability=self.check_deliverability)
        except EmailNotValidError as e:
            logger.debug("Rejected email address: %s", e)
            return False
        return True
