"""
Email - validates that a value is a syntactically valid email address.
"""

from typing import Any

from email_validator import EmailNotValidError, validate_email

from .base_rule import BaseRule, is_empty


class Email(BaseRule):
    """
    Validates email address syntax (local-part@domain).

    Only the address format is checked; no DNS lookups are made. The domain
    must contain at least one dot and the local part must be ASCII.
    """

    default_message = "This value is not a valid email address."

    def check(self, value: Any) -> str | None:
        if is_empty(value):
            return None

        if not isinstance(value, str):
            return self._message(self.default_message)

        try:
            validate_email(value, check_deliverability=False, allow_smtputf8=False)
        except EmailNotValidError:
            return self._message(self.default_message)

        return None

    @property
    def rule_type(self) -> str:
        return "email"
