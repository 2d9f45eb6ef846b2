"""
PhoneNumber - validates that a value only uses phone number characters.
"""

import re
from typing import Any

from .base_rule import BaseRule, is_empty

# Digits, whitespace, commas, dots, hyphens and the plus sign
PHONE_PATTERN = re.compile(r"[0-9\s,.\-+]*")


class PhoneNumber(BaseRule):
    """
    Validates phone numbers by character set.

    Accepts any mix of digits, whitespace, ``,``, ``.``, ``-`` and ``+``,
    covering common national and international notations.
    """

    default_message = "This value does not meet the criteria for a valid phone number."

    def check(self, value: Any) -> str | None:
        if is_empty(value):
            return None

        if PHONE_PATTERN.fullmatch(str(value)):
            return None
        return self._message(self.default_message)

    @property
    def rule_type(self) -> str:
        return "phone_number"
