"""
NotBlank - ensures a value carries at least one non-whitespace character.
"""

from typing import Any

from .base_rule import BaseRule


class NotBlank(BaseRule):
    """
    Validates that a value is not blank.

    This is the only rule that rejects empty values; the others let ``""`` and
    None through so optional fields can still be format-checked.

    Fails if:
    - Value is None
    - Value is an empty string
    - Value contains only whitespace
    """

    default_message = "This value should not be blank"

    def check(self, value: Any) -> str | None:
        if value is None or str(value).strip() == "":
            return self._message(self.default_message)
        return None

    @property
    def rule_type(self) -> str:
        return "not_blank"
