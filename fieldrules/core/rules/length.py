"""
Length - validates string length against minimum and maximum bounds.
"""

from typing import Any

from .base_rule import BaseRule, is_empty

TOO_SHORT = "This value is too short. It should have {{ min }} characters or more."
TOO_LONG = "This value is too long. It should have {{ max }} characters or less."


class Length(BaseRule):
    """
    Validates that a value's length is within bounds.

    Parameters:
    - min: Minimum length (inclusive)
    - max: Maximum length (inclusive)
    - message: Optional custom error message

    Non-string values are measured through str(). The minimum is checked
    before the maximum, so a value can only report one of the two templates.
    """

    def check(self, value: Any) -> str | None:
        # Skip validation for empty values (handled by NotBlank)
        if is_empty(value):
            return None

        length = len(value if isinstance(value, str) else str(value))
        minimum = self._bound("min")
        maximum = self._bound("max")

        if minimum is not None and length < minimum:
            return self._message(TOO_SHORT)

        if maximum is not None and length > maximum:
            return self._message(TOO_LONG)

        return None

    def _bound(self, name: str) -> float | None:
        """Read a numeric bound, ignoring values that are not numbers."""
        bound = self._conditions.get(name)
        if bound is None or isinstance(bound, bool):
            return None
        try:
            return float(bound)
        except (TypeError, ValueError):
            return None

    @property
    def rule_type(self) -> str:
        return "length"
