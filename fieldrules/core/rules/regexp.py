"""
RegExp - validates field values against a regular expression pattern.
"""

import re
from re import Pattern
from typing import Any

from fieldrules.observability.logger import get_logger

from .base_rule import BaseRule, Conditions, is_empty

logger = get_logger(__name__)

# Inline modifiers accepted after a closing delimiter, e.g. /abc/i
PATTERN_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,
}

DELIMITERS = "/#~%@!"


def compile_pattern(expression: str) -> Pattern:
    """
    Compile a pattern, accepting the delimited form ``/body/flags``.

    Args:
        expression: Bare pattern (``^[0-9]+$``) or delimited pattern
                    (``/^[0-9]+$/i``, ``#^a#``)

    Returns:
        The compiled pattern

    Raises:
        re.error: If the pattern does not compile
    """
    if len(expression) >= 2 and expression[0] in DELIMITERS:
        end = expression.rfind(expression[0])
        modifiers = expression[end + 1:]

        if end > 0 and all(flag in PATTERN_FLAGS for flag in modifiers):
            flags = 0
            for flag in modifiers:
                flags |= PATTERN_FLAGS[flag]
            return re.compile(expression[1:end], flags)

    return re.compile(expression)


class RegExp(BaseRule):
    """
    Validates that a field value matches a regular expression pattern.

    Parameters:
    - regexp: Pattern (string, delimited string, or compiled Pattern)
    - message: Optional custom error message

    The pattern is searched anywhere in the value; anchor it with ``^``/``$``
    for whole-value matches. A missing, empty or uncompilable pattern turns
    the rule into a no-op.
    """

    default_message = "Regular expression did not match."

    def __init__(self, conditions: Conditions | None = None):
        super().__init__(conditions)
        self.pattern: Pattern | None = None

        expression = self._conditions.get("regexp")
        if not expression:
            return

        if isinstance(expression, Pattern):
            self.pattern = expression
            return

        try:
            self.pattern = compile_pattern(str(expression))
        except re.error as e:
            logger.warning(
                f"Ignoring invalid regular expression {expression!r}: {e}",
                extra={"rule_type": "regexp", "regexp": str(expression)},
            )

    def check(self, value: Any) -> str | None:
        # Allow empty values (use NotBlank for mandatory fields)
        if is_empty(value) or self.pattern is None:
            return None

        if self.pattern.search(str(value)):
            return None
        return self._message(self.default_message)

    @property
    def rule_type(self) -> str:
        return "regexp"
