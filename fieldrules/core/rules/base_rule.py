"""
Base rule interface for all field validation rules.

All rules inherit from BaseRule and implement check(). validate() and
get_error() are derived from it.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

Conditions = Mapping[str, Any]


def is_empty(value: Any) -> bool:
    """Return True for the values every rule except NotBlank lets through."""
    return value is None or (isinstance(value, str) and value == "")


class BaseRule(ABC):
    """
    Abstract base class for all rules.

    A rule is configured once with a conditions mapping and then applied to
    single values. Every rule honours a ``message`` condition that replaces
    its default error template.

    check() is a pure function of the value. validate() wraps it and records
    the outcome so get_error() can report the template of the latest failing
    call; share instances across threads only through check().
    """

    default_message = ""

    def __init__(self, conditions: Conditions | None = None):
        """
        Initialize rule.

        Args:
            conditions: Rule-specific options (e.g., min/max for length)
        """
        self._conditions = MappingProxyType(dict(conditions or {}))
        self._last_error: str | None = None

    @abstractmethod
    def check(self, value: Any) -> str | None:
        """
        Check a value against this rule.

        Args:
            value: The field value to check

        Returns:
            The error template if the value fails, None otherwise
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def validate(self, value: Any) -> bool:
        """
        Validate a value against this rule.

        Args:
            value: The field value to validate

        Returns:
            True if the value passes, False otherwise
        """
        self._last_error = self.check(value)
        return self._last_error is None

    def get_conditions(self) -> Conditions:
        """Return the conditions this rule was configured with."""
        return self._conditions

    def get_error(self) -> str:
        """
        Return the error template of the latest failing validate() call.

        Falls back to the custom message, then to the rule's default template
        when validate() has not failed yet.
        """
        if self._last_error is not None:
            return self._last_error
        return self._message(self.default_message)

    def template_variables(self) -> dict[str, Any]:
        """Scalar conditions, exposed to error templates as placeholders."""
        return {
            name: option
            for name, option in self._conditions.items()
            if isinstance(name, str) and isinstance(option, str | int | float | bool)
        }

    def _message(self, default: str) -> str:
        """Return the custom ``message`` condition, or the given default."""
        message = self._conditions.get("message")
        if message is None:
            return default
        return str(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(conditions={dict(self._conditions)})"
