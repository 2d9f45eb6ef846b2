"""
AtLeastOneOf - passes when any of its nested rules passes.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from .base_rule import BaseRule


def _is_rule(candidate: Any) -> bool:
    """Nested rules only need a callable validate()."""
    return isinstance(candidate, BaseRule) or callable(getattr(candidate, "validate", None))


def _passes(rule: Any, value: Any) -> bool:
    if isinstance(rule, BaseRule):
        return rule.check(value) is None
    return bool(rule.validate(value))


class AtLeastOneOf(BaseRule):
    """
    Composite rule: logical OR over nested rules.

    Conditions may be given as:
    - an ordered sequence of rules: ``[Email(), PhoneNumber()]``
    - a mapping of integer-keyed rules plus an optional ``message`` key:
      ``{0: Email(), 1: PhoneNumber(), "message": "Give an email or a phone"}``

    Both shapes are split into ``rules`` (the nested rules, in order) and the
    message override. Besides BaseRule instances, any object with a
    ``validate(value)`` method may be nested. Every nested rule is evaluated,
    and the passes are counted; the empty-value policy is whatever the nested
    rules apply.
    """

    default_message = "At least one of the conditions should be fulfilled."

    def __init__(self, conditions: Sequence[Any] | Mapping[Any, Any] | None = None):
        if isinstance(conditions, Mapping):
            options = {name: option for name, option in conditions.items() if isinstance(name, str)}
            nested = [conditions[index] for index in sorted(k for k in conditions if isinstance(k, int))]
            named = options.pop("rules", [])
            nested.extend([named] if _is_rule(named) else named or [])
        else:
            options = {}
            nested = list(conditions or [])

        super().__init__(options)
        self.rules: tuple[Any, ...] = tuple(rule for rule in nested if _is_rule(rule))
        self._source = MappingProxyType(dict(conditions)) if isinstance(conditions, Mapping) else self.rules

    def check(self, value: Any) -> str | None:
        passed = sum(1 for rule in self.rules if _passes(rule, value))

        if passed > 0:
            return None
        return self._message(self.default_message)

    def get_conditions(self) -> Sequence[Any] | Mapping[Any, Any]:
        """Return the conditions as given at construction."""
        return self._source

    def template_variables(self) -> dict[str, Any]:
        # Nested rule options are not exposed to the composite's message
        return {}

    @property
    def rule_type(self) -> str:
        return "at_least_one_of"
