"""
Rule provider interface.

A provider hands a ready-made rule set to the executor; how it builds the
rules (YAML, code, a database) is up to the implementation.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

from fieldrules.core.rules import BaseRule

RuleSet = Mapping[str, BaseRule | Sequence[BaseRule]]


class RuleProvider(ABC):
    """Source of a rule set: field name to one rule or an ordered list of rules."""

    @abstractmethod
    def get_rules(self) -> RuleSet:
        """Return the rule set to validate against."""
        pass
