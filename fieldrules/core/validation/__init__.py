"""
Validation executor, rule provider interface and error templating.
"""

from .executor import ValidationExecutor, normalize_rules
from .provider import RuleProvider, RuleSet
from .templating import render_template

__all__ = [
    "ValidationExecutor",
    "normalize_rules",
    "RuleProvider",
    "RuleSet",
    "render_template",
]
