"""
Rule set configuration: YAML loading and programmatic building.
"""

from .rule_config import RuleConfigBuilder, RuleConfigError, RuleConfigLoader, build_rule, parse_rules

__all__ = [
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "RuleConfigError",
    "build_rule",
    "parse_rules",
]
