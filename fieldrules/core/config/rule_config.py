"""
Rule configuration management.

Loads rule sets from YAML files and provides a builder for declaring
rule sets in code.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from fieldrules.core.rules import RULE_REGISTRY, AtLeastOneOf, BaseRule, Email, Length, NotBlank, PhoneNumber, RegExp, Type
from fieldrules.core.validation import RuleProvider

# Rules may also be referenced by class name ("NotBlank")
RULE_CLASSES = {**RULE_REGISTRY, **{cls.__name__: cls for cls in RULE_REGISTRY.values()}}


class RuleConfigError(ValueError):
    """Raised when a rule configuration document is malformed."""
    pass


def resolve_rule_class(name: Any) -> type[BaseRule]:
    """
    Look up a rule class by registry name or class name.

    Raises:
        RuleConfigError: If no rule is registered under that name
    """
    rule_class = RULE_CLASSES.get(name) if isinstance(name, str) else None
    if rule_class is None:
        raise RuleConfigError(f"Unknown rule type: {name}")
    return rule_class


def build_rule(rule_def: str | Mapping[str, Any], field_name: str) -> BaseRule:
    """
    Build a rule from its declaration.

    Args:
        rule_def: Rule name, or mapping with 'type', optional 'params'
                  (or 'parameters') and, for at_least_one_of, 'rules'
        field_name: Field the rule belongs to (for error messages)

    Returns:
        The configured rule

    Raises:
        RuleConfigError: If the declaration is invalid
    """
    if isinstance(rule_def, str):
        return resolve_rule_class(rule_def)()

    if not isinstance(rule_def, Mapping) or "type" not in rule_def:
        raise RuleConfigError(f"Rule for field '{field_name}' is missing 'type'")

    rule_class = resolve_rule_class(rule_def["type"])
    parameters = rule_def.get("params", rule_def.get("parameters")) or {}
    if not isinstance(parameters, Mapping):
        raise RuleConfigError(f"Parameters of rule '{rule_def['type']}' for field '{field_name}' must be a mapping")

    if rule_class is AtLeastOneOf:
        nested = rule_def.get("rules", [])
        if not isinstance(nested, list):
            raise RuleConfigError(f"Nested rules for field '{field_name}' must be a list")
        return AtLeastOneOf({**parameters, "rules": [build_rule(item, field_name) for item in nested]})

    return rule_class(parameters)


def parse_rules(config: Any) -> dict[str, list[BaseRule]]:
    """
    Build a rule set from a parsed configuration document.

    Args:
        config: Document with a top-level 'rules' mapping

    Returns:
        Field name to ordered list of rules

    Raises:
        RuleConfigError: If the document is invalid
    """
    if not isinstance(config, Mapping) or "rules" not in config:
        raise RuleConfigError("Configuration must contain 'rules' section")

    field_rules = config["rules"] or {}
    if not isinstance(field_rules, Mapping):
        raise RuleConfigError("'rules' section must map field names to rules")

    rules: dict[str, list[BaseRule]] = {}
    for field_name, rule_defs in field_rules.items():
        # A single declaration is shorthand for a one-rule list
        if isinstance(rule_defs, str | Mapping):
            rule_defs = [rule_defs]

        if not isinstance(rule_defs, list):
            raise RuleConfigError(f"Rules for field '{field_name}' must be a list")

        rules[str(field_name)] = [build_rule(rule_def, field_name) for rule_def in rule_defs]

    return rules


class RuleConfigLoader(RuleProvider):
    """
    Loads rule sets from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      name:
        - type: not_blank
        - type: length
          params:
            min: 2
            max: 50

      contact:
        - type: at_least_one_of
          params:
            message: "Give an email address or a phone number"
          rules:
            - type: email
            - type: phone_number
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> dict[str, list[BaseRule]]:
        """
        Load and parse the rule set from the YAML file.

        Returns:
            Field name to ordered list of rules

        Raises:
            RuleConfigError: If YAML is invalid or missing required fields
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        return parse_rules(config)

    def get_rules(self) -> dict[str, list[BaseRule]]:
        return self.load_rules()


class RuleConfigBuilder:
    """
    Programmatically build rule sets (for testing or dynamic rules).
    """

    def __init__(self):
        """Initialize empty rule set."""
        self.rules: dict[str, list[BaseRule]] = {}

    def add_rule(self, field_name: str, rule: BaseRule) -> "RuleConfigBuilder":
        """Append a rule to a field's rule list."""
        self.rules.setdefault(field_name, []).append(rule)
        return self

    def add_not_blank(self, field_name: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add a not-blank rule."""
        return self.add_rule(field_name, NotBlank(_with_message({}, message)))

    def add_length(
        self,
        field_name: str,
        min_length: int | None = None,
        max_length: int | None = None,
        message: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add a length rule."""
        params: dict[str, Any] = {}
        if min_length is not None:
            params["min"] = min_length
        if max_length is not None:
            params["max"] = max_length
        return self.add_rule(field_name, Length(_with_message(params, message)))

    def add_type(self, field_name: str, type_name: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add a type or character class rule."""
        return self.add_rule(field_name, Type(_with_message({"type": type_name}, message)))

    def add_regexp(self, field_name: str, pattern: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add a regular expression rule."""
        return self.add_rule(field_name, RegExp(_with_message({"regexp": pattern}, message)))

    def add_email(self, field_name: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add an email address rule."""
        return self.add_rule(field_name, Email(_with_message({}, message)))

    def add_phone_number(self, field_name: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add a phone number rule."""
        return self.add_rule(field_name, PhoneNumber(_with_message({}, message)))

    def add_at_least_one_of(
        self,
        field_name: str,
        rules: list[BaseRule],
        message: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add a composite rule that passes when any of the given rules passes."""
        return self.add_rule(field_name, AtLeastOneOf(_with_message({"rules": rules}, message)))

    def build(self) -> dict[str, list[BaseRule]]:
        """Build and return the rule set."""
        return self.rules


def _with_message(params: dict[str, Any], message: str | None) -> dict[str, Any]:
    if message is not None:
        params["message"] = message
    return params
