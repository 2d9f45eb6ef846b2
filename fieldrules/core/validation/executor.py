"""
Validation executor for applying rule sets to input mappings.

The executor walks a rule set field by field, stops at the first failing
rule of each field, and renders that rule's error template.
"""

import time
from collections.abc import Mapping, Sequence
from typing import Any

from fieldrules.core.models import FieldError, ValidationReport
from fieldrules.core.rules import BaseRule
from fieldrules.observability.logger import get_logger
from fieldrules.observability.metrics import record_validation

from .provider import RuleProvider, RuleSet
from .templating import render_template

logger = get_logger(__name__)


def normalize_rules(field_rules: Any) -> list[Any]:
    """
    Turn a rule set entry into an ordered list of rules.

    Args:
        field_rules: A single rule or a sequence of rules

    Returns:
        List of rules (a lone rule becomes a one-element list)
    """
    if isinstance(field_rules, list | tuple):
        return list(field_rules)
    return [field_rules]


class ValidationExecutor:
    """
    Applies rule sets to input mappings.

    Rules are evaluated in their declared order and the first failure of a
    field is the only one reported for it. Fields missing from the input (or
    set to None) are not validated. The executor never raises for bad rule
    configuration; a rule that cannot be applied is skipped.
    """

    def validate(
        self,
        input: Mapping[str, Any],
        rules: RuleSet,
        errors: dict[str, str] | None = None,
    ) -> dict[str, str]:
        """
        Validate input against a rule set.

        Args:
            input: Field name to value
            rules: Field name to one rule or an ordered list of rules
            errors: Optional mapping to fill in place

        Returns:
            Field name to rendered error message, for failed fields only
        """
        if errors is None:
            errors = {}

        errors.update(self.run(input, rules).errors)
        return errors

    def validate_provider(
        self,
        input: Mapping[str, Any],
        provider: RuleProvider,
        errors: dict[str, str] | None = None,
    ) -> dict[str, str]:
        """Validate input against the rule set supplied by a provider."""
        return self.validate(input, provider.get_rules(), errors)

    def run(self, input: Mapping[str, Any], rules: RuleSet) -> ValidationReport:
        """
        Validate input against a rule set and report every failed field.

        Args:
            input: Field name to value
            rules: Field name to one rule or an ordered list of rules

        Returns:
            ValidationReport with one FieldError per failed field
        """
        started = time.perf_counter()
        checked_fields = []
        skipped_fields = []
        field_errors = []

        for field_name, field_rules in rules.items():
            # Missing fields are not invalid
            if input.get(field_name) is None:
                skipped_fields.append(field_name)
                continue

            checked_fields.append(field_name)
            value = input[field_name]

            field_error = self._validate_field(field_name, value, normalize_rules(field_rules))
            if field_error is not None:
                field_errors.append(field_error)

        record_validation(
            [error.rule_type for error in field_errors],
            time.perf_counter() - started,
        )

        logger.info(
            f"Validated {len(checked_fields)} fields, {len(field_errors)} failed",
            extra={
                "checked_fields": len(checked_fields),
                "skipped_fields": len(skipped_fields),
                "failed_fields": [error.field_name for error in field_errors],
            },
        )

        return ValidationReport(
            passed=len(field_errors) == 0,
            checked_fields=checked_fields,
            skipped_fields=skipped_fields,
            field_errors=field_errors,
        )

    def validate_batch(self, inputs: Sequence[Mapping[str, Any]], rules: RuleSet) -> list[ValidationReport]:
        """
        Validate a batch of inputs against the same rule set.

        Args:
            inputs: List of input mappings

        Returns:
            List of ValidationReport objects, one per input
        """
        return [self.run(input, rules) for input in inputs]

    def _validate_field(self, field_name: str, value: Any, field_rules: list[Any]) -> FieldError | None:
        """Apply a field's rules in order and report the first failure."""
        for rule in field_rules:
            template = self._apply_rule(rule, value)
            if template is None:
                continue

            variables = dict(self._template_variables(rule))
            variables["key"] = field_name
            variables["value"] = value

            rule_type = getattr(rule, "rule_type", type(rule).__name__)
            logger.debug(
                f"Field '{field_name}' failed rule '{rule_type}'",
                extra={"field_name": field_name, "rule_type": rule_type},
            )

            # Stop validating this field after the first error
            return FieldError(
                field_name=field_name,
                rule_type=rule_type,
                value=value,
                message=render_template(template, variables),
            )

        return None

    def _apply_rule(self, rule: Any, value: Any) -> str | None:
        """Return the error template of a failing rule, None if it passes."""
        if isinstance(rule, BaseRule):
            return rule.check(value)

        # Objects that only offer validate()/get_error()
        if callable(getattr(rule, "validate", None)) and callable(getattr(rule, "get_error", None)):
            if rule.validate(value):
                return None
            return str(rule.get_error())

        logger.warning(
            f"Skipping object without a rule interface: {rule!r}",
            extra={"rule_class": type(rule).__name__},
        )
        return None

    def _template_variables(self, rule: Any) -> Mapping[str, Any]:
        template_variables = getattr(rule, "template_variables", None)
        if callable(template_variables):
            return template_variables()
        return {}
