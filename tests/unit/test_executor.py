"""
Unit tests for the validation executor.
"""

from typing import Any

import pytest

from fieldrules.core.rules import AtLeastOneOf, BaseRule, Email, Length, NotBlank, PhoneNumber, Type
from fieldrules.core.validation import RuleProvider, ValidationExecutor, normalize_rules
from fieldrules.observability.metrics import REGISTRY

pytestmark = pytest.mark.unit


class CountingRule(BaseRule):
    """Rule that records how often it was checked."""

    def __init__(self, passes: bool = True):
        super().__init__()
        self.passes = passes
        self.calls = 0

    def check(self, value: Any) -> str | None:
        self.calls += 1
        return None if self.passes else "counting rule failed"

    @property
    def rule_type(self) -> str:
        return "counting"


class DuckRule:
    """Rule-shaped object that does not inherit from BaseRule."""

    def validate(self, value):
        return value == "duck"

    def get_error(self):
        return "{{ key }} should be a duck, not {{ value }}"


class StaticProvider(RuleProvider):
    """Provider returning a fixed rule set."""

    def __init__(self, rules):
        self.rules = rules

    def get_rules(self):
        return self.rules


class TestValidationExecutor:
    """Tests for ValidationExecutor.validate"""

    def test_blank_name_and_bad_email(self, executor):
        """Test each failing field gets its rule's default message"""
        errors = executor.validate(
            {"name": "", "email": "bad"},
            {"name": NotBlank(), "email": Email()},
        )

        assert errors == {
            "name": "This value should not be blank",
            "email": "This value is not a valid email address.",
        }

    def test_first_failing_rule_wins(self, executor):
        """Test only one error is reported per field"""
        errors = executor.validate(
            {"age": "abc"},
            {"age": [NotBlank(), Type({"type": "digit"})]},
        )

        assert errors == {"age": "This value should contain only digits."}

    def test_rules_after_failure_are_not_evaluated(self, executor):
        """Test evaluation stops at the first failure of a field"""
        later = CountingRule()
        executor.validate({"name": ""}, {"name": [NotBlank(), later]})
        assert later.calls == 0

    def test_all_rules_run_when_passing(self, executor):
        """Test every rule of a passing field is evaluated"""
        first, second = CountingRule(), CountingRule()
        errors = executor.validate({"name": "x"}, {"name": [first, second]})
        assert errors == {}
        assert (first.calls, second.calls) == (1, 1)

    def test_missing_field_is_skipped(self, executor):
        """Test fields absent from the input are not validated"""
        rule = CountingRule(passes=False)
        errors = executor.validate({"other": "x"}, {"name": [NotBlank(), rule]})
        assert errors == {}
        assert rule.calls == 0

    def test_none_field_is_skipped(self, executor):
        """Test fields set to None are treated as missing"""
        assert executor.validate({"name": None}, {"name": NotBlank()}) == {}

    def test_input_fields_without_rules_are_ignored(self, executor):
        """Test extra input fields are not reported"""
        assert executor.validate({"name": "x", "extra": ""}, {"name": NotBlank()}) == {}

    def test_errors_follow_rule_set_order(self, executor):
        """Test error map order follows the rule set"""
        rules = {"b": NotBlank(), "a": NotBlank(), "c": NotBlank()}
        errors = executor.validate({"a": "", "b": "", "c": ""}, rules)
        assert list(errors) == ["b", "a", "c"]

    def test_rule_bounds_are_rendered(self, executor):
        """Test condition values fill the template placeholders"""
        errors = executor.validate({"name": "ab"}, {"name": Length({"min": 3})})
        assert errors == {"name": "This value is too short. It should have 3 characters or more."}

        errors = executor.validate({"name": "abcdef"}, {"name": Length({"max": 4})})
        assert errors == {"name": "This value is too long. It should have 4 characters or less."}

    def test_key_and_value_are_rendered(self, executor):
        """Test custom messages can reference the field and its value"""
        rule = Email({"message": "{{ key }} '{{ value }}' is not an email"})
        errors = executor.validate({"email": "bad"}, {"email": rule})
        assert errors == {"email": "email 'bad' is not an email"}

    def test_key_and_value_take_precedence_over_conditions(self, executor):
        """Test a 'value' condition cannot shadow the input value"""
        rule = Length({"min": 5, "value": "shadow", "message": "{{ value }}"})
        assert executor.validate({"f": "abc"}, {"f": rule}) == {"f": "abc"}

    def test_unknown_placeholder_is_left_literal(self, executor):
        """Test unresolved placeholders pass through"""
        rule = NotBlank({"message": "{{ label }} is required"})
        assert executor.validate({"f": " "}, {"f": rule}) == {"f": "{{ label }} is required"}

    def test_composite_rule(self, executor):
        """Test AtLeastOneOf inside a rule list"""
        rules = {"contact": [NotBlank(), AtLeastOneOf([Email(), PhoneNumber()])]}
        assert executor.validate({"contact": "555-1234"}, rules) == {}
        assert executor.validate({"contact": "garbage!!"}, rules) == {
            "contact": "At least one of the conditions should be fulfilled."
        }

    def test_errors_filled_in_place(self, executor):
        """Test a caller-supplied mapping is populated and returned"""
        errors = {"existing": "kept"}
        returned = executor.validate({"name": ""}, {"name": NotBlank()}, errors)

        assert returned is errors
        assert errors == {"existing": "kept", "name": "This value should not be blank"}

    def test_idempotent(self, executor, signup_rules):
        """Test repeated runs give identical results"""
        data = {"username": "a!", "email": "nope", "phone": "call me", "zip_code": "1234"}
        first = executor.validate(data, signup_rules)
        second = executor.validate(data, signup_rules)

        assert first == second
        assert set(first) == {"username", "email", "phone", "zip_code"}

    def test_valid_signup(self, executor, signup_rules):
        """Test a fully valid form has no errors"""
        data = {"username": "jane42", "email": "jane@mail.org", "phone": "+1 555-123.4567", "zip_code": "12345"}
        assert executor.validate(data, signup_rules) == {}

    def test_duck_typed_rule(self, executor):
        """Test objects with validate/get_error work as rules"""
        assert executor.validate({"bird": "duck"}, {"bird": DuckRule()}) == {}
        assert executor.validate({"bird": "goose"}, {"bird": DuckRule()}) == {
            "bird": "bird should be a duck, not goose"
        }

    def test_duck_typed_rule_inside_composite(self, executor):
        """Test composites accept the same rule objects the executor does"""
        rules = {"bird": AtLeastOneOf([DuckRule(), Email()])}
        assert executor.validate({"bird": "duck"}, rules) == {}
        assert executor.validate({"bird": "goose"}, rules) == {
            "bird": "At least one of the conditions should be fulfilled."
        }

    def test_empty_field_name(self, executor):
        """Test an empty string is handled like any other field name"""
        assert executor.validate({"": ""}, {"": NotBlank()}) == {"": "This value should not be blank"}

        report = executor.run({"": ""}, {"": NotBlank()})
        assert report.passed is False
        assert report.errors == {"": "This value should not be blank"}

    def test_non_rule_entries_are_skipped(self, executor):
        """Test malformed rule entries do not raise"""
        errors = executor.validate({"name": "", "age": "x"}, {"name": ["not a rule", NotBlank()], "age": 42})
        assert errors == {"name": "This value should not be blank"}

    def test_validate_provider(self, executor):
        """Test rule sets handed over by a provider"""
        provider = StaticProvider({"email": Email()})
        assert executor.validate_provider({"email": "bad"}, provider) == {
            "email": "This value is not a valid email address."
        }

    def test_shared_rules_keep_no_state(self, executor):
        """Test the executor does not touch the rules' last-error record"""
        rule = Length({"min": 3})
        executor.validate({"name": "a"}, {"name": rule})
        assert rule.get_error() == ""


class TestValidationReport:
    """Tests for ValidationExecutor.run"""

    def test_report_lists_failures(self, executor):
        """Test report contents for a failing input"""
        report = executor.run(
            {"name": "", "email": "a@b.com"},
            {"name": NotBlank(), "email": Email(), "phone": PhoneNumber()},
        )

        assert report.passed is False
        assert report.checked_fields == ["name", "email"]
        assert report.skipped_fields == ["phone"]
        assert len(report.field_errors) == 1

        error = report.field_errors[0]
        assert error.field_name == "name"
        assert error.rule_type == "not_blank"
        assert error.value == ""
        assert error.message == "This value should not be blank"

    def test_report_for_valid_input(self, executor):
        """Test report for a passing input"""
        report = executor.run({"name": "x"}, {"name": NotBlank()})
        assert report.passed is True
        assert report.errors == {}

    def test_validate_batch(self, executor):
        """Test one report per input"""
        reports = executor.validate_batch(
            [{"email": "a@b.com"}, {"email": "bad"}, {}],
            {"email": Email()},
        )
        assert [report.passed for report in reports] == [True, False, True]


class TestMetrics:
    """Tests for executor metrics"""

    def test_failures_are_counted(self, executor):
        """Test validation counters are incremented"""
        def sample(name, labels):
            return REGISTRY.get_sample_value(name, labels) or 0.0

        failed_before = sample("fieldrules_validations_total", {"status": "failed"})
        email_before = sample("fieldrules_field_failures_total", {"rule_type": "email"})

        executor.validate({"email": "bad"}, {"email": Email()})

        assert sample("fieldrules_validations_total", {"status": "failed"}) == failed_before + 1
        assert sample("fieldrules_field_failures_total", {"rule_type": "email"}) == email_before + 1


class TestNormalizeRules:
    """Tests for normalize_rules"""

    def test_single_rule(self):
        """Test a lone rule becomes a one-element list"""
        rule = NotBlank()
        assert normalize_rules(rule) == [rule]

    def test_sequences(self):
        """Test lists and tuples keep their order"""
        first, second = NotBlank(), Email()
        assert normalize_rules([first, second]) == [first, second]
        assert normalize_rules((first, second)) == [first, second]
