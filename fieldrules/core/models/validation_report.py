"""
ValidationReport model representing the outcome of one validation pass (ephemeral).
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

from .field_error import FieldError


class ValidationReport(BaseModel):
    """
    Outcome of validating an input mapping (ephemeral, not persisted).

    Attributes:
        passed: Overall validation status
        checked_fields: Fields that had rules and were present in the input
        skipped_fields: Fields that had rules but were missing from the input
        field_errors: One entry per failed field, in rule set order
    """

    passed: bool
    checked_fields: List[str] = Field(default_factory=list)
    skipped_fields: List[str] = Field(default_factory=list)
    field_errors: List[FieldError] = Field(default_factory=list)

    @field_validator('field_errors')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies field_errors is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but field_errors is not empty")
        return v

    @property
    def errors(self) -> dict[str, str]:
        """Field name to rendered message."""
        return {error.field_name: error.message for error in self.field_errors}

    class Config:
        json_schema_extra = {
            "example": {
                "passed": False,
                "checked_fields": ["name", "email"],
                "skipped_fields": ["phone"],
                "field_errors": [
                    {
                        "field_name": "email",
                        "rule_type": "email",
                        "value": "bad",
                        "message": "This value is not a valid email address.",
                    }
                ],
            }
        }
