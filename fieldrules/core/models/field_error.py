"""
FieldError model representing one failed field (ephemeral).
"""

from typing import Any

from pydantic import BaseModel


class FieldError(BaseModel):
    """
    A field that failed validation.

    Attributes:
        field_name: Input field that failed
        rule_type: Type identifier of the first failing rule ("length", "email", ...)
        value: The offending input value
        message: Rendered error message
    """

    field_name: str
    rule_type: str
    value: Any = None
    message: str

    class Config:
        json_schema_extra = {
            "example": {
                "field_name": "email",
                "rule_type": "email",
                "value": "bad",
                "message": "This value is not a valid email address.",
            }
        }
