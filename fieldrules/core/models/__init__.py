"""
Result models for validation passes.

All models use Pydantic for runtime validation and type safety.
"""

from .field_error import FieldError
from .validation_report import ValidationReport

__all__ = [
    "FieldError",
    "ValidationReport",
]
