"""
Field validation rule implementations.

Provides rules for blank checks, length bounds, type and character class
checks, regex patterns, email addresses, phone numbers, and the composite
"at least one of" rule.
"""

from .at_least_one_of import AtLeastOneOf
from .base_rule import BaseRule, Conditions, is_empty
from .email import Email
from .length import Length
from .not_blank import NotBlank
from .phone_number import PhoneNumber
from .regexp import RegExp
from .type_rule import Type

RULE_REGISTRY: dict[str, type[BaseRule]] = {
    "not_blank": NotBlank,
    "length": Length,
    "type": Type,
    "regexp": RegExp,
    "email": Email,
    "phone_number": PhoneNumber,
    "at_least_one_of": AtLeastOneOf,
}

__all__ = [
    "BaseRule",
    "Conditions",
    "is_empty",
    "NotBlank",
    "Length",
    "Type",
    "RegExp",
    "Email",
    "PhoneNumber",
    "AtLeastOneOf",
    "RULE_REGISTRY",
]
