"""
Type - validates the runtime kind or the character class of a value.
"""

import io
import re
import string
from collections.abc import Callable, Iterable, Sized
from typing import Any

from fieldrules.observability.logger import get_logger

from .base_rule import BaseRule, Conditions, is_empty

logger = get_logger(__name__)

NUMERIC_STRING = re.compile(r"\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_numeric(value: Any) -> bool:
    if isinstance(value, str):
        return NUMERIC_STRING.fullmatch(value) is not None
    return isinstance(value, int | float) and not isinstance(value, bool)


def _is_object(value: Any) -> bool:
    return not isinstance(value, type(None) | bool | int | float | str | bytes | list | tuple | dict)


KIND_CHECKS: dict[str, Callable[[Any], bool]] = {
    "bool": lambda value: isinstance(value, bool),
    "boolean": lambda value: isinstance(value, bool),
    "int": _is_int,
    "integer": _is_int,
    "long": _is_int,
    "float": lambda value: isinstance(value, float),
    "double": lambda value: isinstance(value, float),
    "real": lambda value: isinstance(value, float),
    "numeric": _is_numeric,
    "string": lambda value: isinstance(value, str),
    "scalar": lambda value: isinstance(value, str | int | float | bool),
    "array": lambda value: isinstance(value, list | tuple | dict),
    "iterable": lambda value: isinstance(value, Iterable) and not isinstance(value, str | bytes),
    "countable": lambda value: isinstance(value, Sized) and not isinstance(value, str | bytes),
    "callable": callable,
    "object": _is_object,
    "resource": lambda value: isinstance(value, io.IOBase),
    "null": lambda value: value is None,
}

# ASCII character classes
CHARACTER_CLASSES: dict[str, frozenset[str]] = {
    "alnum": frozenset(string.ascii_letters + string.digits),
    "alpha": frozenset(string.ascii_letters),
    "cntrl": frozenset(chr(code) for code in [*range(32), 127]),
    "digit": frozenset(string.digits),
    "graph": frozenset(chr(code) for code in range(33, 127)),
    "lower": frozenset(string.ascii_lowercase),
    "print": frozenset(chr(code) for code in range(32, 127)),
    "punct": frozenset(string.punctuation),
    "space": frozenset(" \t\n\r\x0b\x0c"),
    "upper": frozenset(string.ascii_uppercase),
    "xdigit": frozenset(string.hexdigits),
}

CHARACTER_CLASS_MESSAGES = {
    "alnum": "This value should contain only alphanumeric characters.",
    "alpha": "This value should contain only alphabetic characters.",
    "cntrl": "This value should contain only control characters.",
    "digit": "This value should contain only digits.",
    "graph": "This value should contain only printable characters, excluding spaces.",
    "lower": "This value should contain only lowercase letters.",
    "print": "This value should contain only printable characters, including spaces.",
    "punct": "This value should contain only punctuation characters.",
    "space": "This value should contain only whitespace characters.",
    "upper": "This value should contain only uppercase letters.",
    "xdigit": "This value should contain only hexadecimal digits.",
}


def matches_character_class(value: Any, class_name: str) -> bool:
    """
    Check that every character of a value belongs to a character class.

    Integers are checked through their decimal representation; any other
    non-string value fails.
    """
    if _is_int(value):
        value = str(value)
    if not isinstance(value, str) or value == "":
        return False
    allowed = CHARACTER_CLASSES[class_name]
    return all(char in allowed for char in value)


class Type(BaseRule):
    """
    Validates that a value matches the expected type.

    Parameters:
    - type: A kind name (bool, int, float, numeric, string, array, object,
            callable, null, ...) or a character class name (alnum, alpha,
            digit, lower, upper, punct, space, xdigit, ...)
    - message: Optional custom error message

    A missing or unrecognised type name makes the rule pass every value.
    """

    def __init__(self, conditions: Conditions | None = None):
        super().__init__(conditions)

        type_name = self._conditions.get("type")
        known = isinstance(type_name, str) and (type_name in KIND_CHECKS or type_name in CHARACTER_CLASSES)
        if type_name is not None and not known:
            logger.warning(
                f"Unknown type {type_name!r}, values will not be checked",
                extra={"rule_type": "type", "type_name": str(type_name)},
            )

    def check(self, value: Any) -> str | None:
        # Skip validation for empty values (allows optional fields)
        if is_empty(value):
            return None

        type_name = self._conditions.get("type")
        if not isinstance(type_name, str):
            return None

        kind_check = KIND_CHECKS.get(type_name)
        if kind_check is not None and not kind_check(value):
            return self._message(f"This value should be of type {type_name}")

        if type_name in CHARACTER_CLASSES and not matches_character_class(value, type_name):
            return self._message(CHARACTER_CLASS_MESSAGES[type_name])

        return None

    @property
    def rule_type(self) -> str:
        return "type"
