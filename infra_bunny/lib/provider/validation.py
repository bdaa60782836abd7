"""
Value validators for schema fields.

A validator is called with a field's (non-absent) value and returns an error message, or ``None`` if the value is
valid.
"""
from typing import Any, Callable, Iterable, Optional

Validator = Callable[[Any], Optional[str]]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def one_of(values: Iterable) -> Validator:
    allowed = list(values)

    def validate(value):
        if value not in allowed:
            return f"expected to be one of {allowed}, got {value!r}"

    return validate


def int_between(minimum: int, maximum: int) -> Validator:
    def validate(value):
        if not minimum <= value <= maximum:
            return f"expected to be in the range ({minimum} - {maximum}), got {value}"

    return validate


def int_at_least(minimum: int) -> Validator:
    def validate(value):
        if value < minimum:
            return f"expected to be at least ({minimum}), got {value}"

    return validate


def string_not_empty(value: str) -> Optional[str]:
    if not value.strip():
        return "expected a non-empty string"


def each(validator: Validator) -> Validator:
    """Apply ``validator`` to every element of a set"""

    def validate(values):
        for value in values:
            if msg := validator(value):
                return msg

    return validate


is_int32 = int_between(INT32_MIN, INT32_MAX)
