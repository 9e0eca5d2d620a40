"""
Field validators for person records.

Each validator takes the field name and the raw value and returns either the
typed value or a ValidationFailure. Expected bad input never raises; the
caller decides what a failure means.
"""
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Union

CPF_PATTERN = re.compile(r"[0-9]{3}\.[0-9]{3}\.[0-9]{3}-[0-9]{2}")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
DIGITS_PATTERN = re.compile(r"[0-9]+")

# Largest value a signed 64-bit INTEGER column can hold
MAX_INT = 2**63 - 1


@dataclass(frozen=True)
class ValidationFailure:
    """Names the field and the rule it broke."""
    field: str
    rule: str
    message: str


def is_failure(result: Any) -> bool:
    return isinstance(result, ValidationFailure)


def parse_id(raw: Any, field: str = "id") -> Union[int, ValidationFailure]:
    """Parse a path identifier into a positive integer."""
    failure = ValidationFailure(field, "positive_integer", "The id must be an integer greater than zero")
    if isinstance(raw, bool):
        return failure
    if isinstance(raw, int):
        return raw if raw > 0 else failure
    if not isinstance(raw, str) or not DIGITS_PATTERN.fullmatch(raw):
        return failure
    value = int(raw)
    return value if value > 0 else failure


def validate_name(field: str, value: Any) -> Union[str, ValidationFailure]:
    if not isinstance(value, str) or not value.strip():
        return ValidationFailure(field, "non_empty_string", f"{field} is required and must be a non-empty string")
    return value


def validate_age(field: str, value: Any) -> Union[int, ValidationFailure]:
    failure = ValidationFailure(field, "positive_integer", f"{field} is required and must be an integer greater than zero")
    # bool is an int subclass; JSON true/false is not an age
    if isinstance(value, bool):
        return failure
    if isinstance(value, float):
        if not value.is_integer():
            return failure
        value = int(value)
    if not isinstance(value, int) or not 0 < value <= MAX_INT:
        return failure
    return value


def validate_cpf(field: str, value: Any) -> Union[str, ValidationFailure]:
    if not isinstance(value, str) or not CPF_PATTERN.fullmatch(value):
        return ValidationFailure(field, "cpf_format", f"{field} must use the format XXX.XXX.XXX-XX")
    return value


def validate_crm(field: str, value: Any) -> Union[str, ValidationFailure]:
    if not isinstance(value, str) or not DIGITS_PATTERN.fullmatch(value):
        return ValidationFailure(field, "digits_only", f"{field} is required and must contain digits only")
    return value


def validate_date(field: str, value: Any) -> Union[date, ValidationFailure]:
    """Accept only YYYY-MM-DD strings naming a real calendar day."""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return ValidationFailure(field, "date_format", f"{field} must be a string in the format YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError:
        return ValidationFailure(field, "calendar_date", f"{field} is not a valid calendar date")
