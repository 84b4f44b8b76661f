"""
Server-side validation of wholesale inquiry submissions.
"""

import re
from typing import Any, Mapping

from .models import REQUIRED_FIELDS, ValidationResult, clean_value

# Deliberately permissive; matched against the whole raw value
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def find_missing_fields(data: Mapping[str, Any]) -> list[str]:
    """Required fields that are absent or blank, in declared order."""
    return [key for key in REQUIRED_FIELDS if clean_value(data.get(key)) is None]


def validate_inquiry(data: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a raw form payload.

    The email format is only checked once every required field is present.

    Args:
        data: Parsed request body

    Returns:
        ValidationResult with the ordered missing fields and email verdict
    """
    missing = find_missing_fields(data)
    if missing:
        return ValidationResult(missing_fields=missing)
    return ValidationResult(email_valid=is_valid_email(data.get("email")))
