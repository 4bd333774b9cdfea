"""
Input validation for use cases.

Each check returns None when the value is valid and a ValidationError
(422) otherwise. first_failure() raises the first error it is given, so a
use case reports exactly one problem per request.
"""

# Standard library imports
from typing import Optional

# External package imports
from email_validator import EmailNotValidError, validate_email

# Local application imports
from ..core.errors import ValidationError

MIN_TEXT_LENGTH = 5


def check_email(value: Optional[str]) -> Optional[ValidationError]:
    if not value:
        return ValidationError("E-Mail is invalid.")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return ValidationError("E-Mail is invalid.")
    return None


def check_not_empty(value: Optional[str], field: str) -> Optional[ValidationError]:
    if value is None or not value.strip():
        return ValidationError(f"{field} must not be empty")
    return None


def check_min_length(
    value: Optional[str], field: str, minimum: int = MIN_TEXT_LENGTH
) -> Optional[ValidationError]:
    if value is None or len(value.strip()) < minimum:
        return ValidationError(f"{field} must contain at least {minimum} characters")
    return None


def first_failure(*results: Optional[ValidationError]) -> None:
    """Raise the first failed check, if any"""
    for result in results:
        if result is not None:
            raise result
