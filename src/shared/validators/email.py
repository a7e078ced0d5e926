"""Email address validation functions."""

import re

from email_validator import EmailNotValidError, validate_email

from .exceptions import ConstraintViolation

INVALID_EMAIL_MESSAGE = "Invalid email address"

# Dotted ASCII hostname ending in an alphabetic top-level domain
DOMAIN_PATTERN = re.compile(r"([A-Za-z0-9][A-Za-z0-9-]*\.)+[A-Za-z]{2,}")


def validate_email_address(email: str) -> str:
    """Validate that a string has the shape of an email address.

    Uses the email-validator library (the one behind Pydantic's EmailStr)
    for syntax checks only. No DNS lookups are made, special-use domains
    such as ``.test`` or ``.local`` are accepted, and both parts must be
    ASCII. The domain must be dotted and end in an alphabetic TLD.

    Args:
        email: Email address to validate

    Returns:
        The email address exactly as given (not normalized)

    Raises:
        ConstraintViolation: If the string is not a valid email address

    """
    try:
        result = validate_email(
            email,
            check_deliverability=False,
            globally_deliverable=False,
            allow_smtputf8=False,
        )
    except EmailNotValidError as exc:
        raise ConstraintViolation(INVALID_EMAIL_MESSAGE) from exc
    if not DOMAIN_PATTERN.fullmatch(result.domain):
        raise ConstraintViolation(INVALID_EMAIL_MESSAGE)
    return email
