"""Shared validators package for the application.

This package contains reusable validation functions that can be used
across different features and schemas.

Available validators:
- email.py: Email address shape validation
- password.py: Password length validation
- name.py: Display name length validation
- username.py: Username format validation and login normalization
- fields.py: Annotated types that plug the validators into pydantic models
- result.py: ValidationResult wrapper and pydantic error mapping
"""

from .email import validate_email_address
from .exceptions import ConstraintViolation
from .name import validate_name
from .password import validate_password
from .result import ValidationResult, check, error_messages
from .username import normalize_login_username, validate_username

__all__ = [
    "ConstraintViolation",
    "ValidationResult",
    "check",
    "error_messages",
    "normalize_login_username",
    "validate_email_address",
    "validate_name",
    "validate_password",
    "validate_username",
]
