"""Username validation functions."""

import re

from .exceptions import ConstraintViolation
from .length import check_length

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
USERNAME_PATTERN = re.compile(r"[a-z0-9_-]+")


def validate_username(username: str) -> str:
    """Validate username format requirements.

    Requirements:
    - Between 3 and 50 characters
    - Only lowercase letters, digits, hyphens and underscores

    Args:
        username: Username to validate

    Returns:
        The validated username

    Raises:
        ConstraintViolation: If username doesn't meet the requirements

    """
    check_length(username, "Username", USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH)
    if not USERNAME_PATTERN.fullmatch(username):
        raise ConstraintViolation("Username may only contain lowercase letters, digits, hyphens and underscores")
    return username


def normalize_login_username(username: str) -> str:
    """Check the minimum length of a login username and return it lowercased.

    Login accepts any casing, so only the minimum length is enforced here.
    """
    if len(username) < USERNAME_MIN_LENGTH:
        raise ConstraintViolation(f"Username must be at least {USERNAME_MIN_LENGTH} characters")
    return username.lower()
