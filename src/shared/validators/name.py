"""Display name validation functions."""

from .length import check_length

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50


def validate_name(name: str) -> str:
    """Validate that a display name is 2 to 50 characters long."""
    return check_length(name, "Name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)
