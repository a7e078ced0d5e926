"""Password validation functions."""

from .length import check_length

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 100


def validate_password(password: str) -> str:
    """Validate password length requirements.

    Requirements:
    - At least 6 characters
    - At most 100 characters

    Args:
        password: Password string to validate

    Returns:
        The validated password string

    Raises:
        ConstraintViolation: If password length is out of bounds

    Examples:
        >>> validate_password("secret")
        'secret'
        >>> validate_password("abc")
        Traceback (most recent call last):
        ...
        src.shared.validators.exceptions.ConstraintViolation: Password must be at least 6 characters

    """
    return check_length(password, "Password", PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH)
