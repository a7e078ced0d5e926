"""Length bound checks shared by the string rules."""

from .exceptions import ConstraintViolation


def check_length(value: str, label: str, min_length: int, max_length: int) -> str:
    """Check that ``value`` has between ``min_length`` and ``max_length`` characters.

    The minimum is checked first, so the minimum-length message wins when
    both bounds would fail.

    Args:
        value: String to check
        label: Field label used at the start of the error message
        min_length: Smallest accepted length (inclusive)
        max_length: Largest accepted length (inclusive)

    Returns:
        The unchanged value

    Raises:
        ConstraintViolation: If the length is outside the bounds

    """
    if len(value) < min_length:
        raise ConstraintViolation(f"{label} must be at least {min_length} characters")
    if len(value) > max_length:
        raise ConstraintViolation(f"{label} must be less than {max_length} characters")
    return value
