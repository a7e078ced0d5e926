"""Validation results for callers that prefer a value over an exception."""

import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from src.config.settings import settings

from .exceptions import ConstraintViolation

logger = logging.getLogger(__name__)


class ValidationResult(BaseModel):
    """Outcome of running a rule: valid, or invalid with a fixed message."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    message: str | None = None

    @model_validator(mode="after")
    def message_only_on_failure(self) -> "ValidationResult":
        """Ensure a message is present exactly when the result is invalid."""
        if self.is_valid and self.message is not None:
            raise ValueError("A valid result cannot carry a message")
        if not self.is_valid and not self.message:
            raise ValueError("An invalid result must carry a message")
        return self

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, message=message)

    def __bool__(self) -> bool:
        return self.is_valid


def check(rule: Callable[[str], str], value: str) -> ValidationResult:
    """Run ``rule`` against ``value`` and wrap the outcome.

    Args:
        rule: A validator such as validate_email_address or validate_password
        value: Input string

    Returns:
        ValidationResult.success() if the rule accepts the value, otherwise a
        failure carrying the rule's message

    """
    try:
        rule(value)
    except ConstraintViolation as exc:
        if settings.log_failed_validations:
            # Never log the value itself, it may be a password
            logger.debug(f"Validation failed in {getattr(rule, '__name__', rule)}: {exc.message}")
        return ValidationResult.failure(exc.message)
    return ValidationResult.success()


def error_messages(exc: ValidationError) -> dict[str, str]:
    """Map a pydantic ValidationError to ``{field: message}``.

    Rule failures keep their fixed message (without pydantic's "Value error, "
    prefix). Other errors use pydantic's own message. Only the first error of
    each field is kept.
    """
    messages: dict[str, str] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "__root__"
        if field in messages:
            continue
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, ConstraintViolation):
            messages[field] = cause.message
        else:
            messages[field] = error["msg"]
    return messages
