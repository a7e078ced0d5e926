"""Validation exceptions."""


class ConstraintViolation(ValueError):
    """Raised when a field value violates one of its constraints.

    Subclasses ValueError so pydantic reports it as a regular field error
    when the rule runs inside a model validator.
    """

    def __init__(self, message: str = "Invalid value"):
        super().__init__(message)
        self.message = message
