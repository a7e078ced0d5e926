"""User schemas (DTOs)."""

from pydantic import BaseModel, field_validator

from src.shared.validators.exceptions import ConstraintViolation
from src.shared.validators.fields import EmailAddress, Name, Password, Username


# Request schemas
class UserCreateRequest(BaseModel):
    """User creation request."""

    username: Username
    email: EmailAddress
    name: Name
    password: Password
    role_id: int
    is_active: bool = True

    @field_validator("role_id")
    @classmethod
    def role_selected(cls, value: int) -> int:
        """Validate that a role was picked."""
        if value <= 0:
            raise ConstraintViolation("Role must be selected")
        return value


class UserUpdateRequest(BaseModel):
    """User update request.

    Email may be cleared. A missing or blank password means the password is
    not being changed; otherwise it is validated like on creation.
    """

    username: Username
    email: EmailAddress | None
    name: Name
    password: Password | None = None
    role_id: int
    is_active: bool

    @field_validator("password", mode="before")
    @classmethod
    def blank_password_unchanged(cls, value):
        """Treat a blank password field as not provided."""
        if value == "":
            return None
        return value
