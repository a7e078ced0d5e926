"""Authentication schemas (DTOs)."""

from pydantic import BaseModel

from src.shared.validators.fields import LoginUsername, Password


# Request schemas
class LoginRequest(BaseModel):
    """Login request.

    The username is lowercased so login is case-insensitive.
    """

    username: LoginUsername
    password: Password
