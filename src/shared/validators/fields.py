"""Annotated field types for composing the rules into pydantic schemas.

Example:
    class SignupForm(BaseModel):
        email: EmailAddress
        password: Password

"""

from typing import Annotated

from pydantic import AfterValidator

from .email import validate_email_address
from .name import validate_name
from .password import validate_password
from .username import normalize_login_username, validate_username

EmailAddress = Annotated[str, AfterValidator(validate_email_address)]
Password = Annotated[str, AfterValidator(validate_password)]
Name = Annotated[str, AfterValidator(validate_name)]
Username = Annotated[str, AfterValidator(validate_username)]
LoginUsername = Annotated[str, AfterValidator(normalize_login_username)]
