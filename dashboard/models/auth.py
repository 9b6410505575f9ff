# dashboard/models/auth.py

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

# bcrypt only looks at (and newer releases refuse) longer input
BCRYPT_MAX_PASSWORD_BYTES = 72


class LoginForm(BaseModel):
    email: str
    password: str = Field(min_length=6)

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, value):
        if not isinstance(value, str):
            raise PydanticCustomError("email_type", "Email must be a string")
        try:
            validate_email(value.strip(), check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("email_invalid", "Invalid email address")
        return value.strip()

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value):
        if len(value.encode()) > BCRYPT_MAX_PASSWORD_BYTES:
            raise PydanticCustomError(
                "password_too_long",
                "Password must be at most {max} bytes",
                {"max": BCRYPT_MAX_PASSWORD_BYTES},
            )
        return value
