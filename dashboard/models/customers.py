# dashboard/models/customers.py

from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 20

_url_adapter = TypeAdapter(AnyUrl)


class CustomerForm(BaseModel):
    """Fields of the add/edit customer form."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    image_url: Optional[str] = Field(default=None, alias="image")

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value):
        if value is None:
            raise PydanticCustomError("name_required", "Name is required")
        if not isinstance(value, str):
            raise PydanticCustomError("name_type", "Name must be a string")

        value = value.strip()
        if len(value) < NAME_MIN_LENGTH:
            raise PydanticCustomError(
                "name_too_short", "Must be {min} or more characters long", {"min": NAME_MIN_LENGTH}
            )
        if len(value) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "name_too_long", "Must be {max} or fewer characters long", {"max": NAME_MAX_LENGTH}
            )
        return value

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, value):
        if value is None:
            raise PydanticCustomError("email_required", "Email is required")
        if not isinstance(value, str):
            raise PydanticCustomError("email_type", "Email must be a string")

        value = value.strip()
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("email_invalid", "Invalid email address")
        return value

    @field_validator("image_url", mode="before")
    @classmethod
    def _check_image_url(cls, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise PydanticCustomError("image_type", "URL Image must be a string")

        value = value.strip()
        if not value:
            return None
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise PydanticCustomError("image_invalid", "Invalid url")
        return value


class CustomerOut(BaseModel):
    id: str
    name: str
    email: str
    image_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CustomerSummaryOut(CustomerOut):
    total_invoices: int
    total_pending: int
    total_paid: int
