# dashboard/models/invoices.py

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

InvoiceStatus = Literal["pending", "paid"]
INVOICE_STATUSES = ("pending", "paid")

AMOUNT_TOO_SMALL = "Please enter an amount greater than $0."
AMOUNT_INVALID = "Please enter a valid amount."
# Largest value the INTEGER amount column holds
MAX_AMOUNT_CENTS = 2**31 - 1
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS).scaleb(-2)
AMOUNT_TOO_LARGE = "Please enter an amount no greater than $21,474,836.47."
CENT = Decimal("1")


def to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(CENT, rounding=ROUND_HALF_UP))


class InvoiceForm(BaseModel):
    """Fields of the create/edit invoice form."""

    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(alias="customerId")
    amount: Decimal
    status: InvoiceStatus

    @field_validator("customer_id", mode="before")
    @classmethod
    def _require_customer(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("customer_required", "Please select a customer.")
        return value.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("amount_required", AMOUNT_TOO_SMALL)
        if isinstance(value, bool):
            raise PydanticCustomError("amount_type", AMOUNT_INVALID)

        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise PydanticCustomError("amount_type", AMOUNT_INVALID)

        if not amount.is_finite():
            raise PydanticCustomError("amount_type", AMOUNT_INVALID)
        if amount <= 0:
            raise PydanticCustomError("amount_too_small", AMOUNT_TOO_SMALL)
        if amount > MAX_AMOUNT:
            raise PydanticCustomError("amount_too_large", AMOUNT_TOO_LARGE)

        try:
            cents = to_cents(amount)
        except InvalidOperation:
            raise PydanticCustomError("amount_type", AMOUNT_INVALID)
        # Anything that rounds down to zero cents is not a positive amount
        if cents <= 0:
            raise PydanticCustomError("amount_too_small", AMOUNT_TOO_SMALL)
        if cents > MAX_AMOUNT_CENTS:
            raise PydanticCustomError("amount_too_large", AMOUNT_TOO_LARGE)
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def _known_status(cls, value):
        if value not in INVOICE_STATUSES:
            raise PydanticCustomError(
                "status_invalid", "Please select an invoice status."
            )
        return value

    @property
    def amount_in_cents(self) -> int:
        return to_cents(self.amount)


class InvoiceOut(BaseModel):
    id: str
    customer_id: str
    customer_name: str
    customer_email: str
    amount: int
    status: InvoiceStatus
    date: date

    model_config = ConfigDict(from_attributes=True)
