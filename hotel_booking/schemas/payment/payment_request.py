"""
Payment request schemas.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import Field

from hotel_booking.models.base.enums import PaymentMethod
from hotel_booking.schemas.common.base import BaseSchema

__all__ = [
    "PaymentData",
    "PaymentRequest",
]


class PaymentData(BaseSchema):
    """
    Card details submitted with a payment.

    Only presence is checked here; the payment processor decides whether
    the card itself is acceptable.
    """

    card_number: str = Field(..., min_length=1, max_length=32)
    expiry_month: int = Field(..., ge=1, le=12)
    expiry_year: int = Field(..., ge=2000, le=2100)
    cvv: str = Field(..., min_length=1, max_length=8)
    card_holder_name: str = Field(..., min_length=1, max_length=255)
    billing_address: Optional[str] = Field(default=None, max_length=500)

    def __repr__(self) -> str:
        # Never leak the card number into logs
        return f"PaymentData(card=****{self.card_number[-4:]}, holder={self.card_holder_name!r})"

    __str__ = __repr__


class PaymentRequest(BaseSchema):
    """Request body for paying a booking."""

    booking_reference: str = Field(..., min_length=1, max_length=50)
    payment_data: PaymentData
    payment_method: PaymentMethod = PaymentMethod.CARD
    amount: Optional[Decimal] = Field(default=None, gt=0, description="Defaults to the booking total")
