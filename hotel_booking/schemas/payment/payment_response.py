"""
Payment response schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from hotel_booking.models.base.enums import PaymentStatus
from hotel_booking.schemas.booking.booking_response import BookingResponse
from hotel_booking.schemas.common.base import BaseSchema, Money

__all__ = [
    "PaymentResponse",
    "PaymentStatusResponse",
]


class PaymentResponse(BaseSchema):
    success: bool = True
    message: str
    transaction_id: str
    booking: BookingResponse


class PaymentStatusResponse(BaseSchema):
    """Payment snapshot of a booking."""

    success: bool = True
    booking_reference: str
    payment_status: PaymentStatus
    paid_amount: Money
    total_amount: Money
    currency: str
    transaction_id: Optional[str] = None
    payment_method: Optional[str] = None
    payment_processed_at: Optional[datetime] = None
