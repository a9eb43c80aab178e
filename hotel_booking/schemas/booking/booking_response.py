"""
Booking response schemas.
"""

from __future__ import annotations

from datetime import date as Date
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from hotel_booking.models.base.enums import BookingStatus, PaymentStatus
from hotel_booking.schemas.common.base import BaseSchema, Money

__all__ = [
    "PricingResponse",
    "AdditionalGuestResponse",
    "BookingResponse",
    "BookingCreateResponse",
    "BookingDetailResponse",
    "BookingListResponse",
    "BookingActionResponse",
    "StatusHistoryResponse",
]


class PricingResponse(BaseSchema):
    """Price breakdown of a stay, rounded to cents."""

    base_rate: Money
    nights: int
    subtotal: Money
    taxes: Money
    total_amount: Money
    deposit_required: Money
    remaining_amount: Money
    tax_rate: Money
    deposit_percentage: Money
    currency: str


class AdditionalGuestResponse(BaseSchema):
    name: str
    age: Optional[int] = None


class BookingResponse(BaseSchema):
    """Booking as returned to clients."""

    id: str
    booking_reference: str
    room_type: str = Field(..., description="Room type slug")
    room_type_name: str
    room_id: Optional[str] = None
    room_number: Optional[str] = None

    check_in: Date = Field(..., alias="checkInDate")
    check_out: Date = Field(..., alias="checkOutDate")

    guest_name: str
    guest_email: str
    guest_phone: str
    number_of_guests: int
    additional_guests: List[AdditionalGuestResponse] = Field(default_factory=list)
    special_requests: Optional[str] = None

    status: BookingStatus
    payment_status: PaymentStatus
    pricing: PricingResponse

    paid_amount: Money
    transaction_id: Optional[str] = None
    payment_method: Optional[str] = None
    payment_processed_at: Optional[datetime] = None

    checked_in_at: Optional[datetime] = None
    checked_out_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_booking(cls, booking) -> "BookingResponse":
        """Build the response from a Booking ORM instance."""
        return cls(
            id=booking.id,
            booking_reference=booking.booking_reference,
            room_type=booking.room_type.slug,
            room_type_name=booking.room_type.name,
            room_id=booking.room_id,
            room_number=booking.room.room_number if booking.room else None,
            check_in=booking.check_in,
            check_out=booking.check_out,
            guest_name=booking.guest_name,
            guest_email=booking.guest_email,
            guest_phone=booking.guest_phone,
            number_of_guests=booking.number_of_guests,
            additional_guests=[
                AdditionalGuestResponse(name=guest.name, age=guest.age)
                for guest in booking.additional_guests
            ],
            special_requests=booking.special_requests,
            status=booking.status,
            payment_status=booking.payment_status,
            pricing=PricingResponse(**booking.pricing_snapshot()),
            paid_amount=booking.paid_amount,
            transaction_id=booking.transaction_id,
            payment_method=booking.payment_method,
            payment_processed_at=booking.payment_processed_at,
            checked_in_at=booking.checked_in_at,
            checked_out_at=booking.checked_out_at,
            cancelled_at=booking.cancelled_at,
            cancellation_reason=booking.cancellation_reason,
            created_at=booking.created_at,
        )


class BookingCreateResponse(BaseSchema):
    """Response for a newly created booking."""

    success: bool = True
    message: str
    booking_reference: str
    booking: BookingResponse
    pricing: PricingResponse
    payment_required: Money = Field(..., description="Amount to charge when paying for the booking")


class BookingDetailResponse(BaseSchema):
    success: bool = True
    booking: BookingResponse


class BookingListResponse(BaseSchema):
    success: bool = True
    count: int
    bookings: List[BookingResponse]


class BookingActionResponse(BaseSchema):
    """Response for a lifecycle transition."""

    success: bool = True
    message: str
    booking: BookingResponse


class StatusHistoryResponse(BaseSchema):
    from_status: Optional[BookingStatus] = None
    to_status: BookingStatus
    reason: Optional[str] = None
    changed_at: datetime
