"""
Booking request schemas.

Shape validation for incoming booking data. Rules that depend on the
current date or on the catalogue (check-in not in the past, guest count
against the room type) are enforced by the booking service.
"""

from __future__ import annotations

from datetime import date as Date
from typing import List, Optional

from pydantic import EmailStr, Field, ValidationInfo, field_validator

from hotel_booking.schemas.common.base import BaseSchema

__all__ = [
    "AdditionalGuestInput",
    "BookingCreateRequest",
    "CancelBookingRequest",
]

SPECIAL_REQUESTS_MAX_LENGTH = 500


class AdditionalGuestInput(BaseSchema):
    """Companion travelling with the primary guest."""

    name: str = Field(..., min_length=1, max_length=255)
    age: Optional[int] = Field(default=None, ge=0, le=130)


class BookingCreateRequest(BaseSchema):
    """
    Request body for creating a booking.

    ``room_type`` accepts the room type slug (``deluxe``) or its id.
    """

    guest_name: str = Field(..., min_length=1, max_length=255, description="Full name of the guest")
    guest_email: EmailStr = Field(..., description="Email address for booking confirmations")
    guest_phone: str = Field(..., min_length=1, max_length=50, description="Contact phone number")

    check_in: Date = Field(..., alias="checkInDate", description="Arrival date")
    check_out: Date = Field(..., alias="checkOutDate", description="Departure date (exclusive)")

    number_of_guests: int = Field(..., ge=1, description="Total number of guests")
    room_type: str = Field(..., min_length=1, max_length=100, description="Room type slug or id")
    room_id: Optional[str] = Field(default=None, max_length=36, description="Specific room to book")

    special_requests: Optional[str] = Field(
        default=None,
        max_length=SPECIAL_REQUESTS_MAX_LENGTH,
        description="Free-text requests for the hotel",
    )
    additional_guests: List[AdditionalGuestInput] = Field(default_factory=list)

    @field_validator("check_out")
    @classmethod
    def validate_check_out_after_check_in(cls, v: Date, info: ValidationInfo) -> Date:
        check_in = info.data.get("check_in")
        if check_in is not None and v <= check_in:
            raise ValueError("Check-out date must be after check-in date")
        return v

    @field_validator("special_requests")
    @classmethod
    def blank_special_requests_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_validator("room_type")
    @classmethod
    def normalize_room_type(cls, v: str) -> str:
        return v.lower()


class CancelBookingRequest(BaseSchema):
    """Optional body for cancelling a booking."""

    reason: Optional[str] = Field(default=None, max_length=500)
