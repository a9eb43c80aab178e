"""
Room catalogue schemas.
"""

from __future__ import annotations

from datetime import date as Date
from typing import List, Optional

from pydantic import Field

from hotel_booking.schemas.booking.booking_response import PricingResponse
from hotel_booking.schemas.common.base import BaseSchema, Money

__all__ = [
    "RoomTypeResponse",
    "RoomTypeListResponse",
    "AvailabilityResponse",
]


class RoomTypeResponse(BaseSchema):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    base_price: Money
    weekend_price: Optional[Money] = None
    holiday_price: Optional[Money] = None
    currency: str
    max_guests: int
    total_rooms: int
    sort_order: int


class RoomTypeListResponse(BaseSchema):
    success: bool = True
    count: int
    room_types: List[RoomTypeResponse]


class AvailabilityResponse(BaseSchema):
    """Availability of a room type (or one of its rooms) for a stay."""

    success: bool = True
    available: bool
    room_type: str
    room_id: Optional[str] = None
    check_in: Date = Field(..., alias="checkInDate")
    check_out: Date = Field(..., alias="checkOutDate")
    conflicting_reference: Optional[str] = None
    reason: Optional[str] = None
    pricing: Optional[PricingResponse] = None
