from hotel_booking.schemas.booking.booking_request import (
    AdditionalGuestInput,
    BookingCreateRequest,
    CancelBookingRequest,
)
from hotel_booking.schemas.booking.booking_response import (
    AdditionalGuestResponse,
    BookingActionResponse,
    BookingCreateResponse,
    BookingDetailResponse,
    BookingListResponse,
    BookingResponse,
    PricingResponse,
    StatusHistoryResponse,
)

__all__ = [
    "AdditionalGuestInput",
    "BookingCreateRequest",
    "CancelBookingRequest",
    "AdditionalGuestResponse",
    "BookingActionResponse",
    "BookingCreateResponse",
    "BookingDetailResponse",
    "BookingListResponse",
    "BookingResponse",
    "PricingResponse",
    "StatusHistoryResponse",
]
