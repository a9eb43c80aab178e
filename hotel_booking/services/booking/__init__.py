from hotel_booking.services.booking.availability_service import (
    AvailabilityResult,
    AvailabilityService,
    intervals_overlap,
)
from hotel_booking.services.booking.booking_lifecycle_service import BookingLifecycleService
from hotel_booking.services.booking.booking_pricing_service import (
    PricingBreakdown,
    PricingPolicy,
    calculate_pricing,
)
from hotel_booking.services.booking.booking_reference import BookingReferenceGenerator
from hotel_booking.services.booking.booking_service import BookingService

__all__ = [
    "AvailabilityResult",
    "AvailabilityService",
    "intervals_overlap",
    "BookingLifecycleService",
    "PricingBreakdown",
    "PricingPolicy",
    "calculate_pricing",
    "BookingReferenceGenerator",
    "BookingService",
]
