"""SQLAlchemy Base with every model registered on its metadata."""
from hotel_booking.models import (  # noqa: F401
    AdditionalGuest,
    Base,
    Booking,
    BookingStatusHistory,
    Room,
    RoomType,
)

__all__ = ["Base"]
