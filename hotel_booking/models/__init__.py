"""
Database models. Importing this package registers every table on Base.metadata.
"""

from hotel_booking.models.base import Base, BookingStatus, PaymentMethod, PaymentStatus, RoomStatus
from hotel_booking.models.booking import AdditionalGuest, Booking, BookingStatusHistory
from hotel_booking.models.room import Room, RoomType

__all__ = [
    "Base",
    "BookingStatus",
    "PaymentMethod",
    "PaymentStatus",
    "RoomStatus",
    "AdditionalGuest",
    "Booking",
    "BookingStatusHistory",
    "Room",
    "RoomType",
]
