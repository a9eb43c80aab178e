"""
Enumerations shared by the booking models, schemas and services.
"""

import enum
from typing import List, Type


class RoomStatus(str, enum.Enum):
    """Housekeeping status of a physical room."""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    CLEANING = "cleaning"
    RESERVED = "reserved"

    @property
    def is_offerable(self) -> bool:
        """Rooms under maintenance cannot be sold."""
        return self is not RoomStatus.MAINTENANCE


class BookingStatus(str, enum.Enum):
    """Booking lifecycle status."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checkedIn"
    CHECKED_OUT = "checkedOut"
    CANCELLED = "cancelled"
    NO_SHOW = "noShow"

    @classmethod
    def active_statuses(cls) -> List["BookingStatus"]:
        """Statuses whose stays block the calendar."""
        return [cls.PENDING, cls.CONFIRMED, cls.CHECKED_IN]

    @property
    def is_active(self) -> bool:
        return self in BookingStatus.active_statuses()


class PaymentStatus(str, enum.Enum):
    """Payment state of a booking."""
    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"
    REFUNDED = "refunded"


class PaymentMethod(str, enum.Enum):
    """Accepted payment methods."""
    CARD = "card"


def enum_values(enum_cls: Type[enum.Enum]) -> List[str]:
    """Persist enum values (not member names) in the database."""
    return [member.value for member in enum_cls]
