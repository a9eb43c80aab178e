from hotel_booking.models.base.base_model import Base, BaseModel, TimestampModel
from hotel_booking.models.base.enums import (
    BookingStatus,
    PaymentMethod,
    PaymentStatus,
    RoomStatus,
    enum_values,
)

__all__ = [
    "Base",
    "BaseModel",
    "TimestampModel",
    "BookingStatus",
    "PaymentMethod",
    "PaymentStatus",
    "RoomStatus",
    "enum_values",
]
