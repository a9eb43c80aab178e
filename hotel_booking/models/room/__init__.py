from hotel_booking.models.room.room import Room
from hotel_booking.models.room.room_type import RoomType

__all__ = ["Room", "RoomType"]
