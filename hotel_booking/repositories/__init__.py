from hotel_booking.repositories.booking import BookingRepository
from hotel_booking.repositories.room import RoomRepository, RoomTypeRepository

__all__ = ["BookingRepository", "RoomRepository", "RoomTypeRepository"]
