from hotel_booking.repositories.room.room_type_repository import RoomRepository, RoomTypeRepository

__all__ = ["RoomRepository", "RoomTypeRepository"]
