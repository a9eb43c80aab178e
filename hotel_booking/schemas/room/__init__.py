from hotel_booking.schemas.room.room_type import AvailabilityResponse, RoomTypeListResponse, RoomTypeResponse

__all__ = ["AvailabilityResponse", "RoomTypeListResponse", "RoomTypeResponse"]
