from hotel_booking.services.room.room_catalogue_service import RoomCatalogueService, StayQuote

__all__ = ["RoomCatalogueService", "StayQuote"]
