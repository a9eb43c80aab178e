from hotel_booking.models.booking.booking import AdditionalGuest, Booking, BookingStatusHistory

__all__ = ["AdditionalGuest", "Booking", "BookingStatusHistory"]
