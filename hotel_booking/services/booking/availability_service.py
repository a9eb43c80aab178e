"""
Availability checks for room types and rooms.

A stay occupies the half-open interval [check_in, check_out), so a guest
checking out on the day another checks in does not conflict.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import InvalidDateRangeError
from hotel_booking.models.booking.booking import Booking
from hotel_booking.repositories.booking.booking_repository import BookingRepository
from hotel_booking.repositories.room.room_type_repository import RoomRepository
from hotel_booking.services.base.base_service import BaseService


def intervals_overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> bool:
    """True when [start_a, end_a) and [start_b, end_b) share at least one instant."""
    return start_a < end_b and start_b < end_a


@dataclass
class AvailabilityResult:
    available: bool
    conflicting_booking: Optional[Booking] = None
    reason: Optional[str] = None

    @property
    def conflicting_reference(self) -> Optional[str]:
        if self.conflicting_booking is None:
            return None
        return self.conflicting_booking.booking_reference


class AvailabilityService(BaseService[Booking, BookingRepository]):
    """Answers whether a stay can be booked."""

    def __init__(self, db: Session):
        super().__init__(BookingRepository(db), db)
        self.room_repository = RoomRepository(db)

    def check_availability(
        self,
        room_type_id: str,
        check_in: date,
        check_out: date,
        room_id: Optional[str] = None,
    ) -> AvailabilityResult:
        """
        Check a stay against the active bookings of a room type or room.

        A conflict is reported as ``available=False``, never raised.

        Raises:
            InvalidDateRangeError: If check_out is not after check_in
        """
        if check_out <= check_in:
            raise InvalidDateRangeError(start_date=check_in.isoformat(), end_date=check_out.isoformat())

        if room_id is not None:
            room = self.room_repository.find_in_room_type(room_id, room_type_id)
            if room is None:
                return AvailabilityResult(available=False, reason="Room does not belong to this room type")
            if not room.is_offerable:
                return AvailabilityResult(
                    available=False,
                    reason=f"Room {room.room_number} is not available ({room.status.value})",
                )

        conflict = self.repository.find_first_overlapping(
            room_type_id=room_type_id,
            check_in=check_in,
            check_out=check_out,
            room_id=room_id,
        )
        if conflict is not None:
            self._logger.info(
                "Stay overlaps an existing booking",
                extra={
                    "room_type_id": room_type_id,
                    "room_id": room_id,
                    "check_in": check_in.isoformat(),
                    "check_out": check_out.isoformat(),
                    "conflicting_reference": conflict.booking_reference,
                },
            )
            return AvailabilityResult(
                available=False,
                conflicting_booking=conflict,
                reason="Room is already booked for the selected dates",
            )

        return AvailabilityResult(available=True)
