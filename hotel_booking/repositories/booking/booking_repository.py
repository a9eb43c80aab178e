"""
Booking repository.

Queries for reservations: lookups by reference and guest, the overlap
query behind availability checks, listing, and the status audit trail.
"""

from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session

from hotel_booking.models.base.enums import BookingStatus
from hotel_booking.models.booking.booking import Booking, BookingStatusHistory
from hotel_booking.repositories.base.base_repository import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    """Data access for bookings and their status history."""

    def __init__(self, db: Session):
        super().__init__(Booking, db)

    # ==================== Lookups ====================

    def find_by_reference(self, reference: str) -> Optional[Booking]:
        stmt = select(Booking).where(Booking.booking_reference == reference)
        return self.db.scalar(stmt)

    def find_by_reference_for_update(self, reference: str) -> Optional[Booking]:
        """Fetch a booking and hold its row lock until the transaction ends."""
        stmt = (
            select(Booking)
            .where(Booking.booking_reference == reference)
            .with_for_update()
        )
        return self.db.scalar(stmt)

    def list_by_guest_email(self, email: str, limit: int = 10) -> List[Booking]:
        """Most recent bookings of a guest, matched case-insensitively."""
        stmt = (
            select(Booking)
            .where(func.lower(Booking.guest_email) == email.strip().lower())
            .order_by(Booking.created_at.desc(), Booking.booking_reference.desc())
            .limit(limit)
        )
        return list(self.db.scalars(stmt))

    def list_bookings(
        self,
        status: Optional[BookingStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> Tuple[List[Booking], int]:
        """
        Page through bookings, newest first.

        Returns:
            Tuple of (page items, total matching count)
        """
        conditions = []
        if status is not None:
            conditions.append(Booking.status == status)

        count_stmt = select(func.count(Booking.id)).where(*conditions)
        total = self.db.scalar(count_stmt) or 0

        stmt = (
            select(Booking)
            .where(*conditions)
            .order_by(Booking.created_at.desc(), Booking.booking_reference.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.scalars(stmt)), total

    # ==================== Availability ====================

    def find_first_overlapping(
        self,
        room_type_id: str,
        check_in: date,
        check_out: date,
        room_id: Optional[str] = None,
    ) -> Optional[Booking]:
        """
        First active booking (by check-in) whose stay overlaps [check_in, check_out).

        Without ``room_id`` every active booking of the room type counts.
        With ``room_id`` the bookings of that room count, together with
        bookings of the room type that were not assigned a room.
        """
        if room_id is None:
            scope = Booking.room_type_id == room_type_id
        else:
            scope = or_(
                Booking.room_id == room_id,
                and_(Booking.room_type_id == room_type_id, Booking.room_id.is_(None)),
            )

        stmt = (
            select(Booking)
            .where(
                scope,
                Booking.status.in_(BookingStatus.active_statuses()),
                # Half-open intervals: [a, b) and [c, d) overlap iff a < d and c < b
                Booking.check_in < check_out,
                Booking.check_out > check_in,
            )
            .order_by(Booking.check_in, Booking.booking_reference)
            .limit(1)
        )
        return self.db.scalar(stmt)

    # ==================== Status history ====================

    def add_status_history(
        self,
        booking: Booking,
        from_status: Optional[BookingStatus],
        to_status: BookingStatus,
        reason: Optional[str] = None,
    ) -> BookingStatusHistory:
        entry = BookingStatusHistory(
            from_status=from_status,
            to_status=to_status,
            reason=reason,
        )
        booking.status_history.append(entry)
        self.db.flush()
        return entry

    def get_status_history(self, booking_id: str) -> List[BookingStatusHistory]:
        stmt = (
            select(BookingStatusHistory)
            .where(BookingStatusHistory.booking_id == booking_id)
            .order_by(BookingStatusHistory.changed_at)
        )
        return list(self.db.scalars(stmt))
