"""
Booking lifecycle transitions after creation.

    pending   -> confirmed   (payment, see PaymentService)
    confirmed -> checkedIn   -> checkedOut
    confirmed -> noShow
    pending | confirmed -> cancelled

Each transition locks the booking row, writes a status history entry
and commits.
"""

from datetime import datetime
from typing import Callable, FrozenSet, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import ErrorCode
from hotel_booking.core.logging import track_performance
from hotel_booking.models.base.enums import BookingStatus, PaymentStatus
from hotel_booking.models.booking.booking import Booking, BookingStatusHistory
from hotel_booking.repositories.booking.booking_repository import BookingRepository
from hotel_booking.services.base.base_service import BaseService
from hotel_booking.services.base.service_result import ServiceResult
from hotel_booking.utils.date_utils import now_utc


TRANSITION_MESSAGES = {
    BookingStatus.CHECKED_IN: "Guest checked in successfully",
    BookingStatus.CHECKED_OUT: "Guest checked out successfully",
    BookingStatus.CANCELLED: "Booking cancelled successfully",
    BookingStatus.NO_SHOW: "Booking marked as no-show",
}


class BookingLifecycleService(BaseService[Booking, BookingRepository]):
    """Check-in, check-out, cancellation and no-show handling."""

    def __init__(self, db: Session, now: Callable[[], datetime] = now_utc):
        super().__init__(BookingRepository(db), db)
        self._now = now

    @track_performance("check_in")
    def check_in(self, reference: str) -> ServiceResult[Booking]:
        def apply(booking: Booking) -> None:
            booking.checked_in_at = self._now()

        return self._transition(
            reference,
            allowed_from=frozenset({BookingStatus.CONFIRMED}),
            to_status=BookingStatus.CHECKED_IN,
            apply=apply,
            reason="Guest checked in",
        )

    @track_performance("check_out")
    def check_out(self, reference: str) -> ServiceResult[Booking]:
        def apply(booking: Booking) -> None:
            booking.checked_out_at = self._now()

        return self._transition(
            reference,
            allowed_from=frozenset({BookingStatus.CHECKED_IN}),
            to_status=BookingStatus.CHECKED_OUT,
            apply=apply,
            reason="Guest checked out",
        )

    @track_performance("cancel_booking")
    def cancel(self, reference: str, reason: Optional[str] = None) -> ServiceResult[Booking]:
        """Cancel a booking that has not started; a paid booking is marked refunded."""
        def apply(booking: Booking) -> None:
            booking.cancelled_at = self._now()
            booking.cancellation_reason = reason
            if booking.payment_status == PaymentStatus.PAID:
                booking.payment_status = PaymentStatus.REFUNDED

        return self._transition(
            reference,
            allowed_from=frozenset({BookingStatus.PENDING, BookingStatus.CONFIRMED}),
            to_status=BookingStatus.CANCELLED,
            apply=apply,
            reason=reason or "Booking cancelled",
        )

    @track_performance("mark_no_show")
    def mark_no_show(self, reference: str) -> ServiceResult[Booking]:
        return self._transition(
            reference,
            allowed_from=frozenset({BookingStatus.CONFIRMED}),
            to_status=BookingStatus.NO_SHOW,
            apply=None,
            reason="Guest did not arrive",
        )

    def get_status_history(self, reference: str) -> ServiceResult[List[BookingStatusHistory]]:
        booking = self.repository.find_by_reference(reference)
        if booking is None:
            return ServiceResult.not_found("Booking not found", reference=reference)
        return ServiceResult.success(self.repository.get_status_history(booking.id))

    def _transition(
        self,
        reference: str,
        allowed_from: FrozenSet[BookingStatus],
        to_status: BookingStatus,
        apply: Optional[Callable[[Booking], None]],
        reason: str,
    ) -> ServiceResult[Booking]:
        try:
            booking = self.repository.find_by_reference_for_update(reference)
            if booking is None:
                return self._abort(ServiceResult.not_found("Booking not found", reference=reference))

            from_status = booking.status
            if from_status not in allowed_from:
                return self._abort(
                    ServiceResult.error_result(
                        ErrorCode.INVALID_STATE,
                        f"Cannot change booking from {from_status.value} to {to_status.value}",
                        details={
                            "reference": reference,
                            "status": from_status.value,
                            "requested_status": to_status.value,
                        },
                    )
                )

            booking.status = to_status
            if apply is not None:
                apply(booking)
            self.repository.add_status_history(booking, from_status, to_status, reason)
            self._commit()
        except SQLAlchemyError as e:
            return self._handle_exception(e, f"change booking status to {to_status.value}", reference)

        self._logger.info(
            f"Booking {reference} moved to {to_status.value}",
            extra={
                "booking_reference": reference,
                "from_status": from_status.value,
                "to_status": to_status.value,
            },
        )
        return ServiceResult.success(booking, message=TRANSITION_MESSAGES[to_status])
