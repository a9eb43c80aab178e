"""
Payment application for bookings.

The booking row stays locked from lookup to commit, so two concurrent
payments for one booking cannot both reach the processor.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import ErrorCode
from hotel_booking.core.logging import track_performance
from hotel_booking.models.base.enums import BookingStatus, PaymentMethod, PaymentStatus
from hotel_booking.models.booking.booking import Booking
from hotel_booking.repositories.booking.booking_repository import BookingRepository
from hotel_booking.schemas.payment.payment_request import PaymentData
from hotel_booking.services.base.base_service import BaseService
from hotel_booking.services.base.service_result import ServiceResult
from hotel_booking.services.payment.payment_processor import PaymentProcessor
from hotel_booking.utils.date_utils import now_utc

UNPAYABLE_STATUSES = frozenset({
    BookingStatus.CANCELLED,
    BookingStatus.CHECKED_OUT,
    BookingStatus.NO_SHOW,
})


@dataclass
class PaymentOutcome:
    booking: Booking
    transaction_id: str


class PaymentService(BaseService[Booking, BookingRepository]):
    """Charges bookings through a payment processor."""

    def __init__(
        self,
        db: Session,
        processor: PaymentProcessor,
        now: Callable[[], datetime] = now_utc,
    ):
        super().__init__(BookingRepository(db), db)
        self.processor = processor
        self._now = now

    @track_performance("apply_payment")
    def apply_payment(
        self,
        booking_reference: str,
        payment_details: PaymentData,
        method: PaymentMethod = PaymentMethod.CARD,
        amount: Optional[Decimal] = None,
    ) -> ServiceResult[PaymentOutcome]:
        """
        Charge the booking total and confirm the booking.

        Failures:
            NOT_FOUND: unknown reference
            ALREADY_PAID: the booking was paid before
            INVALID_STATE: cancelled, checked-out or no-show booking
            VALIDATION_ERROR: amount other than the booking total
            PAYMENT_DECLINED: processor refused; the booking is unchanged
        """
        charge = None
        try:
            booking = self.repository.find_by_reference_for_update(booking_reference)
            if booking is None:
                return self._abort(ServiceResult.not_found("Booking not found", reference=booking_reference))

            if booking.payment_status == PaymentStatus.PAID:
                self._logger.info(
                    "Payment rejected, booking already paid",
                    extra={"booking_reference": booking_reference},
                )
                return self._abort(
                    ServiceResult.error_result(
                        ErrorCode.ALREADY_PAID,
                        "Booking is already paid",
                        details={"reference": booking_reference, "transaction_id": booking.transaction_id},
                    )
                )

            if booking.status in UNPAYABLE_STATUSES:
                return self._abort(
                    ServiceResult.error_result(
                        ErrorCode.INVALID_STATE,
                        f"Cannot take payment for a booking that is {booking.status.value}",
                        details={"reference": booking_reference, "status": booking.status.value},
                    )
                )

            total = Decimal(booking.total_amount)
            if amount is not None and Decimal(amount) != total:
                return self._abort(
                    ServiceResult.validation_failure(
                        f"Payment amount must equal the booking total of {total}",
                        field="amount",
                        details={"total_amount": str(total)},
                    )
                )

            charge = self.processor.charge(total, booking.currency, payment_details)
            if not charge.success:
                self._logger.warning(
                    f"Payment declined: {charge.decline_reason}",
                    extra={"booking_reference": booking_reference, "amount": str(total)},
                )
                return self._abort(
                    ServiceResult.error_result(
                        ErrorCode.PAYMENT_DECLINED,
                        charge.decline_reason or "Payment processing failed",
                        details={"reference": booking_reference},
                    )
                )

            from_status = booking.status
            booking.payment_status = PaymentStatus.PAID
            booking.paid_amount = total
            booking.status = BookingStatus.CONFIRMED
            booking.transaction_id = charge.transaction_id
            booking.payment_method = method.value
            booking.payment_processed_at = self._now()
            if from_status != BookingStatus.CONFIRMED:
                self.repository.add_status_history(
                    booking, from_status, BookingStatus.CONFIRMED, "Payment received"
                )
            self._commit()
        except SQLAlchemyError as e:
            # A charge that went through must be traceable even if recording it failed
            context = {"transaction_id": charge.transaction_id} if charge is not None else None
            return self._handle_exception(e, "apply payment", booking_reference, context)

        self._logger.info(
            f"Payment applied to booking {booking_reference}",
            extra={
                "booking_reference": booking_reference,
                "transaction_id": charge.transaction_id,
                "amount": str(total),
                "currency": booking.currency,
            },
        )
        return ServiceResult.success(
            PaymentOutcome(booking=booking, transaction_id=charge.transaction_id),
            message="Payment processed successfully! Your booking is confirmed.",
        )

    def get_payment_status(self, booking_reference: str) -> ServiceResult[Dict[str, Any]]:
        booking = self.repository.find_by_reference(booking_reference)
        if booking is None:
            return ServiceResult.not_found("Booking not found", reference=booking_reference)

        return ServiceResult.success({
            "booking_reference": booking.booking_reference,
            "payment_status": booking.payment_status,
            "paid_amount": booking.paid_amount,
            "total_amount": booking.total_amount,
            "currency": booking.currency,
            "transaction_id": booking.transaction_id,
            "payment_method": booking.payment_method,
            "payment_processed_at": booking.payment_processed_at,
        })
