from hotel_booking.services.payment.payment_processor import (
    ChargeResult,
    PaymentProcessor,
    SimulatedPaymentProcessor,
)
from hotel_booking.services.payment.payment_service import PaymentOutcome, PaymentService

__all__ = [
    "ChargeResult",
    "PaymentProcessor",
    "SimulatedPaymentProcessor",
    "PaymentOutcome",
    "PaymentService",
]
