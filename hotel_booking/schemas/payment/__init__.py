from hotel_booking.schemas.payment.payment_request import PaymentData, PaymentRequest
from hotel_booking.schemas.payment.payment_response import PaymentResponse, PaymentStatusResponse

__all__ = ["PaymentData", "PaymentRequest", "PaymentResponse", "PaymentStatusResponse"]
