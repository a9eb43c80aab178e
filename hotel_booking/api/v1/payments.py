"""
Payment endpoints.
"""

from fastapi import APIRouter, Depends, Query

from hotel_booking.api.deps import get_payment_service
from hotel_booking.api.v1.common import ensure_success
from hotel_booking.schemas.booking.booking_response import BookingResponse
from hotel_booking.schemas.common.response import ErrorResponse
from hotel_booking.schemas.payment.payment_request import PaymentRequest
from hotel_booking.schemas.payment.payment_response import PaymentResponse, PaymentStatusResponse
from hotel_booking.services.payment.payment_service import PaymentService

router = APIRouter(prefix="/payment", tags=["Payments"])


@router.post(
    "",
    response_model=PaymentResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Declined, already paid or invalid amount"},
        404: {"model": ErrorResponse, "description": "Booking not found"},
        409: {"model": ErrorResponse, "description": "Booking cannot be paid in its current state"},
    },
)
def process_payment(
    request: PaymentRequest,
    service: PaymentService = Depends(get_payment_service),
) -> PaymentResponse:
    result = service.apply_payment(
        request.booking_reference,
        request.payment_data,
        method=request.payment_method,
        amount=request.amount,
    )
    outcome = ensure_success(result)
    return PaymentResponse(
        message=result.message,
        transaction_id=outcome.transaction_id,
        booking=BookingResponse.from_booking(outcome.booking),
    )


@router.get(
    "",
    response_model=PaymentStatusResponse,
    responses={404: {"model": ErrorResponse, "description": "Booking not found"}},
)
def get_payment_status(
    reference: str = Query(..., min_length=1, description="Booking reference"),
    service: PaymentService = Depends(get_payment_service),
) -> PaymentStatusResponse:
    snapshot = ensure_success(service.get_payment_status(reference))
    return PaymentStatusResponse(**snapshot)
