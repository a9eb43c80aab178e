"""
Booking endpoints: creation, lookup, listing and lifecycle transitions.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Body, Depends, Query, status

from hotel_booking.api.deps import get_booking_service, get_lifecycle_service
from hotel_booking.api.v1.common import ensure_success
from hotel_booking.models.base.enums import BookingStatus
from hotel_booking.schemas.booking.booking_request import BookingCreateRequest, CancelBookingRequest
from hotel_booking.schemas.booking.booking_response import (
    BookingActionResponse,
    BookingCreateResponse,
    BookingDetailResponse,
    BookingListResponse,
    BookingResponse,
    StatusHistoryResponse,
)
from hotel_booking.schemas.common.pagination import PaginatedResponse
from hotel_booking.schemas.common.response import ErrorResponse, SuccessResponse
from hotel_booking.services.booking.booking_lifecycle_service import BookingLifecycleService
from hotel_booking.services.booking.booking_service import BookingService

router = APIRouter(prefix="/bookings", tags=["Bookings"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    404: {"model": ErrorResponse, "description": "Booking or room type not found"},
    409: {"model": ErrorResponse, "description": "Conflict with existing bookings or booking state"},
}


@router.post(
    "",
    response_model=BookingCreateResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_booking(
    request: BookingCreateRequest,
    service: BookingService = Depends(get_booking_service),
) -> BookingCreateResponse:
    result = service.create_booking(request)
    booking = ensure_success(result)
    booking_response = BookingResponse.from_booking(booking)
    return BookingCreateResponse(
        message=result.message,
        booking_reference=booking.booking_reference,
        booking=booking_response,
        pricing=booking_response.pricing,
        payment_required=booking.total_amount,
    )


@router.get(
    "",
    response_model=Union[BookingDetailResponse, BookingListResponse, PaginatedResponse[BookingResponse]],
    responses=ERROR_RESPONSES,
)
def get_bookings(
    reference: Optional[str] = Query(None, description="Booking reference"),
    email: Optional[str] = Query(None, description="Guest email"),
    booking_status: Optional[BookingStatus] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100, alias="pageSize"),
    service: BookingService = Depends(get_booking_service),
):
    """
    Look up bookings.

    - ``reference``: the single matching booking
    - ``email``: the guest's most recent bookings
    - neither: all bookings, paginated and optionally filtered by status
    """
    if reference:
        booking = ensure_success(service.get_by_reference(reference))
        return BookingDetailResponse(booking=BookingResponse.from_booking(booking))

    if email:
        bookings = ensure_success(service.list_by_guest_email(email))
        return BookingListResponse(
            count=len(bookings),
            bookings=[BookingResponse.from_booking(b) for b in bookings],
        )

    result = service.list_bookings(status=booking_status, page=page, page_size=page_size)
    bookings = ensure_success(result)
    return PaginatedResponse[BookingResponse].create(
        items=[BookingResponse.from_booking(b) for b in bookings],
        page=page,
        page_size=page_size,
        total_items=result.metadata["total"],
    )


@router.get("/{reference}", response_model=BookingDetailResponse, responses=ERROR_RESPONSES)
def get_booking(
    reference: str,
    service: BookingService = Depends(get_booking_service),
) -> BookingDetailResponse:
    booking = ensure_success(service.get_by_reference(reference))
    return BookingDetailResponse(booking=BookingResponse.from_booking(booking))


@router.get(
    "/{reference}/history",
    response_model=SuccessResponse[List[StatusHistoryResponse]],
    responses=ERROR_RESPONSES,
)
def get_booking_history(
    reference: str,
    service: BookingLifecycleService = Depends(get_lifecycle_service),
):
    history = ensure_success(service.get_status_history(reference))
    return SuccessResponse[List[StatusHistoryResponse]].create(
        message="Booking status history",
        data=[StatusHistoryResponse.model_validate(entry) for entry in history],
    )


def _action_response(result) -> BookingActionResponse:
    booking = ensure_success(result)
    return BookingActionResponse(message=result.message, booking=BookingResponse.from_booking(booking))


@router.post("/{reference}/check-in", response_model=BookingActionResponse, responses=ERROR_RESPONSES)
def check_in_booking(
    reference: str,
    service: BookingLifecycleService = Depends(get_lifecycle_service),
) -> BookingActionResponse:
    return _action_response(service.check_in(reference))


@router.post("/{reference}/check-out", response_model=BookingActionResponse, responses=ERROR_RESPONSES)
def check_out_booking(
    reference: str,
    service: BookingLifecycleService = Depends(get_lifecycle_service),
) -> BookingActionResponse:
    return _action_response(service.check_out(reference))


@router.post("/{reference}/cancel", response_model=BookingActionResponse, responses=ERROR_RESPONSES)
def cancel_booking(
    reference: str,
    body: Optional[CancelBookingRequest] = Body(None),
    service: BookingLifecycleService = Depends(get_lifecycle_service),
) -> BookingActionResponse:
    reason = body.reason if body else None
    return _action_response(service.cancel(reference, reason))


@router.post("/{reference}/no-show", response_model=BookingActionResponse, responses=ERROR_RESPONSES)
def mark_booking_no_show(
    reference: str,
    service: BookingLifecycleService = Depends(get_lifecycle_service),
) -> BookingActionResponse:
    return _action_response(service.mark_no_show(reference))
