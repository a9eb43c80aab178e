"""
Room catalogue endpoints.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from hotel_booking.api.deps import get_room_catalogue_service
from hotel_booking.api.v1.common import ensure_success
from hotel_booking.schemas.booking.booking_response import PricingResponse
from hotel_booking.schemas.common.response import ErrorResponse
from hotel_booking.schemas.room.room_type import AvailabilityResponse, RoomTypeListResponse, RoomTypeResponse
from hotel_booking.services.room.room_catalogue_service import RoomCatalogueService

router = APIRouter(prefix="/room-types", tags=["Room Types"])


@router.get("", response_model=RoomTypeListResponse)
def list_room_types(
    service: RoomCatalogueService = Depends(get_room_catalogue_service),
) -> RoomTypeListResponse:
    room_types = ensure_success(service.list_room_types())
    return RoomTypeListResponse(
        count=len(room_types),
        room_types=[RoomTypeResponse.model_validate(room_type) for room_type in room_types],
    )


@router.get(
    "/{slug}/availability",
    response_model=AvailabilityResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid dates"},
        404: {"model": ErrorResponse, "description": "Room type not found"},
    },
)
def check_room_type_availability(
    slug: str,
    check_in: date = Query(..., alias="checkIn"),
    check_out: date = Query(..., alias="checkOut"),
    room_id: Optional[str] = Query(None, alias="roomId"),
    service: RoomCatalogueService = Depends(get_room_catalogue_service),
) -> AvailabilityResponse:
    quote = ensure_success(service.quote_stay(slug, check_in, check_out, room_id=room_id))
    return AvailabilityResponse(
        available=quote.availability.available,
        room_type=quote.room_type.slug,
        room_id=room_id,
        check_in=check_in,
        check_out=check_out,
        conflicting_reference=quote.availability.conflicting_reference,
        reason=quote.availability.reason,
        pricing=PricingResponse(**quote.pricing.to_dict()) if quote.pricing else None,
    )
