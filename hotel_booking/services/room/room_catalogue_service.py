"""
Room catalogue service: room type listing and availability quotes.
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import ErrorCode
from hotel_booking.models.room.room_type import RoomType
from hotel_booking.repositories.room.room_type_repository import RoomTypeRepository
from hotel_booking.services.base.base_service import BaseService
from hotel_booking.services.base.service_result import ServiceResult
from hotel_booking.services.booking.availability_service import AvailabilityResult, AvailabilityService
from hotel_booking.services.booking.booking_pricing_service import PricingBreakdown, PricingPolicy


@dataclass
class StayQuote:
    room_type: RoomType
    availability: AvailabilityResult
    pricing: Optional[PricingBreakdown] = None


class RoomCatalogueService(BaseService[RoomType, RoomTypeRepository]):
    """Read side of the room catalogue."""

    def __init__(
        self,
        db: Session,
        pricing_policy: PricingPolicy,
        today: Callable[[], date] = date.today,
    ):
        super().__init__(RoomTypeRepository(db), db)
        self.availability_service = AvailabilityService(db)
        self.pricing_policy = pricing_policy
        self._today = today

    def list_room_types(self) -> ServiceResult[List[RoomType]]:
        room_types = self.repository.list_active()
        return ServiceResult.success(room_types, metadata={"count": len(room_types)})

    def quote_stay(
        self,
        slug: str,
        check_in: date,
        check_out: date,
        room_id: Optional[str] = None,
    ) -> ServiceResult[StayQuote]:
        """Availability of a room type for a stay, with a price when it can be booked."""
        if check_out <= check_in:
            return ServiceResult.error_result(
                ErrorCode.INVALID_DATE_RANGE,
                "Check-out date must be after check-in date",
                details={"start_date": check_in.isoformat(), "end_date": check_out.isoformat()},
            )
        if check_in < self._today():
            return ServiceResult.validation_failure("Check-in date cannot be in the past", field="checkIn")

        room_type = self.repository.find_by_slug(slug)
        if room_type is None:
            return ServiceResult.error_result(
                ErrorCode.ROOM_TYPE_NOT_FOUND,
                "Invalid room type selected",
                details={"room_type": slug},
            )

        availability = self.availability_service.check_availability(
            room_type.id, check_in, check_out, room_id=room_id
        )
        pricing = None
        if availability.available:
            pricing = self.pricing_policy.price(
                room_type.base_price, check_in, check_out, currency=room_type.currency
            ).rounded()

        return ServiceResult.success(StayQuote(room_type=room_type, availability=availability, pricing=pricing))
