"""
Core booking service: booking creation and lookups.

Creation runs as one transaction: the room type row is locked first, so
concurrent attempts for the same room type serialize and the overlap
check sees every committed booking before the new one is inserted.
"""

from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import ErrorCode
from hotel_booking.core.logging import track_performance
from hotel_booking.models.base.enums import BookingStatus, PaymentStatus
from hotel_booking.models.booking.booking import AdditionalGuest, Booking
from hotel_booking.repositories.booking.booking_repository import BookingRepository
from hotel_booking.repositories.room.room_type_repository import RoomRepository, RoomTypeRepository
from hotel_booking.schemas.booking.booking_request import BookingCreateRequest
from hotel_booking.services.base.base_service import BaseService
from hotel_booking.services.base.service_result import ServiceResult
from hotel_booking.services.booking.availability_service import AvailabilityService
from hotel_booking.services.booking.booking_pricing_service import PricingPolicy
from hotel_booking.services.booking.booking_reference import BookingReferenceGenerator

# One retry with a fresh reference after a uniqueness conflict
MAX_REFERENCE_ATTEMPTS = 2

MAX_PAGE_SIZE = 100


def is_reference_collision(exc: IntegrityError) -> bool:
    return "booking_reference" in str(exc.orig)


class BookingService(BaseService[Booking, BookingRepository]):
    """
    Creates bookings and answers booking lookups.
    """

    def __init__(
        self,
        db: Session,
        pricing_policy: PricingPolicy,
        reference_generator: Optional[BookingReferenceGenerator] = None,
        today: Callable[[], date] = date.today,
        email_lookup_limit: int = 10,
    ):
        super().__init__(BookingRepository(db), db)
        self.room_type_repository = RoomTypeRepository(db)
        self.room_repository = RoomRepository(db)
        self.availability_service = AvailabilityService(db)
        self.pricing_policy = pricing_policy
        self.reference_generator = reference_generator or BookingReferenceGenerator()
        self._today = today
        self.email_lookup_limit = email_lookup_limit

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    @track_performance("create_booking")
    def create_booking(self, request: BookingCreateRequest) -> ServiceResult[Booking]:
        """
        Create a pending booking.

        Failures:
            VALIDATION_ERROR: past check-in, bad range, too many guests
            ROOM_TYPE_NOT_FOUND: unknown or inactive room type, unknown room
            ROOM_UNAVAILABLE: the stay overlaps an active booking
            INTERNAL_ERROR: persistence failure or reference exhaustion
        """
        validation = self._validate_booking_request(request)
        if validation is not None:
            return validation

        self._logger.info(
            "Creating booking",
            extra={
                "room_type": request.room_type,
                "room_id": request.room_id,
                "check_in": request.check_in.isoformat(),
                "check_out": request.check_out.isoformat(),
                "number_of_guests": request.number_of_guests,
            },
        )

        for attempt in range(1, MAX_REFERENCE_ATTEMPTS + 1):
            try:
                return self._create_booking_once(request)
            except IntegrityError as e:
                self._rollback()
                if not is_reference_collision(e):
                    return self._handle_exception(e, "create booking", request.room_type)
                if attempt < MAX_REFERENCE_ATTEMPTS:
                    self._logger.warning(
                        "Booking reference collision, retrying with a new reference",
                        extra={"attempt": attempt},
                    )
                    continue
                self._logger.error(
                    "Booking reference collision persisted after retry",
                    extra={"attempts": attempt},
                )
                return ServiceResult.internal_error("Could not allocate a unique booking reference")
            except SQLAlchemyError as e:
                return self._handle_exception(e, "create booking", request.room_type)

        return ServiceResult.internal_error("Could not allocate a unique booking reference")

    def _validate_booking_request(self, request: BookingCreateRequest) -> Optional[ServiceResult]:
        """Rules beyond the request schema's shape checks."""
        if request.check_out <= request.check_in:
            return ServiceResult.validation_failure(
                "Check-out date must be after check-in date",
                field="checkOutDate",
            )
        if request.check_in < self._today():
            return ServiceResult.validation_failure(
                "Check-in date cannot be in the past",
                field="checkInDate",
            )
        return None

    def _create_booking_once(self, request: BookingCreateRequest) -> ServiceResult[Booking]:
        room_type = self.room_type_repository.find_by_key_for_update(request.room_type)
        if room_type is None:
            return self._abort(
                ServiceResult.error_result(
                    ErrorCode.ROOM_TYPE_NOT_FOUND,
                    "Invalid room type selected",
                    details={"room_type": request.room_type},
                )
            )

        if request.room_id is not None:
            room = self.room_repository.find_in_room_type(request.room_id, room_type.id)
            if room is None:
                return self._abort(
                    ServiceResult.error_result(
                        ErrorCode.ROOM_TYPE_NOT_FOUND,
                        "Selected room does not exist for this room type",
                        details={"room_type": room_type.slug, "room_id": request.room_id},
                    )
                )

        if request.number_of_guests > room_type.max_guests:
            return self._abort(
                ServiceResult.validation_failure(
                    f"{room_type.name} accommodates at most {room_type.max_guests} guests",
                    field="numberOfGuests",
                    details={"max_guests": room_type.max_guests},
                )
            )

        availability = self.availability_service.check_availability(
            room_type.id,
            request.check_in,
            request.check_out,
            room_id=request.room_id,
        )
        if not availability.available:
            details = {"room_type": room_type.slug}
            if availability.conflicting_reference:
                details["conflicting_reference"] = availability.conflicting_reference
            return self._abort(
                ServiceResult.error_result(
                    ErrorCode.ROOM_UNAVAILABLE,
                    availability.reason or "Room is not available for the selected dates",
                    details=details,
                )
            )

        pricing = self.pricing_policy.price(
            room_type.base_price,
            request.check_in,
            request.check_out,
            currency=room_type.currency,
        ).rounded()

        booking = Booking(
            booking_reference=self.reference_generator.generate(),
            room_type=room_type,
            room_id=request.room_id,
            check_in=request.check_in,
            check_out=request.check_out,
            guest_name=request.guest_name,
            guest_email=str(request.guest_email),
            guest_phone=request.guest_phone,
            number_of_guests=request.number_of_guests,
            special_requests=request.special_requests,
            status=BookingStatus.PENDING,
            payment_status=PaymentStatus.PENDING,
            paid_amount=Decimal("0"),
            **pricing.to_dict(),
        )
        booking.additional_guests = [
            AdditionalGuest(position=position, name=guest.name, age=guest.age)
            for position, guest in enumerate(request.additional_guests)
        ]

        self.repository.add(booking)
        self.repository.add_status_history(booking, None, BookingStatus.PENDING, "Booking created")
        self._commit()

        self._logger.info(
            f"Booking {booking.booking_reference} created",
            extra={
                "booking_reference": booking.booking_reference,
                "room_type": room_type.slug,
                "nights": booking.nights,
                "total_amount": str(booking.total_amount),
            },
        )
        # Notification delivery is outside this service; the hook is the log line above
        return ServiceResult.success(
            booking,
            message="Booking created successfully! Please complete payment to confirm.",
        )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_by_reference(self, reference: str) -> ServiceResult[Booking]:
        booking = self.repository.find_by_reference(reference)
        if booking is None:
            return ServiceResult.not_found("Booking not found", reference=reference)
        return ServiceResult.success(booking)

    def list_by_guest_email(self, email: str, limit: Optional[int] = None) -> ServiceResult[List[Booking]]:
        """Most recent bookings made with an email address."""
        if not email or not email.strip():
            return ServiceResult.validation_failure("Email is required", field="email")
        bookings = self.repository.list_by_guest_email(email, limit or self.email_lookup_limit)
        return ServiceResult.success(bookings, metadata={"count": len(bookings)})

    def list_bookings(
        self,
        status: Optional[BookingStatus] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> ServiceResult[List[Booking]]:
        """Page through all bookings, newest first."""
        if page < 1:
            return ServiceResult.validation_failure("Page number must be >= 1", field="page")
        if page_size < 1 or page_size > MAX_PAGE_SIZE:
            return ServiceResult.validation_failure(
                f"Page size must be between 1 and {MAX_PAGE_SIZE}",
                field="pageSize",
            )

        bookings, total = self.repository.list_bookings(
            status=status,
            offset=(page - 1) * page_size,
            limit=page_size,
        )
        return ServiceResult.success(
            bookings,
            metadata={"total": total, "page": page, "page_size": page_size},
        )
