"""
FastAPI dependencies: database session, configuration and service factories.

Routes receive fully wired services; tests swap pieces through
``app.dependency_overrides`` (session, clock, payment processor).
"""

from datetime import date
from functools import lru_cache
from typing import Callable

from fastapi import Depends
from sqlalchemy.orm import Session

from hotel_booking.config.settings import Settings, get_settings
from hotel_booking.db.session import get_db
from hotel_booking.services.booking.booking_lifecycle_service import BookingLifecycleService
from hotel_booking.services.booking.booking_pricing_service import PricingPolicy
from hotel_booking.services.booking.booking_reference import BookingReferenceGenerator
from hotel_booking.services.booking.booking_service import BookingService
from hotel_booking.services.payment.payment_processor import PaymentProcessor, SimulatedPaymentProcessor
from hotel_booking.services.payment.payment_service import PaymentService
from hotel_booking.services.room.room_catalogue_service import RoomCatalogueService

__all__ = [
    "get_db",
    "get_today",
    "get_pricing_policy",
    "get_reference_generator",
    "get_payment_processor",
    "get_booking_service",
    "get_lifecycle_service",
    "get_payment_service",
    "get_room_catalogue_service",
]


def get_today() -> Callable[[], date]:
    """Source of the current date for date rules."""
    return date.today


def get_pricing_policy(settings: Settings = Depends(get_settings)) -> PricingPolicy:
    return PricingPolicy.from_settings(settings)


def get_reference_generator(settings: Settings = Depends(get_settings)) -> BookingReferenceGenerator:
    return BookingReferenceGenerator(prefix=settings.BOOKING_REFERENCE_PREFIX)


@lru_cache()
def _simulated_processor(decline_rate: float) -> SimulatedPaymentProcessor:
    return SimulatedPaymentProcessor(decline_rate=decline_rate)


def get_payment_processor(settings: Settings = Depends(get_settings)) -> PaymentProcessor:
    return _simulated_processor(settings.PAYMENT_DECLINE_RATE)


def get_booking_service(
    db: Session = Depends(get_db),
    pricing_policy: PricingPolicy = Depends(get_pricing_policy),
    reference_generator: BookingReferenceGenerator = Depends(get_reference_generator),
    today: Callable[[], date] = Depends(get_today),
    settings: Settings = Depends(get_settings),
) -> BookingService:
    return BookingService(
        db,
        pricing_policy,
        reference_generator=reference_generator,
        today=today,
        email_lookup_limit=settings.BOOKING_EMAIL_LOOKUP_LIMIT,
    )


def get_lifecycle_service(db: Session = Depends(get_db)) -> BookingLifecycleService:
    return BookingLifecycleService(db)


def get_payment_service(
    db: Session = Depends(get_db),
    processor: PaymentProcessor = Depends(get_payment_processor),
) -> PaymentService:
    return PaymentService(db, processor)


def get_room_catalogue_service(
    db: Session = Depends(get_db),
    pricing_policy: PricingPolicy = Depends(get_pricing_policy),
    today: Callable[[], date] = Depends(get_today),
) -> RoomCatalogueService:
    return RoomCatalogueService(db, pricing_policy, today=today)
