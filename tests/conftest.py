"""Pytest configuration and shared fixtures for the hotel booking tests."""

import os

# Configure the application before any hotel_booking module reads settings
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "standard")

import random
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from itertools import count
from typing import Dict, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from hotel_booking.api import deps
from hotel_booking.db.base import Base
from hotel_booking.db.seed import seed_room_types
from hotel_booking.main import create_app
from hotel_booking.models.room.room_type import RoomType
from hotel_booking.repositories.room.room_type_repository import RoomTypeRepository
from hotel_booking.schemas.booking.booking_request import BookingCreateRequest
from hotel_booking.schemas.payment.payment_request import PaymentData
from hotel_booking.services.booking.booking_lifecycle_service import BookingLifecycleService
from hotel_booking.services.booking.booking_pricing_service import PricingPolicy
from hotel_booking.services.booking.booking_reference import BookingReferenceGenerator
from hotel_booking.services.booking.booking_service import BookingService
from hotel_booking.services.payment.payment_processor import ChargeResult, SimulatedPaymentProcessor
from hotel_booking.services.payment.payment_service import PaymentService

TODAY = date(2030, 3, 1)
NOW = datetime(2030, 3, 1, 12, 0, tzinfo=timezone.utc)

POLICY = PricingPolicy(tax_rate=Decimal("0.12"), deposit_percentage=Decimal("0.50"), currency="PGK")


def stay(start_offset: int, nights: int):
    """(check_in, check_out) starting ``start_offset`` days after TODAY."""
    check_in = TODAY + timedelta(days=start_offset)
    return check_in, check_in + timedelta(days=nights)


def make_booking_request(**overrides) -> BookingCreateRequest:
    check_in, check_out = stay(10, 3)
    data = {
        "guest_name": "Ana Kila",
        "guest_email": "ana.kila@hotelguests.com",
        "guest_phone": "+675 7000 1234",
        "check_in": check_in,
        "check_out": check_out,
        "number_of_guests": 2,
        "room_type": "standard",
    }
    data.update(overrides)
    return BookingCreateRequest(**data)


def make_payment_data(**overrides) -> PaymentData:
    data = {
        "card_number": "4242 4242 4242 4242",
        "expiry_month": 12,
        "expiry_year": TODAY.year + 2,
        "cvv": "123",
        "card_holder_name": "Ana Kila",
    }
    data.update(overrides)
    return PaymentData(**data)


def booking_payload(**overrides) -> Dict:
    """JSON body for POST /bookings, camelCase like real clients send."""
    check_in, check_out = stay(10, 3)
    payload = {
        "guestName": "Ana Kila",
        "guestEmail": "ana.kila@hotelguests.com",
        "guestPhone": "+675 7000 1234",
        "checkInDate": check_in.isoformat(),
        "checkOutDate": check_out.isoformat(),
        "numberOfGuests": 2,
        "roomType": "standard",
    }
    payload.update(overrides)
    return payload


def payment_payload(reference: str, **overrides) -> Dict:
    payload = {
        "bookingReference": reference,
        "paymentData": {
            "cardNumber": "4242424242424242",
            "expiryMonth": 12,
            "expiryYear": TODAY.year + 2,
            "cvv": "123",
            "cardHolderName": "Ana Kila",
        },
    }
    payload.update(overrides)
    return payload


def millis_clock(start: int = 1_900_000_000_000):
    """Clock that advances one millisecond per call."""
    return count(start).__next__


class ScriptedReferences:
    """Reference generator returning a fixed sequence."""

    def __init__(self, *references: str):
        self._references = list(references)
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        return self._references.pop(0)


class ApprovingProcessor:
    """Payment processor that accepts every charge."""

    def __init__(self):
        self.charges = []

    def charge(self, amount, currency, details):
        self.charges.append(amount)
        return ChargeResult(
            success=True,
            amount=amount,
            currency=currency,
            transaction_id=f"TXN_TEST_{len(self.charges)}",
            last4=details.card_number[-4:],
        )


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def room_types(db_session) -> Dict[str, RoomType]:
    seed_room_types(db_session, currency="PGK")
    return {room_type.slug: room_type for room_type in RoomTypeRepository(db_session).list_active()}


@pytest.fixture
def booking_service(db_session, room_types) -> BookingService:
    generator = BookingReferenceGenerator(clock=millis_clock(), rng=random.Random(1234))
    return BookingService(db_session, POLICY, reference_generator=generator, today=lambda: TODAY)


@pytest.fixture
def lifecycle_service(db_session, room_types) -> BookingLifecycleService:
    return BookingLifecycleService(db_session, now=lambda: NOW)


@pytest.fixture
def processor() -> ApprovingProcessor:
    return ApprovingProcessor()


@pytest.fixture
def payment_service(db_session, room_types, processor) -> PaymentService:
    return PaymentService(db_session, processor, now=lambda: NOW)


@pytest.fixture
def create_booking(booking_service):
    """Create a booking through the service and return it."""
    def _create(**overrides):
        result = booking_service.create_booking(make_booking_request(**overrides))
        assert result.is_success, result.error
        return result.data
    return _create


@pytest.fixture
def client(session_factory, room_types) -> Iterator[TestClient]:
    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[deps.get_db] = override_get_db
    app.dependency_overrides[deps.get_today] = lambda: (lambda: TODAY)
    generator = BookingReferenceGenerator(clock=millis_clock(), rng=random.Random(42))
    app.dependency_overrides[deps.get_reference_generator] = lambda: generator
    app.dependency_overrides[deps.get_payment_processor] = lambda: SimulatedPaymentProcessor(
        decline_rate=0.0,
        rng=random.Random(99),
        today=lambda: TODAY,
    )

    # Not used as a context manager: startup hooks (schema creation, seeding) stay off
    yield TestClient(app)
    app.dependency_overrides.clear()
