"""Tests for payment application and the simulated card processor."""

import random
import re
from datetime import date
from decimal import Decimal

import pytest

from conftest import NOW, TODAY, make_payment_data
from hotel_booking.core.exceptions import ErrorCode
from hotel_booking.models.base.enums import BookingStatus, PaymentStatus
from hotel_booking.services.payment.payment_processor import SimulatedPaymentProcessor
from hotel_booking.services.payment.payment_service import PaymentService


class TestApplyPayment:
    def test_successful_payment_confirms_booking(self, payment_service, create_booking):
        booking = create_booking()

        result = payment_service.apply_payment(booking.booking_reference, make_payment_data())

        assert result.is_success
        assert result.message == "Payment processed successfully! Your booking is confirmed."
        paid = result.data.booking
        assert result.data.transaction_id == "TXN_TEST_1"
        assert paid.status == BookingStatus.CONFIRMED
        assert paid.payment_status == PaymentStatus.PAID
        assert paid.paid_amount == Decimal("668.64")
        assert paid.transaction_id == "TXN_TEST_1"
        assert paid.payment_method == "card"
        assert paid.payment_processed_at == NOW

    def test_charges_the_booking_total(self, payment_service, processor, create_booking):
        booking = create_booking()

        payment_service.apply_payment(booking.booking_reference, make_payment_data())

        assert processor.charges == [Decimal("668.64")]

    def test_explicit_amount_equal_to_total_is_accepted(self, payment_service, create_booking):
        booking = create_booking()

        result = payment_service.apply_payment(
            booking.booking_reference, make_payment_data(), amount=Decimal("668.64")
        )

        assert result.is_success

    def test_records_confirmation_in_history(self, payment_service, create_booking):
        booking = create_booking()

        payment_service.apply_payment(booking.booking_reference, make_payment_data())

        history = payment_service.repository.get_status_history(booking.id)
        assert [(h.from_status, h.to_status) for h in history] == [
            (None, BookingStatus.PENDING),
            (BookingStatus.PENDING, BookingStatus.CONFIRMED),
        ]

    def test_second_payment_is_rejected(self, payment_service, processor, create_booking):
        booking = create_booking()
        payment_service.apply_payment(booking.booking_reference, make_payment_data())

        result = payment_service.apply_payment(booking.booking_reference, make_payment_data())

        assert result.error_code == ErrorCode.ALREADY_PAID
        assert result.message == "Booking is already paid"
        assert len(processor.charges) == 1

    def test_unknown_reference(self, payment_service, processor):
        result = payment_service.apply_payment("BK0000000000000XXXXX", make_payment_data())

        assert result.error_code == ErrorCode.NOT_FOUND
        assert processor.charges == []

    def test_wrong_amount_is_rejected_before_charging(self, payment_service, processor, create_booking):
        booking = create_booking()

        result = payment_service.apply_payment(
            booking.booking_reference, make_payment_data(), amount=Decimal("334.32")
        )

        assert result.error_code == ErrorCode.VALIDATION_ERROR
        assert result.error.field == "amount"
        assert processor.charges == []

    def test_cancelled_booking_cannot_be_paid(self, payment_service, lifecycle_service, create_booking):
        booking = create_booking()
        lifecycle_service.cancel(booking.booking_reference)

        result = payment_service.apply_payment(booking.booking_reference, make_payment_data())

        assert result.error_code == ErrorCode.INVALID_STATE

    def test_declined_payment_leaves_booking_unchanged(self, db_session, room_types, create_booking):
        booking = create_booking()
        service = PaymentService(
            db_session,
            SimulatedPaymentProcessor(decline_rate=1.0, rng=random.Random(1), today=lambda: TODAY),
        )

        result = service.apply_payment(booking.booking_reference, make_payment_data())

        assert result.error_code == ErrorCode.PAYMENT_DECLINED
        assert result.message == "Payment declined by bank"
        db_session.refresh(booking)
        assert booking.status == BookingStatus.PENDING
        assert booking.payment_status == PaymentStatus.PENDING
        assert booking.paid_amount == Decimal("0")
        assert booking.transaction_id is None


class TestPaymentStatus:
    def test_unpaid_booking(self, payment_service, create_booking):
        booking = create_booking()

        snapshot = payment_service.get_payment_status(booking.booking_reference).data

        assert snapshot["payment_status"] == PaymentStatus.PENDING
        assert snapshot["total_amount"] == Decimal("668.64")
        assert snapshot["transaction_id"] is None

    def test_paid_booking(self, payment_service, create_booking):
        booking = create_booking()
        payment_service.apply_payment(booking.booking_reference, make_payment_data())

        snapshot = payment_service.get_payment_status(booking.booking_reference).data

        assert snapshot["payment_status"] == PaymentStatus.PAID
        assert snapshot["paid_amount"] == Decimal("668.64")
        assert snapshot["transaction_id"] == "TXN_TEST_1"

    def test_unknown_reference(self, payment_service):
        result = payment_service.get_payment_status("BK0000000000000XXXXX")

        assert result.error_code == ErrorCode.NOT_FOUND


class TestSimulatedPaymentProcessor:
    @pytest.fixture
    def processor(self):
        return SimulatedPaymentProcessor(
            decline_rate=0.0,
            rng=random.Random(8),
            clock=lambda: 1718000000000,
            today=lambda: date(2030, 3, 15),
        )

    def test_approves_valid_card(self, processor):
        charge = processor.charge(Decimal("100.00"), "PGK", make_payment_data())

        assert charge.success
        assert charge.amount == Decimal("100.00")
        assert charge.last4 == "4242"
        assert re.match(r"^TXN_1718000000000_[0-9A-Z]{8}$", charge.transaction_id)

    @pytest.mark.parametrize("card_number", ["4242 4242 4242", "4242-4242-4242-4242", "42424242424242424"])
    def test_rejects_malformed_card_number(self, processor, card_number):
        charge = processor.charge(Decimal("100.00"), "PGK", make_payment_data(card_number=card_number))

        assert not charge.success
        assert charge.decline_reason == "Invalid card number"
        assert charge.transaction_id is None

    @pytest.mark.parametrize("cvv", ["12", "12345", "12a"])
    def test_rejects_bad_cvv(self, processor, cvv):
        charge = processor.charge(Decimal("100.00"), "PGK", make_payment_data(cvv=cvv))

        assert charge.decline_reason == "Invalid CVV"

    def test_rejects_expired_card(self, processor):
        charge = processor.charge(Decimal("100.00"), "PGK", make_payment_data(expiry_month=2, expiry_year=2030))

        assert charge.decline_reason == "Card expired"

    def test_card_expiring_this_month_is_valid(self, processor):
        charge = processor.charge(Decimal("100.00"), "PGK", make_payment_data(expiry_month=3, expiry_year=2030))

        assert charge.success

    def test_decline_rate_of_one_declines_everything(self):
        processor = SimulatedPaymentProcessor(decline_rate=1.0, rng=random.Random(8))

        charge = processor.charge(Decimal("100.00"), "PGK", make_payment_data())

        assert charge.decline_reason == "Payment declined by bank"

    def test_card_number_is_masked_in_repr(self):
        details = make_payment_data()

        assert "4242 4242 4242 4242" not in repr(details)
        assert repr(details).startswith("PaymentData(card=****4242")
