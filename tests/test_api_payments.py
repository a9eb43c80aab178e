"""API tests for the payment endpoints."""

import random

from conftest import TODAY, booking_payload, payment_payload
from hotel_booking.api import deps
from hotel_booking.services.payment.payment_processor import SimulatedPaymentProcessor

API = "/api/v1"


def create_reference(client, **overrides):
    response = client.post(f"{API}/bookings", json=booking_payload(**overrides))
    assert response.status_code == 201, response.json()
    return response.json()["bookingReference"]


class TestProcessPayment:
    def test_payment_confirms_booking(self, client):
        reference = create_reference(client)

        response = client.post(f"{API}/payment", json=payment_payload(reference))

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Payment processed successfully! Your booking is confirmed."
        assert body["transactionId"].startswith("TXN_")
        booking = body["booking"]
        assert booking["status"] == "confirmed"
        assert booking["paymentStatus"] == "paid"
        assert booking["paidAmount"] == 668.64
        assert booking["transactionId"] == body["transactionId"]
        assert booking["paymentMethod"] == "card"

    def test_paying_twice_is_rejected(self, client):
        reference = create_reference(client)
        client.post(f"{API}/payment", json=payment_payload(reference))

        response = client.post(f"{API}/payment", json=payment_payload(reference))

        assert response.status_code == 400
        assert response.json()["error_code"] == "ALREADY_PAID"
        assert response.json()["message"] == "Booking is already paid"

    def test_unknown_booking(self, client):
        response = client.post(f"{API}/payment", json=payment_payload("BK0000000000000XXXXX"))

        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"

    def test_declined_card(self, client):
        reference = create_reference(client)
        client.app.dependency_overrides[deps.get_payment_processor] = lambda: SimulatedPaymentProcessor(
            decline_rate=1.0,
            rng=random.Random(3),
            today=lambda: TODAY,
        )

        response = client.post(f"{API}/payment", json=payment_payload(reference))

        assert response.status_code == 400
        assert response.json()["error_code"] == "PAYMENT_DECLINED"
        assert response.json()["message"] == "Payment declined by bank"
        status = client.get(f"{API}/payment", params={"reference": reference}).json()
        assert status["paymentStatus"] == "pending"

    def test_invalid_card_number(self, client):
        reference = create_reference(client)
        payload = payment_payload(reference)
        payload["paymentData"]["cardNumber"] = "1234"

        response = client.post(f"{API}/payment", json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid card number"

    def test_amount_must_match_total(self, client):
        reference = create_reference(client)

        response = client.post(f"{API}/payment", json=payment_payload(reference, amount=100))

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert response.json()["errors"][0]["field"] == "amount"

    def test_paying_the_advertised_amount_confirms_booking(self, client):
        created = client.post(f"{API}/bookings", json=booking_payload()).json()
        reference = created["bookingReference"]

        response = client.post(
            f"{API}/payment",
            json=payment_payload(reference, amount=created["paymentRequired"]),
        )

        assert response.status_code == 200
        booking = response.json()["booking"]
        assert booking["status"] == "confirmed"
        assert booking["paidAmount"] == created["paymentRequired"]

    def test_cancelled_booking_cannot_be_paid(self, client):
        reference = create_reference(client)
        client.post(f"{API}/bookings/{reference}/cancel")

        response = client.post(f"{API}/payment", json=payment_payload(reference))

        assert response.status_code == 409
        assert response.json()["error_code"] == "INVALID_STATE"

    def test_missing_card_details(self, client):
        reference = create_reference(client)
        payload = payment_payload(reference)
        del payload["paymentData"]["cvv"]

        response = client.post(f"{API}/payment", json=payload)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "paymentData.cvv"


class TestPaymentStatusEndpoint:
    def test_status_of_unpaid_booking(self, client):
        reference = create_reference(client)

        response = client.get(f"{API}/payment", params={"reference": reference})

        assert response.status_code == 200
        body = response.json()
        assert body["bookingReference"] == reference
        assert body["paymentStatus"] == "pending"
        assert body["paidAmount"] == 0
        assert body["totalAmount"] == 668.64
        assert body["currency"] == "PGK"
        assert body["transactionId"] is None

    def test_status_after_payment(self, client):
        reference = create_reference(client)
        paid = client.post(f"{API}/payment", json=payment_payload(reference)).json()

        body = client.get(f"{API}/payment", params={"reference": reference}).json()

        assert body["paymentStatus"] == "paid"
        assert body["transactionId"] == paid["transactionId"]
        assert body["paymentProcessedAt"] is not None

    def test_reference_is_required(self, client):
        response = client.get(f"{API}/payment")

        assert response.status_code == 400

    def test_unknown_reference(self, client):
        response = client.get(f"{API}/payment", params={"reference": "BK0000000000000XXXXX"})

        assert response.status_code == 404
