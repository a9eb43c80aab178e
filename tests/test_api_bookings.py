"""API tests for booking, room type and health endpoints."""

from datetime import timedelta

import pytest

from conftest import TODAY, booking_payload, payment_payload, stay

API = "/api/v1"


def create(client, **overrides):
    response = client.post(f"{API}/bookings", json=booking_payload(**overrides))
    assert response.status_code == 201, response.json()
    return response.json()


class TestCreateBookingEndpoint:
    def test_created_booking_response(self, client):
        response = client.post(f"{API}/bookings", json=booking_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Booking created successfully! Please complete payment to confirm."
        assert body["bookingReference"].startswith("BK")
        assert body["paymentRequired"] == 668.64
        assert body["pricing"]["totalAmount"] == 668.64
        assert body["pricing"]["nights"] == 3

        booking = body["booking"]
        assert booking["bookingReference"] == body["bookingReference"]
        assert booking["roomType"] == "standard"
        assert booking["roomTypeName"] == "Standard Room"
        assert booking["checkInDate"] == stay(10, 3)[0].isoformat()
        assert booking["checkOutDate"] == stay(10, 3)[1].isoformat()
        assert booking["status"] == "pending"
        assert booking["paymentStatus"] == "pending"
        assert booking["guestEmail"] == "ana.kila@hotelguests.com"

    def test_accepts_additional_guests_and_special_requests(self, client):
        body = create(
            client,
            roomType="suite",
            numberOfGuests=3,
            specialRequests="Late arrival, around 23:00",
            additionalGuests=[{"name": "Tomas Kila", "age": 34}, {"name": "Mere Kila"}],
        )

        booking = body["booking"]
        assert booking["specialRequests"] == "Late arrival, around 23:00"
        assert booking["additionalGuests"] == [
            {"name": "Tomas Kila", "age": 34},
            {"name": "Mere Kila", "age": None},
        ]

    def test_check_out_must_follow_check_in(self, client):
        check_in = stay(10, 1)[0].isoformat()

        response = client.post(f"{API}/bookings", json=booking_payload(checkInDate=check_in, checkOutDate=check_in))

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["errors"][0]["field"] == "checkOutDate"
        assert body["errors"][0]["message"] == "Check-out date must be after check-in date"

    def test_check_in_cannot_be_in_the_past(self, client):
        payload = booking_payload(
            checkInDate=(TODAY - timedelta(days=2)).isoformat(),
            checkOutDate=(TODAY + timedelta(days=1)).isoformat(),
        )

        response = client.post(f"{API}/bookings", json=payload)

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "checkInDate", "message": "Check-in date cannot be in the past"}
        ]

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"guestEmail": "not-an-email"}, "guestEmail"),
            ({"numberOfGuests": 0}, "numberOfGuests"),
            ({"specialRequests": "x" * 501}, "specialRequests"),
        ],
    )
    def test_invalid_fields(self, client, overrides, field):
        response = client.post(f"{API}/bookings", json=booking_payload(**overrides))

        assert response.status_code == 400
        assert [error["field"] for error in response.json()["errors"]] == [field]

    def test_missing_field(self, client):
        payload = booking_payload()
        del payload["guestName"]

        response = client.post(f"{API}/bookings", json=payload)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "guestName"

    def test_unknown_room_type(self, client):
        response = client.post(f"{API}/bookings", json=booking_payload(roomType="penthouse"))

        assert response.status_code == 404
        assert response.json()["error_code"] == "ROOM_TYPE_NOT_FOUND"
        assert response.json()["message"] == "Invalid room type selected"

    def test_double_booking_is_a_conflict(self, client):
        first = create(client)

        response = client.post(f"{API}/bookings", json=booking_payload())

        assert response.status_code == 409
        body = response.json()
        assert body["error_code"] == "ROOM_UNAVAILABLE"
        assert body["details"]["conflicting_reference"] == first["bookingReference"]

    def test_too_many_guests(self, client):
        response = client.post(f"{API}/bookings", json=booking_payload(numberOfGuests=5))

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "numberOfGuests"


class TestBookingLookupEndpoints:
    def test_get_by_path(self, client):
        created = create(client)

        response = client.get(f"{API}/bookings/{created['bookingReference']}")

        assert response.status_code == 200
        assert response.json()["booking"]["id"] == created["booking"]["id"]

    def test_get_by_reference_query(self, client):
        created = create(client)

        response = client.get(f"{API}/bookings", params={"reference": created["bookingReference"]})

        assert response.status_code == 200
        assert response.json()["booking"]["bookingReference"] == created["bookingReference"]

    def test_unknown_reference(self, client):
        response = client.get(f"{API}/bookings/BK0000000000000XXXXX")

        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"
        assert response.json()["message"] == "Booking not found"

    def test_get_by_email(self, client):
        create(client)
        create(client, roomType="deluxe")

        response = client.get(f"{API}/bookings", params={"email": "Ana.Kila@hotelguests.com"})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 2
        assert {b["roomType"] for b in body["bookings"]} == {"standard", "deluxe"}

    def test_paginated_listing(self, client):
        for slug in ("standard", "deluxe", "suite"):
            create(client, roomType=slug)

        response = client.get(f"{API}/bookings", params={"page": 2, "pageSize": 2})

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 1
        assert body["pagination"] == {
            "page": 2,
            "pageSize": 2,
            "totalItems": 3,
            "totalPages": 2,
            "hasNext": False,
            "hasPrevious": True,
        }

    def test_listing_filtered_by_status(self, client):
        kept = create(client)
        dropped = create(client, roomType="deluxe")
        client.post(f"{API}/bookings/{dropped['bookingReference']}/cancel")

        response = client.get(f"{API}/bookings", params={"status": "cancelled"})

        references = [b["bookingReference"] for b in response.json()["data"]]
        assert references == [dropped["bookingReference"]]
        assert kept["bookingReference"] not in references

    def test_page_size_is_bounded(self, client):
        response = client.get(f"{API}/bookings", params={"pageSize": 500})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"


class TestLifecycleEndpoints:
    def _confirmed(self, client):
        created = create(client)
        response = client.post(f"{API}/payment", json=payment_payload(created["bookingReference"]))
        assert response.status_code == 200, response.json()
        return created["bookingReference"]

    def test_check_in_and_out(self, client):
        reference = self._confirmed(client)

        checked_in = client.post(f"{API}/bookings/{reference}/check-in")
        checked_out = client.post(f"{API}/bookings/{reference}/check-out")

        assert checked_in.status_code == 200
        assert checked_in.json()["booking"]["status"] == "checkedIn"
        assert checked_in.json()["booking"]["checkedInAt"] is not None
        assert checked_out.json()["booking"]["status"] == "checkedOut"
        assert checked_out.json()["message"] == "Guest checked out successfully"

    def test_check_in_of_unpaid_booking_is_a_conflict(self, client):
        created = create(client)

        response = client.post(f"{API}/bookings/{created['bookingReference']}/check-in")

        assert response.status_code == 409
        assert response.json()["error_code"] == "INVALID_STATE"

    def test_cancel_with_reason(self, client):
        created = create(client)

        response = client.post(
            f"{API}/bookings/{created['bookingReference']}/cancel",
            json={"reason": "Travel plans changed"},
        )

        assert response.status_code == 200
        booking = response.json()["booking"]
        assert booking["status"] == "cancelled"
        assert booking["cancellationReason"] == "Travel plans changed"

    def test_cancelled_dates_can_be_rebooked(self, client):
        created = create(client)
        client.post(f"{API}/bookings/{created['bookingReference']}/cancel")

        response = client.post(f"{API}/bookings", json=booking_payload())

        assert response.status_code == 201

    def test_no_show(self, client):
        reference = self._confirmed(client)

        response = client.post(f"{API}/bookings/{reference}/no-show")

        assert response.status_code == 200
        assert response.json()["booking"]["status"] == "noShow"

    def test_history(self, client):
        reference = self._confirmed(client)
        client.post(f"{API}/bookings/{reference}/check-in")

        response = client.get(f"{API}/bookings/{reference}/history")

        assert response.status_code == 200
        entries = response.json()["data"]
        assert [entry["toStatus"] for entry in entries] == ["pending", "confirmed", "checkedIn"]
        assert entries[0]["fromStatus"] is None


class TestRoomTypeEndpoints:
    def test_list_room_types(self, client):
        response = client.get(f"{API}/room-types")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 4
        assert [rt["slug"] for rt in body["roomTypes"]] == ["standard", "deluxe", "suite", "presidential"]
        assert body["roomTypes"][0]["basePrice"] == 199.0
        assert body["roomTypes"][0]["maxGuests"] == 2

    def test_available_stay_is_priced(self, client):
        check_in, check_out = stay(10, 3)

        response = client.get(
            f"{API}/room-types/standard/availability",
            params={"checkIn": check_in.isoformat(), "checkOut": check_out.isoformat()},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["available"] is True
        assert body["pricing"]["totalAmount"] == 668.64
        assert body["pricing"]["depositRequired"] == 334.32

    def test_booked_stay_reports_conflict(self, client):
        created = create(client)
        check_in, check_out = stay(11, 1)

        response = client.get(
            f"{API}/room-types/standard/availability",
            params={"checkIn": check_in.isoformat(), "checkOut": check_out.isoformat()},
        )

        body = response.json()
        assert body["available"] is False
        assert body["conflictingReference"] == created["bookingReference"]
        assert body["pricing"] is None

    def test_invalid_range(self, client):
        check_in = stay(10, 1)[0].isoformat()

        response = client.get(
            f"{API}/room-types/standard/availability",
            params={"checkIn": check_in, "checkOut": check_in},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_DATE_RANGE"

    def test_unknown_room_type(self, client):
        check_in, check_out = stay(10, 1)

        response = client.get(
            f"{API}/room-types/penthouse/availability",
            params={"checkIn": check_in.isoformat(), "checkOut": check_out.isoformat()},
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "ROOM_TYPE_NOT_FOUND"


class TestInfrastructure:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_request_id_is_generated(self, client):
        response = client.get("/health")

        assert response.headers["X-Request-ID"]
        assert "X-Process-Time" in response.headers

    def test_request_id_is_propagated(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"
