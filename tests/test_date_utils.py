"""Tests for the shared UTC clock helper."""

from datetime import datetime, timedelta, timezone

from hotel_booking.models.booking.booking import BookingStatusHistory
from hotel_booking.services.base.service_result import ServiceResult
from hotel_booking.utils.date_utils import now_utc


class TestNowUtc:
    def test_is_timezone_aware_utc(self):
        now = now_utc()

        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_tracks_the_wall_clock(self):
        before = datetime.now(timezone.utc)
        now = now_utc()
        after = datetime.now(timezone.utc)

        assert before <= now <= after

    def test_history_rows_default_to_now_utc(self):
        column = BookingStatusHistory.__table__.c.changed_at

        assert column.default.arg.__name__ == now_utc.__name__

    def test_service_errors_are_stamped_in_utc(self):
        result = ServiceResult.validation_failure("Invalid", field="guestName")

        assert result.error.timestamp.utcoffset() == timedelta(0)
