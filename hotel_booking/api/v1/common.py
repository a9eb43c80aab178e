"""Helpers shared by the v1 route modules."""

from typing import TypeVar

from hotel_booking.core.exceptions import exception_from_service_error
from hotel_booking.services.base.service_result import ServiceResult

T = TypeVar("T")


def ensure_success(result: ServiceResult[T]) -> T:
    """Return the result's data, raising the matching API exception on failure."""
    if not result.is_success:
        raise exception_from_service_error(result.error)
    return result.data
