"""
API v1 router: aggregates the versioned endpoints.
"""
from fastapi import APIRouter

from hotel_booking.api.v1 import bookings, payments, room_types

router = APIRouter()

router.include_router(bookings.router)
router.include_router(payments.router)
router.include_router(room_types.router)
