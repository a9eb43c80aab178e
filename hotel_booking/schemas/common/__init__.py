from hotel_booking.schemas.common.base import BaseSchema, Money
from hotel_booking.schemas.common.pagination import PaginatedResponse, PaginationMeta
from hotel_booking.schemas.common.response import ErrorDetail, ErrorResponse, HealthResponse, SuccessResponse

__all__ = [
    "BaseSchema",
    "Money",
    "PaginatedResponse",
    "PaginationMeta",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "SuccessResponse",
]
