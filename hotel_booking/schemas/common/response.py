"""
Standard API response wrappers.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import ConfigDict, Field

from hotel_booking.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "SuccessResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
]


class SuccessResponse(BaseSchema, Generic[T]):
    """Standard success response."""

    success: bool = Field(default=True, description="Success flag")
    message: str = Field(..., description="Response message")
    data: Optional[T] = Field(default=None, description="Response data")

    @classmethod
    def create(cls, message: str, data: Optional[T] = None):
        """Create success response."""
        return cls(success=True, message=message, data=data)


class ErrorDetail(BaseSchema):
    """Error detail information."""

    field: Optional[str] = Field(default=None, description="Field name causing error")
    message: str = Field(..., description="Error message")
    type: Optional[str] = Field(default=None, description="Validation error type")


class ErrorResponse(BaseSchema):
    """Standard error response body, as rendered by the exception handlers."""

    model_config = ConfigDict(alias_generator=None)

    success: bool = Field(default=False, description="Success flag")
    message: str = Field(..., description="Error message")
    error_code: str = Field(..., description="Application error code")
    errors: Optional[List[ErrorDetail]] = Field(default=None, description="Field-level errors")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Additional context")


class HealthResponse(BaseSchema):
    status: str
    version: str
    environment: str
