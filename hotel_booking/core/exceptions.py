"""
Custom Exceptions for the Hotel Booking Application

This module defines the error codes shared by services and the API layer,
and the exception classes the API raises to produce HTTP error responses.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INVALID_STATE = "INVALID_STATE"

    # Booking errors
    ROOM_TYPE_NOT_FOUND = "ROOM_TYPE_NOT_FOUND"
    ROOM_UNAVAILABLE = "ROOM_UNAVAILABLE"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"

    # Payment errors
    ALREADY_PAID = "ALREADY_PAID"
    PAYMENT_DECLINED = "PAYMENT_DECLINED"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the API error body"""
        body: Dict[str, Any] = {
            "success": False,
            "message": self.message,
            "error_code": self.error_code.value,
        }
        field_errors = self.details.get("field_errors")
        if field_errors:
            body["errors"] = field_errors
        other = {k: v for k, v in self.details.items() if k != "field_errors"}
        if other:
            body["details"] = other
        return body

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


class ValidationError(BaseAppException):
    """Exception raised when data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[List[Dict[str, Any]]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        merged = dict(details or {})
        if field_errors:
            merged["field_errors"] = field_errors
        super().__init__(message, ErrorCode.VALIDATION_ERROR, merged, 400)


class InvalidDateRangeError(BaseAppException):
    """Exception raised when a stay has no billable nights"""

    def __init__(
        self,
        message: str = "Check-out date must be after check-in date",
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ):
        details = {
            "start_date": start_date,
            "end_date": end_date
        }
        super().__init__(message, ErrorCode.INVALID_DATE_RANGE, details, 400)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.NOT_FOUND,
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, error_code, details, 404)


class BookingNotFoundError(ResourceNotFoundError):
    """Exception raised when no booking matches a reference"""

    def __init__(self, reference: Optional[str] = None, message: Optional[str] = None):
        super().__init__("Booking", reference, message or "Booking not found")


class RoomTypeNotFoundError(ResourceNotFoundError):
    """Exception raised when a room type is missing or inactive"""

    def __init__(self, room_type: Optional[str] = None, message: Optional[str] = None):
        super().__init__(
            "RoomType",
            room_type,
            message or "Invalid room type selected",
            error_code=ErrorCode.ROOM_TYPE_NOT_FOUND,
        )


class RoomUnavailableError(BaseAppException):
    """Exception raised when room is not available for booking"""

    def __init__(
        self,
        message: str = "Room is already booked for the selected dates",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.ROOM_UNAVAILABLE, details, 409)


class InvalidStateError(BaseAppException):
    """Exception raised for a lifecycle transition the booking cannot make"""

    def __init__(self, message: str = "Invalid booking state", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INVALID_STATE, details, 409)


class AlreadyPaidError(BaseAppException):
    """Exception raised when a paid booking is charged again"""

    def __init__(self, message: str = "Booking is already paid", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.ALREADY_PAID, details, 400)


class PaymentDeclinedError(BaseAppException):
    """Exception raised when the payment processor declines a charge"""

    def __init__(self, message: str = "Payment processing failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.PAYMENT_DECLINED, details, 400)


class InternalError(BaseAppException):
    """Exception raised for unexpected failures; the client sees a generic message"""

    def __init__(self, message: str = "Internal server error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INTERNAL_ERROR, details, 500)


_EXCEPTION_BY_CODE = {
    ErrorCode.INVALID_DATE_RANGE: InvalidDateRangeError,
    ErrorCode.INVALID_STATE: InvalidStateError,
    ErrorCode.ALREADY_PAID: AlreadyPaidError,
    ErrorCode.PAYMENT_DECLINED: PaymentDeclinedError,
    ErrorCode.ROOM_UNAVAILABLE: RoomUnavailableError,
    ErrorCode.INTERNAL_ERROR: InternalError,
}


def exception_from_service_error(error) -> BaseAppException:
    """Convert a ServiceError into the exception the API raises for it"""
    details = dict(error.details or {})

    if error.code == ErrorCode.VALIDATION_ERROR:
        field_errors = details.pop("field_errors", None)
        if not field_errors and error.field:
            field_errors = [{"field": error.field, "message": error.message}]
        return ValidationError(error.message, field_errors=field_errors, details=details)

    if error.code == ErrorCode.NOT_FOUND:
        return BookingNotFoundError(details.get("reference"), message=error.message)

    if error.code == ErrorCode.ROOM_TYPE_NOT_FOUND:
        return RoomTypeNotFoundError(details.get("room_type"), message=error.message)

    if error.code == ErrorCode.INTERNAL_ERROR:
        # Internal details stay in the server log
        return InternalError()

    if error.code == ErrorCode.INVALID_DATE_RANGE:
        return InvalidDateRangeError(
            error.message,
            start_date=details.get("start_date"),
            end_date=details.get("end_date"),
        )

    exc_class = _EXCEPTION_BY_CODE.get(error.code, InternalError)
    return exc_class(error.message, details=details)


__all__ = [
    'ErrorCode',
    'BaseAppException',
    'ValidationError',
    'InvalidDateRangeError',
    'ResourceNotFoundError',
    'BookingNotFoundError',
    'RoomTypeNotFoundError',
    'RoomUnavailableError',
    'InvalidStateError',
    'AlreadyPaidError',
    'PaymentDeclinedError',
    'InternalError',
    'exception_from_service_error',
]
