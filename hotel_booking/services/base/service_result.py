"""
Service result patterns for standardized response handling.

Services report expected outcomes (validation failures, conflicts,
declines) as failed results instead of raising.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from hotel_booking.core.exceptions import ErrorCode
from hotel_booking.utils.date_utils import now_utc


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class ServiceError:
    """Represents a service operation error with context."""

    code: ErrorCode
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    details: Optional[Dict[str, Any]] = None
    field: Optional[str] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = now_utc()


TData = TypeVar("TData")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Standardized service operation result with success/failure pattern.

    Attributes:
        is_success: Operation success indicator
        data: Result data (if successful)
        error: Error information (if failed)
        message: Human-readable status message
        metadata: Additional context information
    """

    is_success: bool
    data: Optional[TData] = None
    error: Optional[ServiceError] = None
    message: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success(
        cls,
        data: Optional[TData] = None,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a successful result."""
        return cls(is_success=True, data=data, message=message, metadata=metadata or {})

    @classmethod
    def failure(
        cls,
        error: ServiceError,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a failed result."""
        return cls(is_success=False, error=error, message=error.message, metadata=metadata or {})

    @classmethod
    def error_result(
        cls,
        code: ErrorCode,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        details: Optional[Dict[str, Any]] = None,
        field: Optional[str] = None,
    ) -> "ServiceResult[TData]":
        """Create a failed result from its parts."""
        return cls.failure(
            ServiceError(code=code, message=message, severity=severity, details=details, field=field)
        )

    @classmethod
    def validation_failure(
        cls,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a validation failure result."""
        return cls.error_result(
            ErrorCode.VALIDATION_ERROR,
            message,
            severity=ErrorSeverity.INFO,
            details=details,
            field=field,
        )

    @classmethod
    def not_found(cls, message: str, **details: Any) -> "ServiceResult[TData]":
        """Create a booking-not-found failure result."""
        return cls.error_result(ErrorCode.NOT_FOUND, message, severity=ErrorSeverity.INFO, details=details)

    @classmethod
    def internal_error(
        cls,
        message: str = "Internal server error",
        details: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        return cls.error_result(ErrorCode.INTERNAL_ERROR, message, severity=ErrorSeverity.ERROR, details=details)

    @property
    def error_code(self) -> Optional[ErrorCode]:
        return self.error.code if self.error else None

    def __bool__(self) -> bool:
        return self.is_success
