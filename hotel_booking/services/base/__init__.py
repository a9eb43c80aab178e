from hotel_booking.services.base.base_service import BaseService
from hotel_booking.services.base.service_result import ErrorSeverity, ServiceError, ServiceResult

__all__ = ["BaseService", "ErrorSeverity", "ServiceError", "ServiceResult"]
