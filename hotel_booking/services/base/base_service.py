"""
Base class for the booking, payment and catalogue services.
"""

from abc import ABC
from typing import Any, Dict, Generic, Optional, TypeVar

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import ErrorCode
from hotel_booking.core.logging import get_logger
from hotel_booking.repositories.base.base_repository import BaseRepository
from hotel_booking.services.base.service_result import ErrorSeverity, ServiceError, ServiceResult

TModel = TypeVar("TModel")
TRepo = TypeVar("TRepo", bound=BaseRepository)


class BaseService(ABC, Generic[TModel, TRepo]):
    """
    Shared plumbing for services.

    Each service owns the transaction it runs in: it commits on success and
    rolls back (releasing any row locks) before returning a failure.
    """

    def __init__(self, repository: TRepo, db_session: Session):
        """
        Initialize base service.

        Args:
            repository: Repository instance for data access
            db_session: SQLAlchemy database session
        """
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = get_logger(f"hotel_booking.services.{self.__class__.__name__}")

    # -------------------------------------------------------------------------
    # Exception & Error Handling
    # -------------------------------------------------------------------------

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
        additional_context: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult:
        """
        Roll back and convert an unexpected exception into an internal error.

        The exception is logged with full context; the returned error
        carries only a generic message for clients.
        """
        self._rollback()

        context = {
            "operation": operation,
            "entity_ref": str(entity_ref) if entity_ref is not None else None,
            "exception_type": type(exception).__name__,
        }
        if additional_context:
            context.update(additional_context)

        self._logger.error(
            f"Error during {operation}: {exception}",
            exc_info=True,
            extra=context,
        )

        return ServiceResult.failure(
            ServiceError(
                code=ErrorCode.INTERNAL_ERROR,
                message=f"Failed to {operation}",
                details={"entity_ref": context["entity_ref"]},
                severity=ErrorSeverity.CRITICAL,
            )
        )

    def _abort(self, result: ServiceResult) -> ServiceResult:
        """Roll back the open transaction (releasing its locks) and return a failure."""
        self._rollback()
        return result

    # -------------------------------------------------------------------------
    # Transaction Management
    # -------------------------------------------------------------------------

    def _commit(self) -> None:
        """Commit the current transaction."""
        try:
            self.db.commit()
            self._logger.debug("Transaction committed successfully")
        except Exception as e:
            self._logger.warning(f"Commit failed: {e}")
            self._rollback()
            raise

    def _rollback(self) -> None:
        """Rollback the current transaction, suppressing rollback errors."""
        try:
            self.db.rollback()
            self._logger.debug("Transaction rolled back")
        except Exception as e:
            # Rollback errors must not mask the original error
            self._logger.warning(f"Rollback failed: {e}")
