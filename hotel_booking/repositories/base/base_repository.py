"""
Base repository with the data access shared by all domain repositories.

Repositories flush but never commit: transaction boundaries (and the row
locks taken inside them) belong to the calling service.
"""

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from hotel_booking.core.logging import get_logger
from hotel_booking.models.base.base_model import BaseModel

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository for a single model.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        return self.db.get(self.model, entity_id)

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(self.model)) or 0

    def add(self, entity: ModelType) -> ModelType:
        """
        Stage a new entity and flush it so database constraints fire now.

        Raises:
            IntegrityError: If a unique or check constraint is violated
        """
        self.db.add(entity)
        self.db.flush()
        logger.debug(f"Added {self.model.__name__} with id: {entity.id}")
        return entity
