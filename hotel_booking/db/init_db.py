"""Database initialization utilities."""
from typing import Optional

from sqlalchemy.engine import Engine

from hotel_booking.core.logging import get_logger
from hotel_booking.db.base import Base
from hotel_booking.db.session import engine as default_engine

logger = get_logger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables that do not exist yet.

    Suitable for development and tests; schema changes in production
    belong in migrations.
    """
    bind = bind or default_engine
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})
