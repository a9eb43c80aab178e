"""Database session management."""
from typing import Any, Dict, Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from hotel_booking.config.settings import Settings, settings


def enable_sqlite_write_locking(engine: Engine) -> None:
    """
    Make every SQLite transaction take the database write lock up front.

    SQLite ignores SELECT ... FOR UPDATE, so the room type row lock used
    while booking would otherwise guard nothing. pysqlite also defers
    BEGIN until the first write, letting two transactions pass the
    availability check together. Emitting BEGIN IMMEDIATE ourselves
    serializes transactions for the lifetime of each one; a waiting
    connection blocks for up to the busy timeout.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(config: Settings = settings) -> Engine:
    """Create the SQLAlchemy engine for the configured database."""
    kwargs: Dict[str, Any] = {
        "pool_pre_ping": True,
        "echo": config.DB_ECHO,
    }
    if config.is_sqlite():
        # SQLite connections are shared across FastAPI's worker threads
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": config.DB_SQLITE_BUSY_TIMEOUT,
        }
    else:
        kwargs["pool_size"] = config.DB_POOL_SIZE
        kwargs["max_overflow"] = config.DB_POOL_OVERFLOW
    engine = create_engine(config.get_database_url(), **kwargs)
    if config.is_sqlite():
        enable_sqlite_write_locking(engine)
    return engine


engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that yields a database session.

    Usage in FastAPI endpoints:
        @router.get("/bookings")
        def list_bookings(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
