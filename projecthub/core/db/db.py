"""Database connection and session management for ProjectHub.

Wraps a SQLAlchemy engine and sessionmaker. Every unit of work runs
inside ``get_session()``, which commits on success and rolls back on
any exception before re-raising it.
"""

import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the engine and hands out transactional sessions."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url

        engine_kwargs = {"echo": echo}
        if database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
                # A single shared connection, otherwise each session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.engine = create_engine(database_url, **engine_kwargs)
        # Objects returned from stores are used after their session closes
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        logger.info(f"DatabaseManager initialized ({self.engine.dialect.name})")

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Provide a transactional scope around a series of operations."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        """Create all tables that do not exist yet."""
        Base.metadata.create_all(self.engine)
        logger.info("Database tables ensured")

    def drop_tables(self) -> None:
        Base.metadata.drop_all(self.engine)

    def ping(self) -> bool:
        """Return True when the database answers a trivial query."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except OperationalError as e:
            logger.debug(f"Database ping failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()


_db_manager: Optional[DatabaseManager] = None


def get_database_manager(database_url: str, echo: bool = False) -> DatabaseManager:
    """Return the process-wide DatabaseManager, creating it on first call."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(database_url, echo=echo)
    return _db_manager


def wait_for_db(db_manager: DatabaseManager, retries: int = 10, delay: float = 2.0) -> bool:
    """Block until the database is reachable or retries are exhausted.

    Args:
        db_manager: DatabaseManager to probe
        retries: Number of attempts
        delay: Seconds between attempts

    Returns:
        True if the database became available, False otherwise
    """
    for attempt in range(1, retries + 1):
        if db_manager.ping():
            logger.info(f"Database available (attempt {attempt})")
            return True
        logger.warning(f"Database not ready, retrying in {delay}s ({attempt}/{retries})")
        time.sleep(delay)
    logger.error(f"Database unavailable after {retries} attempts")
    return False
