"""
Database setup for the book service.

Provides the connection manager: one shared SQLAlchemy engine (pooled,
safe for concurrent use) and short-lived sessions borrowed per request.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from settings import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns the engine and hands out independent sessions."""

    def __init__(self, url: str, isolation_level: Optional[str] = None) -> None:
        engine_kwargs = {}
        if url.startswith("sqlite"):
            # check_same_thread=False allows usage across FastAPI threads
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        if isolation_level:
            engine_kwargs["isolation_level"] = isolation_level
        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, autocommit=False)

    def ensure_index(self) -> None:
        """Create the books table and its unique ISBN index if missing.

        Any failure here is fatal: the service must not accept traffic
        without the uniqueness guarantee.
        """
        from repositories import models  # noqa: F401  Ensures models are registered

        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError:
            logger.critical("failed to ensure unique isbn index on %s", self.url, exc_info=True)
            raise
        logger.info("unique isbn index ready on %s", self.url)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Borrow a session for the duration of one request."""
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()


def get_database() -> Database:
    return Database(settings.DATABASE_URL, isolation_level=settings.DB_ISOLATION_LEVEL)
