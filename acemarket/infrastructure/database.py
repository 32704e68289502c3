"""Database handle — one lazily created engine per process, disposed on shutdown."""

from typing import Generator, Optional

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from acemarket.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)

Base = declarative_base()


class Database:
    """Process-wide database resource.

    The engine is created on first use and reused by every request until
    ``dispose()`` is called (application shutdown). Accessing it again after
    disposal creates a fresh engine.
    """

    def __init__(self, url: str):
        self.url = url
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def _engine_options(self) -> dict:
        if not self.url.startswith("sqlite"):
            return {"pool_pre_ping": True}
        options: dict = {"connect_args": {"check_same_thread": False}}
        if self.url in ("sqlite://", "sqlite:///:memory:"):
            # A single shared connection keeps the in-memory database alive
            options["poolclass"] = StaticPool
        return options

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(self.url, **self._engine_options())
            logger.info("Database engine created", dialect=self._engine.dialect.name)
        return self._engine

    def session(self) -> Session:
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.engine, autoflush=False)
        return self._session_factory()

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None


database = Database(settings.DATABASE_URL)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency — one session per request."""
    db = database.session()
    try:
        yield db
    finally:
        db.close()
