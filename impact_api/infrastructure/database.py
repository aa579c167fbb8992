"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from impact_api.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict[str, object]:
    """Return driver specific keyword arguments for ``create_engine``."""

    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        # Sync endpoints run in a threadpool, so the connection crosses threads.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


database_url = settings.database_url
engine = create_engine(database_url, **_engine_options(database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from impact_api.infrastructure import models  # noqa: F401  # ensure models are imported

    logger.info("Creating missing tables on %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
