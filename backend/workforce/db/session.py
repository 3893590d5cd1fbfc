"""
SQLAlchemy engine and session factory for Postgres (or SQLite for local runs).
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from workforce.core.config import get_settings
from workforce.core.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()

_engine = None
_SessionLocal = None


def get_engine():
    global _engine
    if _engine is None:
        settings = get_settings()
        if settings.is_sqlite():
            # In-memory SQLite lives on one connection; share it across threads
            options = {"connect_args": {"check_same_thread": False}}
            if settings.database_url in ("sqlite://", "sqlite:///:memory:"):
                options["poolclass"] = StaticPool
        else:
            options = {
                "pool_size": settings.pool_size,
                "max_overflow": settings.max_overflow,
            }
        _engine = create_engine(settings.database_url, echo=settings.sql_echo, **options)
    return _engine


def get_session_factory():
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_engine(),
        )
    return _SessionLocal


def reset_engine() -> None:
    """Dispose of the cached engine and session factory (settings changed)."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


def create_schema() -> None:
    """Create every mapped table that does not exist yet."""
    # Register the mappers on Base.metadata before create_all
    import workforce.models  # noqa: F401

    engine = get_engine()
    Base.metadata.create_all(engine)
    logger.info(f"Schema ready on {engine.url.render_as_string(hide_password=True)}")


@contextmanager
def get_db() -> Generator[Session, None, None]:
    """Context manager for a single request-scoped DB session."""
    factory = get_session_factory()
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
