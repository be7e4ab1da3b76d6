"""Database engine, session factory and declarative base."""

from collections.abc import Generator

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from backend.config import settings

# Stable constraint names so alembic can drop and alter them
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# Created on first use so the app imports without a configured database
_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine() -> Engine:
    """Get or create the engine for ``settings.database_url``."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL not configured")

        if settings.database_url.startswith("sqlite"):
            # Sync routes run in FastAPI's threadpool
            _engine = create_engine(settings.database_url, connect_args={"check_same_thread": False})
            event.listen(_engine, "connect", _enable_sqlite_foreign_keys)
        else:
            _engine = create_engine(
                settings.database_url,
                pool_pre_ping=True,
                pool_recycle=300,
            )
    return _engine


def get_session_factory() -> sessionmaker:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request, closed afterwards.

    Services commit their own units of work; anything left uncommitted is
    rolled back on close.
    """
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create missing tables. Production schemas are managed by alembic."""
    from backend.db import tables  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
