"""Database engine and session lifecycle."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from libraryapp.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""


# Application-scoped, set up by initialize_database()
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _is_memory_sqlite(url: str) -> bool:
    return make_url(url).database in (None, "", ":memory:")


def _begin_immediately(engine: Engine) -> None:
    """
    Start every transaction on a file-backed SQLite engine with BEGIN IMMEDIATE.

    A second session blocks on BEGIN until the first commits, so the
    active-loan check and the insert of one loan never interleave with another.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin_immediate(conn: Connection) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_database_engine(settings: Settings) -> Engine:
    """
    Build an engine for the configured database.

    - in-memory SQLite: a single shared connection (StaticPool), since every
      new connection would open an empty database
    - file-backed SQLite: pooled connections, each transaction starting with
      BEGIN IMMEDIATE
    - anything else: pooled connections at DATABASE_ISOLATION_LEVEL
    """
    if not settings.is_sqlite:
        return create_engine(
            settings.DATABASE_URL,
            isolation_level=settings.DATABASE_ISOLATION_LEVEL,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
        )

    if _is_memory_sqlite(settings.DATABASE_URL):
        return create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    _begin_immediately(engine)
    return engine


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = create_database_engine(settings)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def create_tables() -> None:
    """Create any missing tables for the registered models."""
    # Registers the tables on Base.metadata
    from libraryapp import models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Session factory, initializing the database on first use."""
    if _session_factory is None:
        initialize_database(settings)

    if _session_factory is None:
        raise RuntimeError("Failed to initialize database session factory.")

    return _session_factory


def dispose_engine() -> None:
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Request-scoped session, closed once the response is sent."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


DatabaseSession = Annotated[Session, Depends(get_db)]
