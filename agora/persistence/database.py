"""Database connection and session management.

Provides async database engine and session factory. PostgreSQL (asyncpg)
in deployments, SQLite (aiosqlite) in tests.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from agora.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    if settings.database.is_sqlite:
        engine = create_async_engine(settings.database_url, echo=settings.debug)
        _configure_sqlite(engine)
        return engine

    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def _configure_sqlite(engine: AsyncEngine) -> None:
    # The sqlite driver delays BEGIN until the first DML statement, which
    # breaks SAVEPOINT. Take over transaction control and enforce FKs.
    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


class RequestTransaction:
    """Outcome of the current request's transaction.

    Exception handlers turn domain errors into responses, so the session
    provider never sees them. Handlers call ``mark_rollback_only`` instead,
    and the provider rolls back rather than commits when the request ends.
    """

    def __init__(self) -> None:
        self.rollback_only = False

    def mark_rollback_only(self) -> None:
        self.rollback_only = True
