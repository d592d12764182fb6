"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.configs import settings
from bloglist.errors.database import DatabaseInitializationError
from bloglist.monitoring import get_logger

logger = get_logger(__name__)

STATEMENT_TIMEOUT_MS = 30000


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: Any, connection_record: object) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for `database_url`.

    PostgreSQL (asyncpg) gets a sized pool and server-side statement
    timeouts. SQLite (aiosqlite) shares one connection so an in-memory
    database survives across sessions.
    """
    if database_url.startswith("sqlite"):
        sqlite_engine = create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        _enable_sqlite_foreign_keys(sqlite_engine)
        return sqlite_engine

    return create_async_engine(
        database_url,
        echo=echo,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
        pool_pre_ping=True,
        connect_args={
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        },
    )


engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

if settings.DEBUG:
    _configure_engine_events(engine)

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    Each request runs inside one transaction: a blog insert and the
    owner's list growth commit or roll back together.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            session.add(UserDB(username="root", password_hash=hashed))
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            logger.exception("Transaction error")
            raise
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """
    Create all tables defined in SQLModel models.

    Note:
        Tables are created if missing; existing tables are left untouched.
    """
    # Registers the tables on SQLModel.metadata
    from bloglist.models import BlogDB, UserDB  # noqa: F401, PLC0415

    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except SQLAlchemyError as e:
        logger.exception("Failed to create tables")
        raise DatabaseInitializationError from e
    logger.info("Database initialized successfully!")


async def drop_db() -> None:
    """Drop all tables. Used to reset state between test runs."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


async def close_db() -> None:
    """Dispose the engine's connection pool on shutdown."""
    await engine.dispose()
    logger.info("Database connections closed")
