"""Core database modules."""

from bloglist.db.database import (
    async_session_maker,
    build_engine,
    close_db,
    drop_db,
    engine,
    get_session,
    init_db,
    transaction,
)

__all__ = [
    "async_session_maker",
    "build_engine",
    "close_db",
    "drop_db",
    "engine",
    "get_session",
    "init_db",
    "transaction",
]
