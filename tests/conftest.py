# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before bloglist is imported anywhere: settings and the
# engine are built at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["REQUIRE_OWNER_ON_UPDATE"] = "false"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENVIRONMENT"] = "testing"
# Cheap Argon2 parameters keep the login/register paths fast
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_PARALLELISM"] = "1"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402

from bloglist.db import close_db, drop_db, init_db  # noqa: E402


@pytest.fixture
async def database() -> AsyncGenerator[None]:
    """Give the test a fresh in-memory schema."""
    await init_db()
    yield
    await drop_db()
    # Drop the shared connection so the next test's event loop opens its own
    await close_db()
