"""Tests for the application lifespan handler."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI

from bloglist.middleware.middleware import lifespan

MODULE = "bloglist.middleware.middleware"


@pytest.fixture
def app() -> FastAPI:
    return FastAPI(title="Bloglist API", description="Blog list service")


class TestLifespan:
    @pytest.mark.asyncio
    async def test_database_opened_and_closed(self, app: FastAPI) -> None:
        init_db = AsyncMock()
        close_db = AsyncMock()
        with (
            patch(f"{MODULE}.init_db", init_db),
            patch(f"{MODULE}.close_db", close_db),
            patch(f"{MODULE}.configure_logging", MagicMock()),
            patch(f"{MODULE}.logger", MagicMock()),
        ):
            async with lifespan(app):
                init_db.assert_awaited_once()
                close_db.assert_not_awaited()

        close_db.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_startup_logs_no_fixed_addresses(self, app: FastAPI) -> None:
        """Startup messages do not advertise a host or port the app may not be bound to."""
        logger = MagicMock()
        with (
            patch(f"{MODULE}.init_db", AsyncMock()),
            patch(f"{MODULE}.close_db", AsyncMock()),
            patch(f"{MODULE}.configure_logging", MagicMock()),
            patch(f"{MODULE}.logger", logger),
        ):
            async with lifespan(app):
                pass

        messages = [str(call.args[0]) for call in logger.info.call_args_list if call.args]
        assert "Services initialized successfully" in messages
        assert not [message for message in messages if "localhost" in message]
        assert not [message for message in messages if ":8000" in message]

    @pytest.mark.asyncio
    async def test_failed_startup_is_raised(self, app: FastAPI) -> None:
        logger = MagicMock()
        with (
            patch(f"{MODULE}.init_db", AsyncMock(side_effect=RuntimeError("db down"))),
            patch(f"{MODULE}.close_db", AsyncMock()),
            patch(f"{MODULE}.configure_logging", MagicMock()),
            patch(f"{MODULE}.logger", logger),
        ):
            with pytest.raises(RuntimeError, match="db down"):
                async with lifespan(app):
                    pass

        logger.exception.assert_called_once_with("Failed to initialize services")
