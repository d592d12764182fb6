# tests/errors/test_base.py
"""Tests for bloglist/errors/base.py module."""

from unittest.mock import MagicMock

import orjson
import pytest

from bloglist.configs import DEFAULT_ERROR_MESSAGE
from bloglist.errors import (
    BaseAppError,
    ForbiddenError,
    InvalidInputError,
    UnauthenticatedError,
    create_exception_handler,
    create_unhandled_exception_handler,
)


@pytest.fixture
def request_mock() -> MagicMock:
    request = MagicMock()
    request.client.host = "192.168.1.1"
    request.url.path = "/api/test"
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        """Test default initialization values."""
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_custom_values(self) -> None:
        """Test custom initialization values."""
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        """Test string representation returns message."""
        assert str(BaseAppError(detail="Test error")) == "Test error"


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.mark.asyncio
    async def test_handler_with_base_app_error(self, request_mock: MagicMock) -> None:
        """Test handler with BaseAppError exception."""
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(request_mock, BaseAppError(detail="Test error", status_code=400))

        assert response.status_code == 400
        assert response.body == b'{"detail":"Test error"}'
        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /api/test",
        )

    @pytest.mark.asyncio
    async def test_authentication_error_sets_challenge(self, request_mock: MagicMock) -> None:
        """401 responses carry a bearer challenge."""
        handler = create_exception_handler(MagicMock())

        response = await handler(request_mock, UnauthenticatedError())

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert orjson.loads(response.body) == {"detail": "token invalid"}

    @pytest.mark.asyncio
    async def test_forbidden_has_no_challenge(self, request_mock: MagicMock) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(request_mock, ForbiddenError())

        assert response.status_code == 403
        assert "www-authenticate" not in response.headers

    @pytest.mark.asyncio
    async def test_extra_attributes_are_included(self, request_mock: MagicMock) -> None:
        """Public attributes beyond detail ride along in the body."""
        handler = create_exception_handler(MagicMock())
        error = InvalidInputError(
            detail="missing required field(s): url",
            errors=[{"field": "url", "message": "Field required"}],
        )

        response = await handler(request_mock, error)

        assert response.status_code == 400
        assert orjson.loads(response.body) == {
            "detail": "missing required field(s): url",
            "errors": [{"field": "url", "message": "Field required"}],
        }


class TestUnhandledExceptionHandler:
    """Tests for create_unhandled_exception_handler."""

    @pytest.mark.asyncio
    async def test_internals_are_hidden(self, request_mock: MagicMock) -> None:
        logger = MagicMock()
        handler = create_unhandled_exception_handler(logger)

        response = await handler(request_mock, RuntimeError("secret stack detail"))

        assert response.status_code == 500
        assert orjson.loads(response.body) == {"detail": DEFAULT_ERROR_MESSAGE}
        logger.error.assert_called_once()
