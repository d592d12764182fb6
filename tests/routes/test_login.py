# tests/routes/test_login.py
"""Tests for the login endpoint."""

from typing import Any
from uuid import UUID

import pytest
from httpx import AsyncClient

from bloglist.dependencies import get_token_manager


class TestLogin:
    """Tests for POST /api/login."""

    @pytest.mark.asyncio
    async def test_login_returns_token(
        self,
        client: AsyncClient,
        owner: dict[str, Any],
    ) -> None:
        """Correct credentials yield a token naming the user."""
        response = await client.post(
            "/api/login",
            json={"username": "mluukkai", "password": "salainen"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "mluukkai"
        assert data["name"] == "Matti Luukkainen"

        token_data = get_token_manager().decode_access_token(data["token"])
        assert token_data is not None
        assert token_data.user_id == UUID(owner["id"])
        assert token_data.username == "mluukkai"

    @pytest.mark.asyncio
    async def test_wrong_password_returns_401(
        self,
        client: AsyncClient,
        owner: dict[str, Any],
    ) -> None:
        """A wrong password is refused."""
        response = await client.post(
            "/api/login",
            json={"username": "mluukkai", "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "invalid username or password"
        assert "token" not in response.json()

    @pytest.mark.asyncio
    async def test_unknown_user_returns_401(self, client: AsyncClient) -> None:
        """An unknown username gets the same answer as a wrong password."""
        response = await client.post(
            "/api/login",
            json={"username": "nobody", "password": "salainen"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "invalid username or password"


class TestHealth:
    """Tests for GET /health and the request middleware."""

    @pytest.mark.asyncio
    async def test_health_reports_database(self, client: AsyncClient) -> None:
        """The health check reaches the database."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["database"] == "connected"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, client: AsyncClient) -> None:
        """A caller-supplied request id comes back on the response."""
        response = await client.get("/health", headers={"X-Request-ID": "abc123"})

        assert response.headers["x-request-id"] == "abc123"
        assert response.headers["x-content-type-options"] == "nosniff"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, client: AsyncClient) -> None:
        """Requests without an id get one."""
        response = await client.get("/health")

        assert response.headers["x-request-id"]
