# tests/routes/test_user_api.py
"""Tests for the user endpoints."""

from typing import Any

import pytest
from httpx import AsyncClient


class TestCreateUser:
    """Tests for POST /api/users."""

    @pytest.mark.asyncio
    async def test_user_can_be_created(self, client: AsyncClient) -> None:
        """A new user is stored and returned without password material."""
        response = await client.post(
            "/api/users",
            json={"username": "root", "name": "Superuser", "password": "sekret"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "root"
        assert data["name"] == "Superuser"
        assert data["blogs"] == []
        assert "password" not in data
        assert "password_hash" not in data

    @pytest.mark.asyncio
    async def test_duplicate_username_returns_409(
        self,
        client: AsyncClient,
        owner: dict[str, Any],
    ) -> None:
        """Usernames are unique and the first user is kept."""
        response = await client.post(
            "/api/users",
            json={"username": "mluukkai", "name": "Impostor", "password": "salainen"},
        )

        assert response.status_code == 409
        assert "unique" in response.json()["detail"]

        users = (await client.get("/api/users")).json()
        assert len(users) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "ro", "name": "Too Short", "password": "sekret"},
            {"username": "root", "name": "Short Password", "password": "se"},
            {"name": "No Username", "password": "sekret"},
            {"username": "root", "name": "No Password"},
        ],
    )
    async def test_invalid_user_returns_400(
        self,
        client: AsyncClient,
        payload: dict[str, str],
    ) -> None:
        """Bad registration bodies are rejected before anything is stored."""
        response = await client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert (await client.get("/api/users")).json() == []


class TestListUsers:
    """Tests for GET /api/users."""

    @pytest.mark.asyncio
    async def test_users_include_their_blogs(
        self,
        client: AsyncClient,
        owner: dict[str, Any],
        other_user: dict[str, Any],
        seeded_blogs: list[dict[str, Any]],
    ) -> None:
        """Each user lists the blogs they own, in creation order."""
        response = await client.get("/api/users")

        assert response.status_code == 200
        users = {user["username"]: user for user in response.json()}

        assert [blog["id"] for blog in users["mluukkai"]["blogs"]] == [
            blog["id"] for blog in seeded_blogs
        ]
        assert users["hellas"]["blogs"] == []
        for user in users.values():
            assert "password_hash" not in user
