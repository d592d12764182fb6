# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from bloglist.main import app

INITIAL_BLOGS: list[dict[str, Any]] = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
    },
    {
        "title": "First class tests",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
        "likes": 10,
    },
    {
        "title": "TDD harms architecture",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
        "likes": 0,
    },
    {
        "title": "Type wars",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
        "likes": 2,
    },
]


@pytest.fixture
async def client(database: None) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def register_and_login(
    client: AsyncClient,
    username: str,
    name: str,
    password: str = "salainen",
) -> dict[str, Any]:
    """Register a user through the API and log them in."""
    response = await client.post(
        "/api/users",
        json={"username": username, "name": name, "password": password},
    )
    assert response.status_code == 201
    user = response.json()

    response = await client.post(
        "/api/login",
        json={"username": username, "password": password},
    )
    assert response.status_code == 200
    token = response.json()["token"]

    return {
        "id": user["id"],
        "username": username,
        "token": token,
        "headers": {"Authorization": f"Bearer {token}"},
    }


@pytest.fixture
async def owner(client: AsyncClient) -> dict[str, Any]:
    """A registered user with a valid bearer token."""
    return await register_and_login(client, "mluukkai", "Matti Luukkainen")


@pytest.fixture
async def other_user(client: AsyncClient) -> dict[str, Any]:
    """A second registered user who owns nothing."""
    return await register_and_login(client, "hellas", "Arto Hellas")


@pytest.fixture
async def seeded_blogs(client: AsyncClient, owner: dict[str, Any]) -> list[dict[str, Any]]:
    """The initial blog list, all owned by `owner`."""
    created = []
    for blog in INITIAL_BLOGS:
        response = await client.post("/api/blogs", json=blog, headers=owner["headers"])
        assert response.status_code == 201
        created.append(response.json())
    return created
