# tests/test_api_users.py

"""Tests for the user account API endpoints."""

import pytest
from httpx import AsyncClient
from spacedash.db.models import UserAccount
from sqlalchemy.ext.asyncio import AsyncSession


@pytest.mark.asyncio
async def test_read_user(async_client: AsyncClient, db_session: AsyncSession):
    """Test retrieving an existing user account."""
    db_session.add(UserAccount(username="ace", character="red"))
    await db_session.commit()

    response = await async_client.get("/users", params={"username": "ace"})

    assert response.status_code == 200
    assert response.json() == {"username": "ace", "character": "red"}


@pytest.mark.asyncio
async def test_read_user_not_found(async_client: AsyncClient):
    response = await async_client.get("/users", params={"username": "ghost"})

    assert response.status_code == 404
    assert response.json()["error_type"] == "UserNotFoundError"


@pytest.mark.asyncio
async def test_read_user_missing_username(async_client: AsyncClient):
    response = await async_client.get("/users")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_character_creates_and_updates(async_client: AsyncClient):
    """The first call creates the account; later calls change the colour."""
    create_response = await async_client.put(
        "/users/character", params={"username": "bob", "colour": "blue"}
    )
    assert create_response.status_code == 200
    assert create_response.json() == {"username": "bob", "character": "blue"}

    update_response = await async_client.put(
        "/users/character", params={"username": "bob", "colour": "green"}
    )
    assert update_response.status_code == 200
    assert update_response.json()["character"] == "green"

    read_response = await async_client.get("/users", params={"username": "bob"})
    assert read_response.json()["character"] == "green"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params, missing",
    [
        ({"colour": "blue"}, "username"),
        ({"username": "bob"}, "colour"),
        ({}, "username"),
    ],
)
async def test_update_character_missing_parameters(
    async_client: AsyncClient, params, missing
):
    response = await async_client.put("/users/character", params=params)

    assert response.status_code == 400
    assert missing in response.json()["detail"]
