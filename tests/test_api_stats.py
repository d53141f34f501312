# tests/test_api_stats.py

"""Tests for the player stats and leaderboard API endpoints."""

import pytest
from httpx import AsyncClient
from spacedash.db.store import PlayerStatsStore


@pytest.mark.asyncio
async def test_overwrite_player_stats(async_client: AsyncClient):
    """Test saving stats via PUT /player-stats with a camelCase payload."""
    payload = {
        "username": "ace",
        "coinsCollected": 42,
        "enemiesDefeated": 7,
        "levelsCompleted": ["level1", "level2"],
        "fastestTimes": {"level1": [30.5, 25.25]},
    }

    response = await async_client.put("/player-stats", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Player stats overwritten successfully."
    assert data["data"] == {
        "username": "ace",
        "coinsCollected": 42,
        "enemiesDefeated": 7,
        "levelsCompleted": ["level1", "level2"],
        "fastestTimes": {"level1": [25.25, 30.5]},
    }


@pytest.mark.asyncio
async def test_read_player_stats(async_client: AsyncClient):
    """Test retrieving stats that were previously saved."""
    await async_client.put(
        "/player-stats", json={"username": "bob", "coins_collected": 3}
    )

    response = await async_client.get("/player-stats", params={"username": "bob"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["username"] == "bob"
    assert data["coinsCollected"] == 3
    assert data["enemiesDefeated"] == 0
    assert data["levelsCompleted"] == []
    assert data["fastestTimes"] == {}


@pytest.mark.asyncio
async def test_read_player_stats_missing_username(async_client: AsyncClient):
    response = await async_client.get("/player-stats")

    assert response.status_code == 400
    assert response.json()["error_type"] == "MissingParameterError"


@pytest.mark.asyncio
async def test_read_player_stats_unknown_player(async_client: AsyncClient):
    response = await async_client.get("/player-stats", params={"username": "ghost"})

    assert response.status_code == 404
    data = response.json()
    assert data["error_type"] == "PlayerStatsNotFoundError"
    assert "not found" in data["detail"].lower()


@pytest.mark.asyncio
async def test_overwrite_player_stats_missing_username(async_client: AsyncClient):
    response = await async_client.put("/player-stats", json={"coinsCollected": 1})

    assert response.status_code == 400
    assert "username" in response.json()["detail"]


@pytest.mark.asyncio
async def test_overwrite_player_stats_rejects_bad_types(async_client: AsyncClient):
    """Malformed input on the write path is a schema error, not a silent 0."""
    response = await async_client.put(
        "/player-stats", json={"username": "ace", "coinsCollected": "many"}
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_leaderboard_empty(async_client: AsyncClient):
    response = await async_client.get("/leaderboard")

    assert response.status_code == 200
    assert response.json() == {"topCoins": [], "topEnemies": [], "allFastestTimes": []}


@pytest.mark.asyncio
async def test_leaderboard_rankings_and_times(
    async_client: AsyncClient, stats_store: PlayerStatsStore
):
    """
    Test the composed leaderboard over a mix of clean and legacy records.
    """
    await stats_store.put(
        "a",
        {
            "coins-collected": 5,
            "enemies-defeated": 1,
            "fastest-times": {
                "level1": {"L": [{"N": "12.5"}, {"N": "bad"}, {"N": "3.2"}]}
            },
        },
    )
    await stats_store.put("b", {"coins-collected": 5, "enemies-defeated": 4})
    await stats_store.put("c", {"coins-collected": "9"})
    await stats_store.put("d", {"enemies-defeated": 2})

    response = await async_client.get("/leaderboard")

    assert response.status_code == 200
    data = response.json()
    assert data["topCoins"] == [
        {"username": "c", "metricValue": 9},
        {"username": "a", "metricValue": 5},
        {"username": "b", "metricValue": 5},
        {"username": "d", "metricValue": 0},
    ]
    assert [e["username"] for e in data["topEnemies"]] == ["b", "d", "a", "c"]
    assert data["allFastestTimes"] == [
        {"username": "a", "perLevel": {"level1": [3.2, 12.5]}},
        {"username": "b", "perLevel": {}},
        {"username": "c", "perLevel": {}},
        {"username": "d", "perLevel": {}},
    ]


@pytest.mark.asyncio
async def test_leaderboard_limits_rankings_to_ten(async_client: AsyncClient):
    for i in range(12):
        await async_client.put(
            "/player-stats",
            json={"username": f"p{i:02d}", "coinsCollected": i, "enemiesDefeated": i},
        )

    data = (await async_client.get("/leaderboard")).json()

    assert len(data["topCoins"]) == 10
    assert len(data["topEnemies"]) == 10
    assert len(data["allFastestTimes"]) == 12
    assert data["topCoins"][0] == {"username": "p11", "metricValue": 11}
