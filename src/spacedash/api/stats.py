# src/spacedash/api/stats.py

"""API endpoints for player stats and the leaderboard."""

from fastapi import APIRouter, Depends, Query

from spacedash.config import settings
from spacedash.db.store import PlayerStatsStore, get_stats_store
from spacedash.exceptions import MissingParameterError
from spacedash.schemas.leaderboard import Leaderboard
from spacedash.schemas.player_stats import PlayerStatsResponse, PlayerStatsUpdate
from spacedash.services import stats_service

router = APIRouter(tags=["Stats"])


@router.get("/player-stats", response_model=PlayerStatsResponse)
async def read_player_stats(
    username: str | None = Query(None, description="Player to fetch"),
    store: PlayerStatsStore = Depends(get_stats_store),
) -> PlayerStatsResponse:
    """
    Retrieve one player's stats.

    Raises:
        400 Bad Request: If `username` is missing.
        404 Not Found: If the player has no stats record.
    """
    if not username:
        raise MissingParameterError("username")

    stats = await stats_service.get_player_stats(store, username)
    return PlayerStatsResponse(message="Player stats retrieved successfully.", data=stats)


@router.put("/player-stats", response_model=PlayerStatsResponse)
async def overwrite_player_stats(
    stats_in: PlayerStatsUpdate,
    store: PlayerStatsStore = Depends(get_stats_store),
) -> PlayerStatsResponse:
    """
    Overwrite a player's stats.

    - **username**: The player (required).
    - **coinsCollected** / **enemiesDefeated**: Counters, default 0.
    - **levelsCompleted**: Level identifiers, default empty.
    - **fastestTimes**: Level identifier -> completion times in seconds.

    The stored record is replaced entirely; omitted fields are reset.
    """
    stats = await stats_service.save_player_stats(store, stats_in)
    return PlayerStatsResponse(message="Player stats overwritten successfully.", data=stats)


@router.get("/leaderboard", response_model=Leaderboard)
async def read_leaderboard(
    store: PlayerStatsStore = Depends(get_stats_store),
) -> Leaderboard:
    """
    Get the top players by coins and by enemies defeated, plus every
    player's recorded times for each level.
    """
    return await stats_service.build_leaderboard(store, size=settings.leaderboard_size)
