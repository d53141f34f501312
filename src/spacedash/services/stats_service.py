# src/spacedash/services/stats_service.py

"""Business logic for player stats and leaderboards."""

from __future__ import annotations

import logging

from spacedash.db.store import PlayerStatsStore
from spacedash.exceptions import MissingParameterError, PlayerStatsNotFoundError
from spacedash.ranking import codec, normalizer
from spacedash.ranking.composer import LEADERBOARD_SIZE, compose
from spacedash.schemas.leaderboard import Leaderboard
from spacedash.schemas.player_stats import PlayerStat, PlayerStatsUpdate

logger = logging.getLogger(__name__)


async def get_player_stats(store: PlayerStatsStore, username: str) -> PlayerStat:
    """
    Fetch and normalize one player's stats.

    Raises:
        PlayerStatsNotFoundError: If no record exists for the username
    """
    raw = await store.get(username)
    if raw is None:
        raise PlayerStatsNotFoundError(username)
    return normalizer.normalize(raw)


def build_record(stats_in: PlayerStatsUpdate, username: str) -> dict:
    """Build the full raw record stored for ``stats_in``."""
    return {
        normalizer.USERNAME_FIELD: username,
        normalizer.COINS_FIELD: stats_in.coins_collected,
        normalizer.ENEMIES_FIELD: stats_in.enemies_defeated,
        normalizer.LEVELS_FIELD: list(stats_in.levels_completed),
        normalizer.TIMES_FIELD: codec.encode_level_times(stats_in.fastest_times),
    }


async def save_player_stats(
    store: PlayerStatsStore, stats_in: PlayerStatsUpdate
) -> PlayerStat:
    """
    Overwrite a player's stats with the given values.

    Fields left out of the payload are reset to their defaults; nothing is
    merged with the previous record.

    Raises:
        MissingParameterError: If the username is missing or blank
    """
    username = (stats_in.username or "").strip()
    if not username:
        raise MissingParameterError("username")

    record = build_record(stats_in, username)
    await store.put(username, record)

    logger.info(
        "Player stats overwritten",
        extra={
            "username": username,
            "level_count": len(stats_in.fastest_times),
        },
    )
    return normalizer.normalize(record)


async def build_leaderboard(
    store: PlayerStatsStore, size: int = LEADERBOARD_SIZE
) -> Leaderboard:
    """Scan every record and compose the leaderboard from a fresh snapshot."""
    raw_records = await store.scan_all()
    records = [normalizer.normalize(raw) for raw in raw_records]

    logger.info("Building leaderboard", extra={"player_count": len(records)})
    return compose(records, size=size)
