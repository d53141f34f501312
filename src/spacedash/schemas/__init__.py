# src/spacedash/schemas/__init__.py

"""Pydantic schemas for API validation and serialization."""

from .assets import SpritesheetRead
from .common import CamelModel
from .leaderboard import Leaderboard, LevelTimes, RankedEntry
from .player_stats import PlayerStat, PlayerStatsResponse, PlayerStatsUpdate
from .user import UserRead

__all__ = [
    # Common
    "CamelModel",
    # Assets
    "SpritesheetRead",
    # Leaderboard
    "Leaderboard",
    "LevelTimes",
    "RankedEntry",
    # Player stats
    "PlayerStat",
    "PlayerStatsResponse",
    "PlayerStatsUpdate",
    # User
    "UserRead",
]
