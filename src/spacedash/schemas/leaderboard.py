# src/spacedash/schemas/leaderboard.py

"""Leaderboard schemas for stat rankings."""

from pydantic import ConfigDict, Field

from .common import CamelModel


class RankedEntry(CamelModel):
    """Single entry of a top-N ranking.

    Attributes:
        username: The ranked player
        metric_value: Value of the ranking metric for this player
    """

    username: str
    metric_value: int

    model_config = ConfigDict(frozen=True)


class LevelTimes(CamelModel):
    """All recorded completion times of one player, per level."""

    username: str
    per_level: dict[str, list[float]] = Field(default_factory=dict)


class Leaderboard(CamelModel):
    """The composed leaderboard document."""

    top_coins: list[RankedEntry] = Field(default_factory=list)
    top_enemies: list[RankedEntry] = Field(default_factory=list)
    all_fastest_times: list[LevelTimes] = Field(default_factory=list)
