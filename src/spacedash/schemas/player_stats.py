# src/spacedash/schemas/player_stats.py

"""Player statistics schemas."""

from pydantic import ConfigDict, Field

from .common import CamelModel


class PlayerStat(CamelModel):
    """Canonical, fully-defaulted statistics for one player.

    Built only by the record normalizer; never mutated afterwards.

    Attributes:
        username: Player identity (primary key of the stats store)
        coins_collected: Total coins collected
        enemies_defeated: Total enemies defeated
        levels_completed: Level identifiers in the order they were stored
        fastest_times: Level identifier -> ascending completion times (seconds)
    """

    username: str = ""
    coins_collected: int = 0
    enemies_defeated: int = 0
    levels_completed: list[str] = Field(default_factory=list)
    fastest_times: dict[str, list[float]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class PlayerStatsUpdate(CamelModel):
    """Payload for overwriting a player's stats.

    ``username`` is optional at the schema level so that a missing identity
    is reported as a 400 by the handler rather than a schema error.
    """

    username: str | None = None
    coins_collected: int = 0
    enemies_defeated: int = 0
    levels_completed: list[str] = Field(default_factory=list)
    fastest_times: dict[str, list[float]] = Field(default_factory=dict)


class PlayerStatsResponse(CamelModel):
    """Envelope returned by the player stats endpoints."""

    message: str
    data: PlayerStat
