# src/spacedash/ranking/times.py

"""Per-player projection of recorded level times."""

from collections.abc import Sequence

from spacedash.schemas.leaderboard import LevelTimes
from spacedash.schemas.player_stats import PlayerStat


def aggregate(records: Sequence[PlayerStat]) -> list[LevelTimes]:
    """Collect every player's per-level times, in input order.

    Times are already sorted by the normalizer, so each list is copied as-is.
    Players without any times are kept with an empty mapping.
    """
    return [
        LevelTimes(
            username=record.username,
            per_level={level: list(times) for level, times in record.fastest_times.items()},
        )
        for record in records
    ]
