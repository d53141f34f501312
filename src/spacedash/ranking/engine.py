# src/spacedash/ranking/engine.py

"""Top-N ranking of players by a single stat."""

from collections.abc import Sequence
from enum import Enum

from spacedash.schemas.leaderboard import RankedEntry
from spacedash.schemas.player_stats import PlayerStat


class Metric(str, Enum):
    """Stats that players can be ranked by."""

    COINS = "coins"
    ENEMIES = "enemies"

    def value_of(self, record: PlayerStat) -> int:
        """Read this metric from a canonical record."""
        if self is Metric.COINS:
            return record.coins_collected
        return record.enemies_defeated


def top_n(records: Sequence[PlayerStat], metric: Metric, n: int) -> list[RankedEntry]:
    """
    Return the ``n`` highest-ranked players for ``metric``, best first.

    Players with equal values keep their relative order from ``records``.
    This relies on ``sorted`` being stable, which keeps results deterministic
    across repeated scans of the same data. A negative ``n`` yields nothing.
    """
    ranked = sorted(records, key=metric.value_of, reverse=True)
    return [
        RankedEntry(username=record.username, metric_value=metric.value_of(record))
        for record in ranked[: max(n, 0)]
    ]
