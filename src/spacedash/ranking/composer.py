# src/spacedash/ranking/composer.py

"""Builds the leaderboard document from canonical records."""

from collections.abc import Sequence

from spacedash.ranking.engine import Metric, top_n
from spacedash.ranking.times import aggregate
from spacedash.schemas.leaderboard import Leaderboard
from spacedash.schemas.player_stats import PlayerStat

# Number of players shown in each ranking
LEADERBOARD_SIZE = 10


def compose(records: Sequence[PlayerStat], size: int = LEADERBOARD_SIZE) -> Leaderboard:
    """Rank ``records`` by coins and by enemies, and gather all level times."""
    return Leaderboard(
        top_coins=top_n(records, Metric.COINS, size),
        top_enemies=top_n(records, Metric.ENEMIES, size),
        all_fastest_times=aggregate(records),
    )
