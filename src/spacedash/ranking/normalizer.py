# src/spacedash/ranking/normalizer.py

"""Turns raw stats store records into canonical PlayerStat values."""

import math
from collections.abc import Mapping
from typing import Any

from spacedash.ranking import codec
from spacedash.schemas.player_stats import PlayerStat

# Field names used by the stats store
USERNAME_FIELD = "username"
COINS_FIELD = "coins-collected"
ENEMIES_FIELD = "enemies-defeated"
LEVELS_FIELD = "levels-completed"
TIMES_FIELD = "fastest-times"

# Value used for each field when it is absent or unparseable
DEFAULT_USERNAME = ""
DEFAULT_COUNT = 0


def parse_count(value: Any) -> int:
    """Parse a stored counter, falling back to 0.

    Accepts ints, finite floats and numeric strings (truncated toward zero),
    plus tagged ``{"N": "..."}`` values. Negative values are kept as-is.
    """
    if isinstance(value, Mapping):
        value = value.get(codec.NUMBER_TAG)

    if value is None or isinstance(value, bool):
        return DEFAULT_COUNT
    if isinstance(value, int):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            return DEFAULT_COUNT

    try:
        number = float(value)
    except (TypeError, ValueError):
        return DEFAULT_COUNT
    return int(number) if math.isfinite(number) else DEFAULT_COUNT


def parse_levels(value: Any) -> list[str]:
    """Pass through a list of level identifiers, or return an empty list.

    A tagged ``{"L": [{"S": ...}]}`` list of strings is unwrapped first.
    """
    elements = codec.unwrap_list(value)
    if elements is not None:
        value = [
            e.get(codec.STRING_TAG) if isinstance(e, Mapping) else e for e in elements
        ]

    if not isinstance(value, list):
        return []
    if not all(isinstance(level, str) for level in value):
        return []
    return list(value)


def parse_username(value: Any) -> str:
    if isinstance(value, Mapping):
        value = value.get(codec.STRING_TAG)
    return value if isinstance(value, str) else DEFAULT_USERNAME


def normalize(raw: Mapping[str, Any]) -> PlayerStat:
    """Build a fully-defaulted PlayerStat from a raw record.

    Never raises: each malformed field degrades to its own default so a
    single corrupt value cannot drop the player from a leaderboard.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    return PlayerStat(
        username=parse_username(raw.get(USERNAME_FIELD)),
        coins_collected=parse_count(raw.get(COINS_FIELD)),
        enemies_defeated=parse_count(raw.get(ENEMIES_FIELD)),
        levels_completed=parse_levels(raw.get(LEVELS_FIELD)),
        fastest_times=codec.decode_level_times(raw.get(TIMES_FIELD)),
    )
