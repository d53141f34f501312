# src/spacedash/ranking/codec.py

"""
Conversion between stored level-time lists and plain float sequences.

The stats store keeps each level's completion times in a tagged-list
encoding, where the list sits under an ``"L"`` key and each element carries
its value as a numeric string under ``"N"``:

    {"level1": {"L": [{"N": "12.5"}, {"N": "3.2"}]}}

Nothing outside this module should need to know about that shape.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

LIST_TAG = "L"
NUMBER_TAG = "N"
STRING_TAG = "S"


def parse_number(value: Any) -> float | None:
    """Parse one tagged element (or a bare number/string) into a float.

    Returns None for anything that is not a finite number.
    """
    if isinstance(value, Mapping):
        value = value.get(NUMBER_TAG)

    # bool is an int subclass but never a valid measurement
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        try:
            number = float(value)  # Decimal and friends
        except (TypeError, ValueError):
            return None

    return number if math.isfinite(number) else None


def unwrap_list(value: Any) -> list | None:
    """Return the element list of a tagged ``{"L": [...]}`` value, else None."""
    if isinstance(value, Mapping):
        elements = value.get(LIST_TAG)
        if isinstance(elements, list):
            return elements
    return None


def decode_level_times(raw: Any) -> dict[str, list[float]]:
    """Decode a stored fastest-times mapping into sorted float sequences.

    Only levels stored in the tagged-list shape are kept; anything else is
    skipped. Elements that do not parse are dropped, and a level with no
    parseable elements maps to an empty list.
    """
    if not isinstance(raw, Mapping):
        return {}

    decoded: dict[str, list[float]] = {}
    for level, stored in raw.items():
        elements = unwrap_list(stored)
        if elements is None:
            continue

        times = [t for t in (parse_number(e) for e in elements) if t is not None]
        decoded[str(level)] = sorted(times)

    return decoded


def encode_level_times(times: Mapping[str, Sequence[float]]) -> dict[str, dict]:
    """Encode plain per-level times into the tagged-list storage shape."""
    return {
        level: {LIST_TAG: [{NUMBER_TAG: repr(float(t))} for t in values]}
        for level, values in times.items()
    }
