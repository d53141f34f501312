# tests/test_times.py

"""Unit tests for the per-player level time projection."""

from spacedash.ranking.times import aggregate
from spacedash.schemas.player_stats import PlayerStat


def test_one_entry_per_record_in_input_order():
    records = [
        PlayerStat(username="zed", fastest_times={"level1": [3.0, 4.5]}),
        PlayerStat(username="amy"),
        PlayerStat(username="kim", fastest_times={"level2": [], "level1": [9.0]}),
    ]

    result = aggregate(records)

    assert len(result) == len(records)
    assert [entry.username for entry in result] == ["zed", "amy", "kim"]
    assert result[0].per_level == {"level1": [3.0, 4.5]}
    assert result[1].per_level == {}
    assert result[2].per_level == {"level2": [], "level1": [9.0]}


def test_empty_input():
    assert aggregate([]) == []


def test_output_lists_are_copies():
    """The projection never hands out the record's own lists."""
    record = PlayerStat(username="a", fastest_times={"level1": [1.0]})

    entry = aggregate([record])[0]
    entry.per_level["level1"].append(99.0)

    assert record.fastest_times == {"level1": [1.0]}
