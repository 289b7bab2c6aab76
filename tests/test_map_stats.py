"""Unit tests for per-map counters and display ordering."""

from __future__ import annotations

import pytest

from domain.maps import GunfightMap
from domain.stats.map_stats import MapStats, rank_map_stats, win_percentage


def test_win_percentage_without_games_is_zero() -> None:
    assert MapStats().win_percentage == pytest.approx(0.0)
    assert win_percentage(0, 0) == pytest.approx(0.0)


def test_win_percentage_three_of_four() -> None:
    assert MapStats(wins=3, losses=1).win_percentage == pytest.approx(75.0)


def test_win_percentage_bounds() -> None:
    assert MapStats(wins=4, losses=0).win_percentage == pytest.approx(100.0)
    assert MapStats(wins=0, losses=4).win_percentage == pytest.approx(0.0)


def test_map_stats_display() -> None:
    assert str(MapStats(wins=1, losses=0)) == "1 - 0 (100 %)"
    assert str(MapStats(wins=2, losses=1)) == "2 - 1 (67 %)"


def test_rank_map_stats_descending_by_percentage() -> None:
    ranked = rank_map_stats(
        {
            GunfightMap.DOCKS: MapStats(wins=1, losses=3),
            GunfightMap.ASILE9: MapStats(wins=3, losses=1),
            GunfightMap.HILL: MapStats(wins=1, losses=1),
        }
    )
    assert [game_map for game_map, _ in ranked] == [
        GunfightMap.ASILE9,
        GunfightMap.HILL,
        GunfightMap.DOCKS,
    ]


def test_rank_map_stats_empty() -> None:
    assert rank_map_stats({}) == []
