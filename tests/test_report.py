"""Tests for plain-text stat rendering."""

from __future__ import annotations

from domain.maps import GunfightMap
from domain.report import (
    format_current_streak,
    format_map_rankings,
    format_map_stats,
    format_saved_game,
    format_stat_table,
    format_summary,
)
from domain.stats.group import StatsGroup
from domain.stats.map_stats import MapStats
from domain.stats.store import AggregateStore
from helpers import at, game


def test_stat_table_rows() -> None:
    group = StatsGroup()
    group.add_win(GunfightMap.DOCKS)
    group.add_win(GunfightMap.DOCKS)
    group.add_loss(GunfightMap.HILL)

    table = format_stat_table(group, "Lifetime Stats")

    assert "Lifetime Stats" in table
    assert "| Dub's                |     2 |" in table
    assert "| Dub %                | 66.67 |" in table
    assert "| Longest Dub Streak   |     2 |" in table
    assert "| L's                  |     1 |" in table
    assert "| Longest L-L-L Streak |     1 |" in table


def test_summary_places_today_left_of_lifetime() -> None:
    store = AggregateStore.from_records([game(True, 29, 1)], at(29))
    first_line_with_titles = format_summary(store).splitlines()[1]
    assert first_line_with_titles.index("Today's Stats") < first_line_with_titles.index("Lifetime Stats")


def test_map_stats_line() -> None:
    assert format_map_stats(GunfightMap.DOCKS, MapStats(wins=1, losses=0)) == "Docks: 1 - 0 (100 %)"


def test_map_rankings_lists_both_scopes() -> None:
    records = [
        game(False, 26, 1, GunfightMap.HILL),
        game(True, 26, 2, GunfightMap.DOCKS),
        game(True, 29, 1, GunfightMap.PINE),
    ]
    store = AggregateStore.from_records(records, at(29))

    assert format_map_rankings(store).splitlines() == [
        "Lifetime:",
        "---",
        "Docks: 1 - 0 (100 %)",
        "Pine: 1 - 0 (100 %)",
        "Hill: 0 - 1 (0 %)",
        "",
        "Today:",
        "---",
        "Pine: 1 - 0 (100 %)",
    ]


def test_current_streak_lines() -> None:
    group = StatsGroup()
    assert format_current_streak(group) == "You are on a Winning streak of 0."
    group.add_loss(GunfightMap.KING)
    group.add_loss(GunfightMap.KING)
    assert format_current_streak(group) == "You are on a Losing streak of 2."


def test_saved_game_line_uses_lifetime_streak() -> None:
    records = [game(True, 26, 1), game(True, 26, 2)]
    store = AggregateStore.from_records(records, at(29))
    record = game(True, 29, 1, GunfightMap.DOCKS)
    store.add_game(record)

    assert format_saved_game(record, store) == "Win on Docks saved. Winning Streak now 3."
