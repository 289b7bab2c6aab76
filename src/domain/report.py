"""Plain-text rendering of stats for the command line."""

from __future__ import annotations

from itertools import zip_longest

from domain.common import GameRecord
from domain.maps import GunfightMap
from domain.stats.group import StatsGroup
from domain.stats.map_stats import MapStats, rank_map_stats
from domain.stats.store import AggregateStore

_COLUMN_GAP = "   "


def _stat_rows(group: StatsGroup) -> list[tuple[str, str]]:
    return [
        ("Dub's", str(group.wins)),
        ("Dub %", f"{group.win_percentage:.2f}"),
        ("Longest Dub Streak", str(group.high_win_streak)),
        ("L's", str(group.losses)),
        ("Longest L-L-L Streak", str(group.high_loss_streak)),
    ]


def format_stat_table(group: StatsGroup, title: str) -> str:
    rows = _stat_rows(group)
    label_width = max(len(label) for label, _ in rows)
    value_width = max(len(value) for _, value in rows)
    inner_width = max(label_width + value_width + 5, len(title) + 2)
    border = "+" + "-" * inner_width + "+"

    lines = [border, f"|{title:^{inner_width}}|", border]
    for label, value in rows:
        lines.append(f"| {label:<{label_width}} | {value:>{value_width}} |")
    lines.append(border)
    return "\n".join(lines)


def format_summary(store: AggregateStore) -> str:
    """Today's and lifetime tables side by side."""
    today_lines = format_stat_table(store.today, "Today's Stats").splitlines()
    lifetime_lines = format_stat_table(store.lifetime, "Lifetime Stats").splitlines()
    left_width = max(len(line) for line in today_lines)
    return "\n".join(
        f"{left:<{left_width}}{_COLUMN_GAP}{right}".rstrip()
        for left, right in zip_longest(today_lines, lifetime_lines, fillvalue="")
    )


def format_map_stats(game_map: GunfightMap, map_stats: MapStats) -> str:
    return f"{game_map}: {map_stats}"


def format_map_rankings(store: AggregateStore) -> str:
    lines = ["Lifetime:", "---"]
    lines.extend(
        format_map_stats(game_map, stats)
        for game_map, stats in rank_map_stats(store.lifetime.get_all_map_stats())
    )
    lines.extend(["", "Today:", "---"])
    lines.extend(
        format_map_stats(game_map, stats)
        for game_map, stats in rank_map_stats(store.today.get_all_map_stats())
    )
    return "\n".join(lines)


def format_current_streak(group: StatsGroup) -> str:
    last_was_win, length = group.current_streak()
    kind = "Winning" if last_was_win else "Losing"
    return f"You are on a {kind} streak of {length}."


def format_saved_game(record: GameRecord, store: AggregateStore) -> str:
    last_was_win, length = store.lifetime.current_streak()
    result = "Win" if record.did_win else "Loss"
    kind = "Winning" if last_was_win else "Losing"
    return f"{result} on {record.map} saved. {kind} Streak now {length}."


__all__ = [
    "format_current_streak",
    "format_map_rankings",
    "format_map_stats",
    "format_saved_game",
    "format_stat_table",
    "format_summary",
]
