"""Record builders shared across tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from domain.common import GameRecord
from domain.maps import GunfightMap

EDT = timezone(timedelta(hours=-4))


def at(day: int, second: int = 0, *, hour: int = 0, month: int = 9, year: int = 2023) -> datetime:
    return datetime(year, month, day, hour, 0, second, tzinfo=EDT)


def game(
    did_win: bool,
    day: int,
    second: int,
    game_map: GunfightMap = GunfightMap.ASILE9,
) -> GameRecord:
    return GameRecord(map=game_map, did_win=did_win, date_time=at(day, second))


def games_from_pattern(pattern: str, day: int) -> list[GameRecord]:
    """Build Asile9 games from a string like ``"LWWL"``, one second apart."""
    return [game(outcome == "W", day, second) for second, outcome in enumerate(pattern, start=1)]
