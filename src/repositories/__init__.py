"""Database and file repository helpers."""

from repositories.games import (
    count_games,
    ensure_game_schema,
    fetch_games,
    insert_game,
    insert_games,
)
from repositories.stat_sheet import load_stat_sheet, write_stat_sheet

__all__ = [
    "count_games",
    "ensure_game_schema",
    "fetch_games",
    "insert_game",
    "insert_games",
    "load_stat_sheet",
    "write_stat_sheet",
]
