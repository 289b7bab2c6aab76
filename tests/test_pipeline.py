"""Tests for the storage-backed stats flows."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from domain.errors import MapEntryMissingError
from domain.maps import GunfightMap
from domain.pipeline import export_stat_sheet, import_stat_sheet, load_store, record_game
from domain.stats.map_stats import MapStats
from domain.stats.store import AggregateStore
from repositories.games import count_games, fetch_games, insert_games
from helpers import at, game, games_from_pattern


def _write_sheet(path: Path, entries: list[dict]) -> Path:
    path.write_text(json.dumps(entries))
    return path


def test_load_store_on_empty_database(session_factory) -> None:
    store = load_store(session_factory, reference_time=at(29))
    assert store == AggregateStore.empty(at(29))


def test_load_store_replays_stored_games(session_factory) -> None:
    games = games_from_pattern("LWWLLWWWWLWWW", 26) + games_from_pattern("WWWLWWLLWWWWL", 28)
    with session_factory() as session:
        insert_games(session, list(reversed(games)))
        session.commit()

    store = load_store(session_factory, reference_time=at(28))

    assert store == AggregateStore.from_records(games, at(28))
    assert store.today.wins == 9


def test_record_game_persists_then_updates(session_factory) -> None:
    store = load_store(session_factory, reference_time=at(29))
    record = game(True, 29, 10, GunfightMap.DOCKS)

    record_game(session_factory, store, record)

    with session_factory() as session:
        assert fetch_games(session) == [record]
    assert store.lifetime.get_map_stats(GunfightMap.DOCKS) == MapStats(wins=1, losses=0)
    assert store.today.win_streak == 1


def test_record_game_keeps_history_when_update_fails(session_factory) -> None:
    store = load_store(session_factory, reference_time=at(29))
    store.lifetime.map_stats[GunfightMap.DOCKS] = None  # type: ignore[assignment]

    with pytest.raises(MapEntryMissingError):
        record_game(session_factory, store, game(False, 29, 1, GunfightMap.DOCKS))

    with session_factory() as session:
        assert count_games(session) == 1


def test_import_stat_sheet_inserts_games(session_factory, tmp_path: Path) -> None:
    sheet = _write_sheet(
        tmp_path / "sheet.json",
        [
            {"map": "Asile9", "did_win": False, "date_time": "2023-09-26T00:00:01-04:00"},
            {"map": "Asile9", "did_win": True, "date_time": "2023-09-26T00:00:02-04:00"},
            {"map": "Docks", "did_win": True, "date_time": "2023-09-26T00:00:03-04:00"},
        ],
    )
    messages: list[str] = []

    summary = import_stat_sheet(session_factory, sheet, echo=messages.append)

    assert summary.imported_games == 3
    assert summary.existing_games == 0
    assert summary.lifetime_wins == 2
    assert summary.lifetime_losses == 1
    assert summary.dry_run is False
    assert messages and messages[-1].startswith("completed")
    with session_factory() as session:
        assert count_games(session) == 3


def test_import_stat_sheet_dry_run_writes_nothing(session_factory, tmp_path: Path) -> None:
    sheet = _write_sheet(
        tmp_path / "sheet.json",
        [{"map": "Hill", "did_win": True, "date_time": "2023-09-28T00:00:03-04:00"}],
    )

    summary = import_stat_sheet(session_factory, sheet, dry_run=True)

    assert summary.dry_run is True
    assert summary.imported_games == 0
    assert summary.lifetime_wins == 1
    with session_factory() as session:
        assert count_games(session) == 0


def test_export_stat_sheet_writes_sorted_games(session_factory, tmp_path: Path) -> None:
    games = [game(True, 28, 1), game(False, 26, 1, GunfightMap.PINE)]
    with session_factory() as session:
        insert_games(session, games)
        session.commit()

    sheet = tmp_path / "export.json"
    exported = export_stat_sheet(session_factory, sheet)

    assert exported == 2
    entries = json.loads(sheet.read_text())
    assert [entry["map"] for entry in entries] == ["Pine", "Asile9"]
