"""Session flows tying the game log store to the stats engine."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from sqlalchemy.orm import Session

from domain.common import GameRecord
from domain.errors import StatsError
from domain.stats.store import AggregateStore
from repositories.games import count_games, fetch_games, insert_game, insert_games
from repositories.stat_sheet import load_stat_sheet, write_stat_sheet

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


@dataclass(frozen=True)
class ImportSummary:
    """Outcome of importing one legacy stat sheet."""

    sheet_path: str
    imported_games: int
    existing_games: int
    lifetime_wins: int
    lifetime_losses: int
    dry_run: bool


def load_store(
    session_factory: SessionFactory,
    *,
    reference_time: datetime | None = None,
) -> AggregateStore:
    """Rebuild the aggregates from every stored game."""
    with session_factory() as session:
        games = fetch_games(session)
    logger.debug("loaded %d games from storage", len(games))
    return AggregateStore.from_records(games, reference_time)


def record_game(
    session_factory: SessionFactory,
    store: AggregateStore,
    record: GameRecord,
) -> AggregateStore:
    """Persist one game, then fold it into ``store``.

    The game is committed before the aggregates change, so a failed update
    never loses history.
    """
    with session_factory() as session:
        try:
            insert_game(session, record)
            session.commit()
        except Exception:
            session.rollback()
            raise

    logger.info("recorded game map=%s did_win=%s", record.map, record.did_win)

    try:
        store.add_game(record)
    except StatsError:
        logger.exception("failed updating stats for %s game", record.map)
        raise
    return store


def import_stat_sheet(
    session_factory: SessionFactory,
    sheet_path: Path,
    *,
    dry_run: bool = False,
    echo: Callable[[str], None] | None = None,
) -> ImportSummary:
    """Load a legacy JSON stat sheet, validate it, and store its games."""
    records = load_stat_sheet(sheet_path)
    # Batch construction reports every bad record at once.
    store = AggregateStore.from_records(records)

    with session_factory() as session:
        existing_games = count_games(session)
        if dry_run:
            if echo is not None:
                echo(
                    f"[dry-run] sheet={sheet_path} "
                    f"games={len(records)} existing_games={existing_games}"
                )
            return ImportSummary(
                sheet_path=str(sheet_path),
                imported_games=0,
                existing_games=existing_games,
                lifetime_wins=store.lifetime.wins,
                lifetime_losses=store.lifetime.losses,
                dry_run=True,
            )

        try:
            insert_games(session, records)
            session.commit()
        except Exception:
            session.rollback()
            raise

    logger.info("imported %d games from %s", len(records), sheet_path)
    if echo is not None:
        echo(
            f"completed sheet={sheet_path} "
            f"imported_games={len(records)} existing_games={existing_games}"
        )
    return ImportSummary(
        sheet_path=str(sheet_path),
        imported_games=len(records),
        existing_games=existing_games,
        lifetime_wins=store.lifetime.wins,
        lifetime_losses=store.lifetime.losses,
        dry_run=False,
    )


def export_stat_sheet(session_factory: SessionFactory, sheet_path: Path) -> int:
    """Write every stored game to a legacy JSON stat sheet."""
    with session_factory() as session:
        games = fetch_games(session)
    write_stat_sheet(sheet_path, games)
    logger.info("exported %d games to %s", len(games), sheet_path)
    return len(games)


__all__ = [
    "ImportSummary",
    "export_stat_sheet",
    "import_stat_sheet",
    "load_store",
    "record_game",
]
