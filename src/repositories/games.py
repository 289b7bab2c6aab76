"""Persistence helpers for the game record log."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, timedelta, timezone
from typing import Any

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from domain.common import GameRecord, sort_records
from domain.maps import GunfightMap
from models import Base, GamePlayed

logger = logging.getLogger(__name__)


def _record_to_row(record: GameRecord) -> dict[str, Any]:
    offset = record.date_time.utcoffset() or timedelta(0)
    return {
        "map_name": record.map.value,
        "did_win": record.did_win,
        "played_at": record.date_time.astimezone(UTC).replace(tzinfo=None),
        "utc_offset_seconds": int(offset.total_seconds()),
    }


def _row_to_record(row: GamePlayed) -> GameRecord:
    zone = timezone(timedelta(seconds=row.utc_offset_seconds))
    return GameRecord(
        map=GunfightMap(row.map_name),
        did_win=bool(row.did_win),
        date_time=row.played_at.replace(tzinfo=UTC).astimezone(zone),
    )


def ensure_game_schema(engine: Engine) -> None:
    """Create the games_played table and its index if they do not exist."""
    with engine.begin() as connection:
        Base.metadata.create_all(bind=connection, tables=[GamePlayed.__table__], checkfirst=True)
    logger.info("ensured games_played schema on %s", engine.url.render_as_string(hide_password=True))


def insert_game(session: Session, record: GameRecord) -> GamePlayed:
    """Add one game and flush so it receives an id."""
    row = GamePlayed(**_record_to_row(record))
    session.add(row)
    session.flush()
    return row


def insert_games(session: Session, records: Sequence[GameRecord]) -> None:
    """Bulk insert games."""
    if not records:
        return
    session.execute(insert(GamePlayed), [_record_to_row(record) for record in records])


def fetch_games(session: Session) -> list[GameRecord]:
    """Return every stored game, ascending by timestamp."""
    rows = session.execute(
        select(GamePlayed).order_by(GamePlayed.played_at, GamePlayed.id)
    ).scalars()
    return sort_records(_row_to_record(row) for row in rows)


def count_games(session: Session) -> int:
    result = session.scalar(select(func.count(GamePlayed.id)))
    return int(result or 0)


__all__ = ["count_games", "ensure_game_schema", "fetch_games", "insert_game", "insert_games"]
