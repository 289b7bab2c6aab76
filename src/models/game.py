"""games_played table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class GamePlayed(Base):
    """One recorded gunfight result; the durable source of truth for all stats."""

    __tablename__ = "games_played"
    __table_args__ = (Index("idx_games_played_played_at", "played_at", "id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    map_name: Mapped[str] = mapped_column(String(64), nullable=False)
    did_win: Mapped[bool] = mapped_column(Boolean, nullable=False)
    # Naive UTC; the record's UTC offset is kept separately to restore its zone.
    played_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    utc_offset_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
