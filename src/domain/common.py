"""Shared record types for the stats engine."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from domain.maps import GunfightMap


@dataclass(frozen=True)
class GameRecord:
    """One finished gunfight: where it was played, whether it was won, and when."""

    map: GunfightMap
    did_win: bool
    date_time: datetime

    def __post_init__(self) -> None:
        if self.date_time.tzinfo is None or self.date_time.utcoffset() is None:
            raise ValueError(
                f"date_time for {self.map} game must be timezone-aware, got {self.date_time!r}"
            )


def sort_records(records: Iterable[GameRecord]) -> list[GameRecord]:
    """Return records ascending by timestamp; equal instants keep input order."""
    return sorted(records, key=lambda record: record.date_time)


__all__ = ["GameRecord", "sort_records"]
