"""Lifetime and same-day aggregates built from a game log."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, tzinfo

from domain.common import GameRecord
from domain.errors import AggregationError, StatsError
from domain.stats.group import StatsGroup

logger = logging.getLogger(__name__)


class AggregateStore:
    """Stateful record-by-record aggregator for the lifetime and today scopes.

    The today scope is bound to the calendar day of ``reference_time`` once,
    at construction, and is never re-derived from the wall clock. Records are
    expected in ascending timestamp order; ordering is not checked.
    """

    def __init__(self, reference_time: datetime | None = None) -> None:
        reference = reference_time or datetime.now()
        if reference.tzinfo is None:
            reference = reference.astimezone()
        self.reference_tz: tzinfo | None = reference.tzinfo
        self.reference_day: date = reference.date()
        self.lifetime = StatsGroup()
        self.today = StatsGroup()

    @classmethod
    def empty(cls, reference_time: datetime | None = None) -> AggregateStore:
        return cls(reference_time)

    @classmethod
    def from_records(
        cls,
        records: Iterable[GameRecord],
        reference_time: datetime | None = None,
    ) -> AggregateStore:
        """Fold a full history into a fresh store.

        Every failing record is collected and reported in one
        ``AggregationError`` instead of stopping at the first.
        """
        store = cls(reference_time)
        errors: list[StatsError] = []
        processed = 0
        for record in records:
            processed += 1
            try:
                store.add_game(record)
            except StatsError as exc:
                logger.error("failed adding %s game at %s: %s", record.map, record.date_time, exc)
                errors.append(exc)

        if errors:
            raise AggregationError(errors)

        logger.debug(
            "built stats from %d records reference_day=%s",
            processed,
            store.reference_day.isoformat(),
        )
        return store

    def day_of(self, record: GameRecord) -> date:
        """Calendar day of a record, seen from the reference timezone."""
        return record.date_time.astimezone(self.reference_tz).date()

    def is_today(self, record: GameRecord, today: date | None = None) -> bool:
        return self.day_of(record) == (today or self.reference_day)

    def _groups_for(self, record: GameRecord, today: date | None) -> list[StatsGroup]:
        groups = [self.lifetime]
        if self.is_today(record, today):
            groups.append(self.today)
        # Validate every affected group before any of them is touched.
        for group in groups:
            group.check_map_entry(record.map)
        return groups

    def add_win(self, record: GameRecord, today: date | None = None) -> None:
        for group in self._groups_for(record, today):
            group.add_win(record.map)

    def add_loss(self, record: GameRecord, today: date | None = None) -> None:
        for group in self._groups_for(record, today):
            group.add_loss(record.map)

    def add_game(self, record: GameRecord, today: date | None = None) -> None:
        if record.did_win:
            self.add_win(record, today)
        else:
            self.add_loss(record, today)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregateStore):
            return NotImplemented
        return (
            self.reference_day == other.reference_day
            and self.lifetime == other.lifetime
            and self.today == other.today
        )

    def __repr__(self) -> str:
        return (
            f"AggregateStore(reference_day={self.reference_day.isoformat()}, "
            f"lifetime={self.lifetime!r}, today={self.today!r})"
        )


__all__ = ["AggregateStore"]
