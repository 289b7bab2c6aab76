"""Error types raised by the stats engine."""

from __future__ import annotations

from collections.abc import Sequence

from domain.maps import GunfightMap


class StatsError(Exception):
    """Base class for stats engine failures."""


class MapEntryMissingError(StatsError):
    """A map key is present in a stats group but has no entry behind it.

    The insert-else-increment bookkeeping never produces this state, so it
    always indicates a defect rather than bad input.
    """

    def __init__(self, game_map: GunfightMap) -> None:
        super().__init__(f"Could not find map {game_map} in stats.")
        self.game_map = game_map


class AggregationError(StatsError):
    """Every per-record failure from one batch construction."""

    def __init__(self, errors: Sequence[StatsError]) -> None:
        self.errors = list(errors)
        details = "; ".join(str(error) for error in self.errors)
        super().__init__(f"Failed creating stats ({len(self.errors)} errors): {details}")


__all__ = ["AggregationError", "MapEntryMissingError", "StatsError"]
