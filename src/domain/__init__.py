"""Gunfight stats domain modules."""

from domain.common import GameRecord, sort_records
from domain.errors import AggregationError, MapEntryMissingError, StatsError
from domain.maps import CodVersion, GunfightMap

__all__ = [
    "AggregationError",
    "CodVersion",
    "GameRecord",
    "GunfightMap",
    "MapEntryMissingError",
    "StatsError",
    "sort_records",
]
