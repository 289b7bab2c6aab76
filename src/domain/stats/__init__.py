"""Win/loss and streak aggregation."""

from domain.stats.group import StatsGroup
from domain.stats.map_stats import MapStats, rank_map_stats, win_percentage
from domain.stats.store import AggregateStore

__all__ = ["AggregateStore", "MapStats", "StatsGroup", "rank_map_stats", "win_percentage"]
