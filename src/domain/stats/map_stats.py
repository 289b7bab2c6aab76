"""Per-map win/loss counters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from domain.maps import GunfightMap


def win_percentage(wins: int, losses: int) -> float:
    """Percentage of games won, 0.0 when nothing has been played."""
    total = wins + losses
    if total == 0:
        return 0.0
    return (wins / total) * 100.0


@dataclass
class MapStats:
    wins: int = 0
    losses: int = 0

    @property
    def win_percentage(self) -> float:
        return win_percentage(self.wins, self.losses)

    def __str__(self) -> str:
        return f"{self.wins} - {self.losses} ({self.win_percentage:.0f} %)"


def rank_map_stats(
    map_stats: Mapping[GunfightMap, MapStats],
) -> list[tuple[GunfightMap, MapStats]]:
    """Order entries by descending win percentage.

    Ties keep the mapping's iteration order.
    """
    return sorted(map_stats.items(), key=lambda item: item[1].win_percentage, reverse=True)


__all__ = ["MapStats", "rank_map_stats", "win_percentage"]
