"""Win/loss aggregate for one scope (lifetime or a single day)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from domain.errors import MapEntryMissingError
from domain.maps import GunfightMap
from domain.stats.map_stats import MapStats, win_percentage


@dataclass
class StatsGroup:
    """Counts, current streaks and streak high-water marks for one scope.

    Only ``add_win``/``add_loss`` mutate a group. ``win_streak`` and
    ``loss_streak`` are never both nonzero, and each high-water mark is at
    least the matching current streak.
    """

    wins: int = 0
    losses: int = 0
    high_win_streak: int = 0
    high_loss_streak: int = 0
    win_streak: int = 0
    loss_streak: int = 0
    last_was_win: bool = True
    map_stats: dict[GunfightMap, MapStats] = field(default_factory=dict)

    @property
    def win_percentage(self) -> float:
        return win_percentage(self.wins, self.losses)

    def get_map_stats(self, game_map: GunfightMap) -> MapStats | None:
        return self.map_stats.get(game_map)

    def get_all_map_stats(self) -> Mapping[GunfightMap, MapStats]:
        return MappingProxyType(self.map_stats)

    def current_streak(self) -> tuple[bool, int]:
        """Return ``(last_was_win, length)`` of the run in progress."""
        if self.last_was_win:
            return True, self.win_streak
        return False, self.loss_streak

    def check_map_entry(self, game_map: GunfightMap) -> MapStats | None:
        """Return the entry for ``game_map``, or None if the map is unseen.

        Raises ``MapEntryMissingError`` when the key exists without an entry.
        """
        if game_map not in self.map_stats:
            return None
        entry = self.map_stats.get(game_map)
        if entry is None:
            raise MapEntryMissingError(game_map)
        return entry

    def add_win(self, game_map: GunfightMap) -> None:
        entry = self.check_map_entry(game_map)
        if entry is None:
            self.map_stats[game_map] = MapStats(wins=1, losses=0)
        else:
            entry.wins += 1

        self.wins += 1
        self.last_was_win = True
        self.win_streak += 1
        self.high_win_streak = max(self.high_win_streak, self.win_streak)
        # The loss run ends here; keep it as a high-water candidate before zeroing.
        self.high_loss_streak = max(self.high_loss_streak, self.loss_streak)
        self.loss_streak = 0

    def add_loss(self, game_map: GunfightMap) -> None:
        entry = self.check_map_entry(game_map)
        if entry is None:
            self.map_stats[game_map] = MapStats(wins=0, losses=1)
        else:
            entry.losses += 1

        self.losses += 1
        self.last_was_win = False
        self.loss_streak += 1
        self.high_loss_streak = max(self.high_loss_streak, self.loss_streak)
        self.high_win_streak = max(self.high_win_streak, self.win_streak)
        self.win_streak = 0


__all__ = ["StatsGroup"]
