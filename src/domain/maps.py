"""Gunfight map identifiers and per-title map sets."""

from __future__ import annotations

from enum import Enum


class CodVersion(str, Enum):
    """Which Call of Duty title the map list is drawn from."""

    MW = "mw"
    MW3 = "mw3"


class GunfightMap(str, Enum):
    """Closed set of gunfight arenas."""

    # Both
    RUST = "Rust"
    SHIPMENT = "Shipment"
    # MW
    ASILE9 = "Asile9"
    ATRIUM = "Atrium"
    BAZAAR = "Bazaar"
    CARGO = "Cargo"
    DOCKS = "Docks"
    DRAINAGE = "Drainage"
    GULAG_SHOWERS = "GulagShowers"
    HILL = "Hill"
    KING = "King"
    LIVESTOCK = "Livestock"
    PINE = "Pine"
    SHOOTHOUSE = "Shoothouse"
    SPEEDBALL = "Speedball"
    STACK = "Stack"
    STATION = "Station"
    TRENCH = "Trench"
    VERDANSK_STADIUM = "VerdanskStadium"
    # MW3
    DAS_HAUS = "DasHaus"
    STASH_HOUSE = "StashHouse"
    ALLEY = "Alley"
    BLACKSITE = "Blacksite"
    EXHIBIT = "Exhibit"
    MEAT = "Meat"
    TRAINING_FACILITY = "TrainingFacility"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> GunfightMap:
        """Resolve a map from its display name, ignoring case."""
        normalized = name.strip().lower()
        for game_map in cls:
            if game_map.value.lower() == normalized:
                return game_map
        available = ", ".join(game_map.value for game_map in cls)
        raise ValueError(f"Unknown map '{name}'. Choose one of: {available}.")


MW3_MAPS = frozenset(
    {
        GunfightMap.DAS_HAUS,
        GunfightMap.STASH_HOUSE,
        GunfightMap.ALLEY,
        GunfightMap.BLACKSITE,
        GunfightMap.EXHIBIT,
        GunfightMap.MEAT,
        GunfightMap.TRAINING_FACILITY,
    }
)
SHARED_MAPS = frozenset({GunfightMap.RUST, GunfightMap.SHIPMENT})


def is_mw(game_map: GunfightMap) -> bool:
    return game_map not in MW3_MAPS


def is_mw3(game_map: GunfightMap) -> bool:
    return game_map in MW3_MAPS or game_map in SHARED_MAPS


def maps_for_version(cod_version: CodVersion) -> list[GunfightMap]:
    """Return the maps playable in one title, in declaration order."""
    if cod_version == CodVersion.MW:
        return [game_map for game_map in GunfightMap if is_mw(game_map)]
    return [game_map for game_map in GunfightMap if is_mw3(game_map)]


__all__ = [
    "CodVersion",
    "GunfightMap",
    "MW3_MAPS",
    "SHARED_MAPS",
    "is_mw",
    "is_mw3",
    "maps_for_version",
]
