"""Read and write the legacy JSON stat sheet.

The sheet is a JSON array of ``{"map", "did_win", "date_time"}`` objects
with RFC 3339 timestamps, sorted ascending by ``date_time``.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from domain.common import GameRecord, sort_records
from domain.maps import GunfightMap

logger = logging.getLogger(__name__)

# Sheets written by older tooling carry nanosecond fractions.
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def parse_timestamp(value: str) -> datetime:
    normalized = _FRACTION_RE.sub(r"\1", value.strip())
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    return datetime.fromisoformat(normalized)


def _entry_to_record(entry: Any, index: int, file_path: Path) -> GameRecord:
    if not isinstance(entry, dict):
        raise ValueError(f"{file_path}: entry {index} must be an object")

    missing_fields = [key for key in ("map", "did_win", "date_time") if key not in entry]
    if missing_fields:
        raise ValueError(f"{file_path}: entry {index} missing required fields: {missing_fields}")

    if not isinstance(entry["did_win"], bool):
        raise ValueError(f"{file_path}: entry {index} did_win must be true or false")

    try:
        game_map = GunfightMap(entry["map"])
        date_time = parse_timestamp(str(entry["date_time"]))
        return GameRecord(map=game_map, did_win=entry["did_win"], date_time=date_time)
    except ValueError as exc:
        raise ValueError(f"{file_path}: entry {index} is invalid: {exc}") from exc


def _record_to_entry(record: GameRecord) -> dict[str, Any]:
    return {
        "map": record.map.value,
        "did_win": record.did_win,
        "date_time": record.date_time.isoformat(),
    }


def load_stat_sheet(file_path: Path) -> list[GameRecord]:
    """Load a stat sheet and return its records sorted by timestamp."""
    if not file_path.exists():
        raise FileNotFoundError(f"Stat sheet not found: {file_path}")

    logger.debug("loading stat sheet %s", file_path)
    with file_path.open("r", encoding="utf-8") as file:
        raw = json.load(file)
    if not isinstance(raw, list):
        raise ValueError(f"{file_path}: stat sheet must be a JSON array")

    records = sort_records(
        _entry_to_record(entry, index, file_path) for index, entry in enumerate(raw)
    )
    logger.debug("loaded %d games from %s", len(records), file_path)
    return records


def write_stat_sheet(file_path: Path, records: Sequence[GameRecord]) -> None:
    """Sort records and write them as a pretty-printed stat sheet."""
    payload = [_record_to_entry(record) for record in sort_records(records)]
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8") as file:
        json.dump(payload, file, indent=2)
        file.write("\n")
    logger.debug("wrote %d games to %s", len(payload), file_path)


__all__ = ["load_stat_sheet", "parse_timestamp", "write_stat_sheet"]
