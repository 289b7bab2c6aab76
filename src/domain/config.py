"""Load tracker settings from a TOML file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import tomllib

from domain.maps import CodVersion

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = ROOT_DIR / "configs" / "tracker" / "default.toml"
DEFAULT_DB_URL = "sqlite:///stat_sheet.db"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class TrackerConfig:
    """Where games are stored and how the tracker runs."""

    name: str
    description: str | None
    file_path: Path
    db_url: str
    cod_version: CodVersion
    log_level: str

    def as_config_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "db_url": self.db_url,
            "cod_version": self.cod_version.value,
            "log_level": self.log_level,
        }


def load_tracker_config(file_path: Path = DEFAULT_CONFIG_PATH) -> TrackerConfig:
    """Load and validate one tracker TOML config file."""
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")
    if not file_path.is_file():
        raise ValueError(f"Config path is not a file: {file_path}")

    with file_path.open("rb") as file:
        raw = tomllib.load(file)
    return _parse_tracker_config(raw, file_path)


def _parse_tracker_config(raw: dict[str, Any], file_path: Path) -> TrackerConfig:
    tracker_raw = raw.get("tracker", {})
    logging_raw = raw.get("logging", {})

    name = str(tracker_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [tracker].name is required")

    description_value = tracker_raw.get("description")
    description = None if description_value is None else str(description_value)

    db_url = str(tracker_raw.get("db_url", DEFAULT_DB_URL)).strip()
    if not db_url:
        raise ValueError(f"{file_path}: [tracker].db_url must not be empty")

    cod_version_raw = str(tracker_raw.get("cod_version", CodVersion.MW3.value)).strip().lower()
    try:
        cod_version = CodVersion(cod_version_raw)
    except ValueError as exc:
        available = ", ".join(version.value for version in CodVersion)
        raise ValueError(
            f"{file_path}: [tracker].cod_version must be one of: {available}"
        ) from exc

    log_level = str(logging_raw.get("level", "WARNING")).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(
            f"{file_path}: [logging].level must be one of: {', '.join(_LOG_LEVELS)}"
        )

    return TrackerConfig(
        name=name,
        description=description,
        file_path=file_path,
        db_url=db_url,
        cod_version=cod_version,
        log_level=log_level,
    )


__all__ = ["DEFAULT_CONFIG_PATH", "DEFAULT_DB_URL", "TrackerConfig", "load_tracker_config"]
