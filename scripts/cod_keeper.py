#!/usr/bin/env python3
"""Record gunfight results and show lifetime and same-day stats."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from sqlalchemy.orm import Session, sessionmaker

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import create_db_engine, create_session_factory
from domain.common import GameRecord
from domain.config import DEFAULT_CONFIG_PATH, TrackerConfig, load_tracker_config
from domain.errors import StatsError
from domain.maps import CodVersion, GunfightMap, maps_for_version
from domain.pipeline import export_stat_sheet, import_stat_sheet, load_store, record_game
from domain.report import (
    format_current_streak,
    format_map_rankings,
    format_map_stats,
    format_saved_game,
    format_stat_table,
    format_summary,
)
from logging_config import setup_logging
from repositories.games import ensure_game_schema

DB_URL_ENVVAR = "COD_KEEPER_DB_URL"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Gunfight win/loss tracker.",
)


class GameResult(str, Enum):
    WIN = "win"
    LOSS = "loss"


class Scope(str, Enum):
    TODAY = "today"
    LIFETIME = "lifetime"
    BOTH = "both"


ConfigOption = Annotated[
    Path,
    typer.Option("--config", help="Tracker TOML config file."),
]
DbUrlOption = Annotated[
    str | None,
    typer.Option(
        "--db-url",
        envvar=DB_URL_ENVVAR,
        help="Database URL. Overrides [tracker].db_url from the config file.",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable debug logging."),
]


def _load_config(config_path: Path, verbose: bool) -> TrackerConfig:
    try:
        config = load_tracker_config(config_path)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    setup_logging(config.log_level, verbose=verbose)
    return config


def _session_factory(config: TrackerConfig, db_url: str | None) -> sessionmaker[Session]:
    engine = create_db_engine(db_url or config.db_url)
    ensure_game_schema(engine)
    return create_session_factory(engine)


@contextmanager
def _exit_on_error() -> Iterator[None]:
    try:
        yield
    except (StatsError, FileNotFoundError, ValueError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _parse_map(name: str, cod_version: CodVersion) -> GunfightMap:
    try:
        game_map = GunfightMap.parse(name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="map") from exc
    if game_map not in maps_for_version(cod_version):
        raise typer.BadParameter(
            f"Map '{game_map}' is not playable in {cod_version.value}.",
            param_hint="map",
        )
    return game_map


@app.command()
def record(
    map_name: Annotated[str, typer.Argument(metavar="MAP", help="Map the game was played on.")],
    result: Annotated[GameResult, typer.Argument(help="Game result.")],
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    db_url: DbUrlOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Save one game result and show the updated stats."""
    config = _load_config(config_path, verbose)
    game_map = _parse_map(map_name, config.cod_version)

    with _exit_on_error():
        session_factory = _session_factory(config, db_url)
        store = load_store(session_factory)
        game = GameRecord(
            map=game_map,
            did_win=result == GameResult.WIN,
            date_time=datetime.now().astimezone(),
        )
        record_game(session_factory, store, game)

    typer.echo()
    typer.echo(format_summary(store))
    typer.echo()
    typer.echo(format_saved_game(game, store))
    map_stats = store.lifetime.get_map_stats(game.map)
    if map_stats is not None:
        typer.echo(format_map_stats(game.map, map_stats))


@app.command()
def show(
    scope: Annotated[
        Scope,
        typer.Option("--scope", help="Which aggregate to show."),
    ] = Scope.BOTH,
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    db_url: DbUrlOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print win/loss tables."""
    config = _load_config(config_path, verbose)
    with _exit_on_error():
        store = load_store(_session_factory(config, db_url))

    if scope == Scope.TODAY:
        typer.echo(format_stat_table(store.today, "Today's Stats"))
    elif scope == Scope.LIFETIME:
        typer.echo(format_stat_table(store.lifetime, "Lifetime Stats"))
    else:
        typer.echo(format_summary(store))


@app.command()
def maps(
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    db_url: DbUrlOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print per-map records ranked by win percentage."""
    config = _load_config(config_path, verbose)
    with _exit_on_error():
        store = load_store(_session_factory(config, db_url))
    typer.echo(format_map_rankings(store))


@app.command("map")
def show_map(
    map_name: Annotated[str, typer.Argument(metavar="MAP", help="Map to look up.")],
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    db_url: DbUrlOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the lifetime record on one map."""
    config = _load_config(config_path, verbose)
    game_map = _parse_map(map_name, config.cod_version)
    with _exit_on_error():
        store = load_store(_session_factory(config, db_url))

    map_stats = store.lifetime.get_map_stats(game_map)
    if map_stats is None:
        typer.echo(f"{game_map}: no games recorded")
        return
    typer.echo(format_map_stats(game_map, map_stats))


@app.command()
def streak(
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    db_url: DbUrlOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the current lifetime streak."""
    config = _load_config(config_path, verbose)
    with _exit_on_error():
        store = load_store(_session_factory(config, db_url))
    typer.echo(format_current_streak(store.lifetime))


@app.command()
def list_maps(
    cod_version: Annotated[
        CodVersion | None,
        typer.Option("--cod-version", help="Title to list maps for. Defaults to the config."),
    ] = None,
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    verbose: VerboseOption = False,
) -> None:
    """Print the maps available for a title."""
    config = _load_config(config_path, verbose)
    for game_map in maps_for_version(cod_version or config.cod_version):
        typer.echo(game_map.value)


@app.command()
def import_json(
    sheet_path: Annotated[Path, typer.Argument(help="Legacy JSON stat sheet.")],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Validate the sheet without storing games."),
    ] = False,
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    db_url: DbUrlOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Import games from a legacy JSON stat sheet."""
    config = _load_config(config_path, verbose)
    with _exit_on_error():
        summary = import_stat_sheet(
            _session_factory(config, db_url),
            sheet_path,
            dry_run=dry_run,
            echo=typer.echo,
        )
    typer.echo(f"lifetime wins={summary.lifetime_wins} losses={summary.lifetime_losses}")


@app.command()
def export_json(
    sheet_path: Annotated[Path, typer.Argument(help="Destination JSON stat sheet.")],
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    db_url: DbUrlOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Write every stored game to a legacy JSON stat sheet."""
    config = _load_config(config_path, verbose)
    with _exit_on_error():
        exported = export_stat_sheet(_session_factory(config, db_url), sheet_path)
    typer.echo(f"exported_games={exported} sheet={sheet_path}")


@app.command()
def init_db(
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    db_url: DbUrlOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Create the game log schema."""
    config = _load_config(config_path, verbose)
    resolved_url = db_url or config.db_url
    ensure_game_schema(create_db_engine(resolved_url))
    typer.echo(f"schema ready db_url={resolved_url}")


if __name__ == "__main__":
    app()
