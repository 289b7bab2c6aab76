"""Logging setup for the command-line scripts."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PROJECT_LOGGERS = ("domain", "repositories")


def setup_logging(level: int | str = logging.WARNING, *, verbose: bool = False) -> None:
    """Send project logs to stderr at ``level``; third-party loggers stay at WARNING."""
    project_level = logging.DEBUG if verbose else level
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    for name in PROJECT_LOGGERS:
        logging.getLogger(name).setLevel(project_level)


__all__ = ["LOG_FORMAT", "setup_logging"]
