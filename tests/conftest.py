"""Shared fixtures for tracker tests."""

from __future__ import annotations

import pytest

from db import create_db_engine, create_session_factory
from repositories.games import ensure_game_schema


@pytest.fixture
def session_factory():
    engine = create_db_engine("sqlite:///:memory:")
    ensure_game_schema(engine)
    yield create_session_factory(engine)
    engine.dispose()
