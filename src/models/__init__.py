"""ORM models."""

from models.base import Base
from models.game import GamePlayed

__all__ = ["Base", "GamePlayed"]
