"""
Database package for the wordgame backend.

Implements the SQLAlchemy-based store: the games table, engine and session
management, and the repository the service talks to.
"""

from .models import Base, GameRecord
from .repository import GameRepository
from .session import Database, create_engine_for_url

__all__ = [
    "Base",
    "GameRecord",
    "GameRepository",
    "Database",
    "create_engine_for_url",
]
