"""
Storage boundary for game records.

The service only depends on GameStore. InMemoryGameStore keeps games in a
dict and is used in tests and for throwaway runs.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Any

from .domain import Game, GameStatus, coerce_teams

# Fields a caller may set through insert() or update_by_id()
GAME_FIELDS = ("name", "teams", "words", "status")


class GameStore(ABC):
    """Persistence interface for games, keyed by opaque string id."""

    @abstractmethod
    def insert(self, data: dict[str, Any]) -> Game:
        """Store a new game and return it with its assigned id."""

    @abstractmethod
    def find_by_id(self, game_id: str) -> Game | None:
        ...

    @abstractmethod
    def find_all(self) -> list[Game]:
        ...

    @abstractmethod
    def update_by_id(self, game_id: str, changes: dict[str, Any]) -> Game | None:
        """Merge ``changes`` into the stored game. Returns None if absent."""

    @abstractmethod
    def delete_by_id(self, game_id: str) -> Game | None:
        """Remove a game. Returns the removed game, or None if absent."""


def new_game_id() -> str:
    return str(uuid.uuid4())


def check_fields(changes: dict[str, Any]) -> None:
    unknown = set(changes) - set(GAME_FIELDS)
    if unknown:
        raise ValueError(f"Unknown game fields: {', '.join(sorted(unknown))}")


class InMemoryGameStore(GameStore):
    """Games held in process memory, in insertion order."""

    def __init__(self):
        self._games: dict[str, Game] = {}

    def insert(self, data: dict[str, Any]) -> Game:
        check_fields(data)
        game = Game(
            id=new_game_id(),
            name=data["name"],
            teams=coerce_teams(data.get("teams", [])),
            words=list(data.get("words", [])),
            status=GameStatus(data.get("status", GameStatus.CREATED)),
        )
        self._games[game.id] = game
        return game.copy()

    def find_by_id(self, game_id: str) -> Game | None:
        game = self._games.get(game_id)
        return game.copy() if game else None

    def find_all(self) -> list[Game]:
        return [game.copy() for game in self._games.values()]

    def update_by_id(self, game_id: str, changes: dict[str, Any]) -> Game | None:
        check_fields(changes)
        game = self._games.get(game_id)
        if game is None:
            return None

        if "name" in changes:
            game.name = changes["name"]
        if "teams" in changes:
            game.teams = coerce_teams(changes["teams"])
        if "words" in changes:
            game.words = list(changes["words"])
        if "status" in changes:
            game.status = GameStatus(changes["status"])

        return game.copy()

    def delete_by_id(self, game_id: str) -> Game | None:
        return self._games.pop(game_id, None)

    def __len__(self) -> int:
        return len(self._games)
