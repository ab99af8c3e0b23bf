"""
Domain types for word-guessing games.

A Game owns its teams and its word pool. Words are always stored lowercase
and without duplicates.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable


class GameStatus(str, Enum):
    """Lifecycle of a game. Only CREATED games accept word-pool edits."""

    CREATED = "CREATED"
    IN_PROGRESS = "IN_PROGRESS"
    FINISHED = "FINISHED"

    def can_transition_to(self, target: "GameStatus") -> bool:
        """Whether moving from this status to ``target`` is allowed."""
        return target == self or target in _TRANSITIONS[self]


_TRANSITIONS: dict[GameStatus, frozenset[GameStatus]] = {
    GameStatus.CREATED: frozenset({GameStatus.IN_PROGRESS}),
    GameStatus.IN_PROGRESS: frozenset({GameStatus.FINISHED}),
    GameStatus.FINISHED: frozenset(),
}


@dataclass
class Team:
    """A named group of players with a score."""

    name: str
    points: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "points": self.points}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Team":
        return cls(name=data["name"], points=data.get("points", 0))


@dataclass
class Game:
    """A stored game record."""

    id: str
    name: str
    teams: list[Team] = field(default_factory=list)
    words: list[str] = field(default_factory=list)
    status: GameStatus = GameStatus.CREATED

    def copy(self) -> "Game":
        return copy.deepcopy(self)


def normalize_word(word: str) -> str:
    return word.lower()


def normalize_words(words: Iterable[str]) -> list[str]:
    """
    Lowercase a word list and drop duplicates, keeping first occurrences.

    Args:
        words: Words in any case

    Returns:
        New list of unique lowercase words in their original order
    """
    seen: dict[str, None] = {}
    for word in words:
        seen.setdefault(normalize_word(word), None)
    return list(seen)


def coerce_teams(teams: Iterable[Team | dict[str, Any]]) -> list[Team]:
    """Accept teams as Team objects or plain dicts."""
    return [t if isinstance(t, Team) else Team.from_dict(t) for t in teams]
