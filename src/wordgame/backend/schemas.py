"""
Pydantic schemas for API request/response models.
"""

from typing import Optional, List
from pydantic import BaseModel, Field

from wordgame.domain import Game, GameStatus


# ===== Team Models =====


class TeamSchema(BaseModel):
    """A team embedded in a game."""

    name: str = Field(..., min_length=1, description="Team name")
    points: int = Field(0, description="Team score")


# ===== Game Models =====


class GameResponse(BaseModel):
    """A stored game."""

    id: str = Field(..., description="Unique game identifier")
    name: str = Field(..., description="Game name")
    teams: List[TeamSchema] = Field(..., description="Teams in this game")
    words: List[str] = Field(..., description="Unique lowercase words")
    status: GameStatus = Field(..., description="Lifecycle status")

    @classmethod
    def from_game(cls, game: Game) -> "GameResponse":
        return cls(
            id=game.id,
            name=game.name,
            teams=[TeamSchema(name=t.name, points=t.points) for t in game.teams],
            words=list(game.words),
            status=game.status,
        )


class CreateGameRequest(BaseModel):
    """Request to create a game."""

    name: str = Field(..., min_length=1, description="Game name")
    teams: List[TeamSchema] = Field(..., description="Teams in this game")
    words: List[str] = Field(..., description="Initial words, any case")
    status: GameStatus = Field(
        GameStatus.CREATED, description="Initial status, CREATED by default"
    )


class UpdateGameRequest(BaseModel):
    """Partial update of a game. Omitted fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=1, description="New game name")
    teams: Optional[List[TeamSchema]] = Field(None, description="Replacement teams")
    words: Optional[List[str]] = Field(None, description="Replacement word list")
    status: Optional[GameStatus] = Field(None, description="New status")


class ChangeStatusRequest(BaseModel):
    """Request to move a game to another status."""

    status: GameStatus = Field(..., description="Target status")


# ===== Word Models =====


class WordRequest(BaseModel):
    """Request to add a word to, or delete a word from, a game."""

    game_id: str = Field(..., alias="gameId", description="Game identifier")
    word: str = Field(..., min_length=1, description="Word, any case")

    class Config:
        populate_by_name = True


# ===== Health Models =====


class HealthResponse(BaseModel):
    """Health check result."""

    status: str = Field(..., description="'healthy' or 'unhealthy'")
    database: str = Field(..., description="'connected' or 'error'")
    games: Optional[int] = Field(None, description="Number of stored games")
    error: Optional[str] = Field(None, description="Error message when unhealthy")
