"""
API routes for the wordgame backend.

Errors raised by GameService are turned into responses by the handler
registered in app.py.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from wordgame.db import GameRepository
from wordgame.service import GameService
from .schemas import (
    ChangeStatusRequest,
    CreateGameRequest,
    GameResponse,
    UpdateGameRequest,
    WordRequest,
)

# Create router
router = APIRouter(prefix="/game", tags=["game"])


# Dependency to get database session
def get_db_session(request: Request) -> Session:
    """
    Dependency that provides a database session.

    Yields:
        SQLAlchemy session instance
    """
    with request.app.state.database.session() as session:
        yield session


def get_game_service(session: Session = Depends(get_db_session)) -> GameService:
    """Dependency that provides a GameService bound to the request session."""
    return GameService(GameRepository(session))


# ===== Game Endpoints =====


@router.get("", response_model=List[GameResponse])
async def list_games(service: GameService = Depends(get_game_service)):
    """List all games."""
    return [GameResponse.from_game(game) for game in service.list_games()]


@router.get("/{game_id}", response_model=GameResponse)
async def get_game(game_id: str, service: GameService = Depends(get_game_service)):
    """Get a specific game by ID."""
    return GameResponse.from_game(service.get_game(game_id))


@router.post("", response_model=GameResponse, status_code=201)
async def create_game(
    request: CreateGameRequest, service: GameService = Depends(get_game_service)
):
    """Create a new game."""
    game = service.create_game(
        name=request.name,
        teams=[team.model_dump() for team in request.teams],
        words=request.words,
        status=request.status,
    )
    return GameResponse.from_game(game)


# ===== Word Endpoints =====


@router.post("/add-word", response_model=GameResponse, status_code=201)
async def add_word(
    request: WordRequest, service: GameService = Depends(get_game_service)
):
    """
    Add a word to a game.

    The word is stored lowercase. Only games that have not started accept new words.
    """
    return GameResponse.from_game(service.add_word(request.game_id, request.word))


@router.post("/delete-word", response_model=GameResponse, status_code=201)
async def delete_word(
    request: WordRequest, service: GameService = Depends(get_game_service)
):
    """
    Delete a word from a game.

    Only games that have not started allow words to be removed.
    """
    return GameResponse.from_game(service.delete_word(request.game_id, request.word))


# ===== Update / Delete Endpoints =====


@router.put("/{game_id}", response_model=GameResponse)
async def update_game(
    game_id: str,
    request: UpdateGameRequest,
    service: GameService = Depends(get_game_service),
):
    """
    Update a game.

    Only the fields present in the body are changed. A status change must
    follow CREATED -> IN_PROGRESS -> FINISHED.
    """
    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    return GameResponse.from_game(service.update_game(game_id, changes))


@router.post("/{game_id}/status", response_model=GameResponse)
async def change_status(
    game_id: str,
    request: ChangeStatusRequest,
    service: GameService = Depends(get_game_service),
):
    """Move a game to another status."""
    return GameResponse.from_game(service.change_status(game_id, request.status))


@router.delete("/{game_id}", response_model=Optional[GameResponse])
async def delete_game(game_id: str, service: GameService = Depends(get_game_service)):
    """
    Delete a game.

    Returns the deleted game, or null if no game had this ID.
    """
    deleted = service.delete_game(game_id)
    return GameResponse.from_game(deleted) if deleted else None
