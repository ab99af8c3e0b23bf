"""
Errors raised by the game service.

Each error carries the HTTP status code the API layer responds with.
"""


class GameError(Exception):
    """Base class for game service errors."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GameNotFoundError(GameError):
    """The referenced game id does not exist."""

    status_code = 404

    def __init__(self, message: str = "Game not found"):
        super().__init__(message)


class InvalidGameStateError(GameError):
    """The operation is not allowed in the game's current status."""


class WordConflictError(GameError):
    """The word is already in the pool, or missing from it on delete."""
