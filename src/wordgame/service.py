"""
Game service: game lifecycle and word-pool edits on top of a GameStore.
"""

import logging
from typing import Any, Iterable

from .domain import (
    Game,
    GameStatus,
    Team,
    coerce_teams,
    normalize_word,
    normalize_words,
)
from .errors import GameNotFoundError, InvalidGameStateError, WordConflictError
from .store import GameStore

logger = logging.getLogger(__name__)


class GameService:
    """
    Validates and persists game changes.

    Word-pool edits and status changes read the game, check it and write it
    back. The sequence is not atomic; concurrent writers to the same game
    race and the last write wins.
    """

    def __init__(self, store: GameStore):
        """
        Args:
            store: Persistence backend for games
        """
        self.store = store

    def list_games(self) -> list[Game]:
        """All games in store order."""
        return self.store.find_all()

    def get_game(self, game_id: str) -> Game:
        """
        Get a game by its id.

        Raises:
            GameNotFoundError: If no game has this id
        """
        game = self.store.find_by_id(game_id)
        if game is None:
            logger.warning("Game %s not found", game_id)
            raise GameNotFoundError()
        return game

    def create_game(
        self,
        name: str,
        teams: Iterable[Team | dict[str, Any]] = (),
        words: Iterable[str] = (),
        status: GameStatus = GameStatus.CREATED,
    ) -> Game:
        """
        Create a new game.

        Words are lowercased and de-duplicated before they are stored.
        """
        game = self.store.insert(
            {
                "name": name,
                "teams": coerce_teams(teams),
                "words": normalize_words(words),
                "status": GameStatus(status),
            }
        )
        logger.info(
            "Created game %s (%r, %d words)", game.id, game.name, len(game.words)
        )
        return game

    def add_word(self, game_id: str, word: str) -> Game:
        """
        Add a word to a game's word pool.

        Raises:
            GameNotFoundError: If the game does not exist
            InvalidGameStateError: If the game has started or finished
            WordConflictError: If the word is already in the pool
        """
        word = normalize_word(word)
        game = self._get_editable_game(game_id)

        if word in game.words:
            logger.warning("Game %s: word %r already present", game_id, word)
            raise WordConflictError("Word already exists in the game")

        return self._save_words(game, game.words + [word])

    def delete_word(self, game_id: str, word: str) -> Game:
        """
        Remove a word from a game's word pool.

        Checks run in the same order as add_word: game, status, then word.

        Raises:
            GameNotFoundError: If the game does not exist
            InvalidGameStateError: If the game has started or finished
            WordConflictError: If the word is not in the pool
        """
        word = normalize_word(word)
        game = self._get_editable_game(game_id)

        if word not in game.words:
            logger.warning("Game %s: word %r not present", game_id, word)
            raise WordConflictError("Word does not exist in the game")

        return self._save_words(game, [w for w in game.words if w != word])

    def update_game(self, game_id: str, changes: dict[str, Any]) -> Game:
        """
        Apply a partial update to a game.

        Args:
            game_id: Game to update
            changes: Any subset of name, teams, words and status

        Raises:
            GameNotFoundError: If the game does not exist
            InvalidGameStateError: If the status change is not allowed, or words
                are given for a game that is, or is being moved, out of CREATED
        """
        game = self.get_game(game_id)
        changes = dict(changes)

        target = game.status
        if "status" in changes:
            target = GameStatus(changes["status"])
            self._check_transition(game, target)
            changes["status"] = target
        if "words" in changes:
            self._check_words_editable(game_id, target)
            changes["words"] = normalize_words(changes["words"])
        if "teams" in changes:
            changes["teams"] = coerce_teams(changes["teams"])

        updated = self.store.update_by_id(game_id, changes)
        if updated is None:
            # Deleted between the read and the write
            logger.warning("Game %s deleted before update", game_id)
            raise GameNotFoundError()

        logger.info("Updated game %s (%s)", game_id, ", ".join(sorted(changes)))
        return updated

    def change_status(self, game_id: str, status: GameStatus) -> Game:
        """
        Move a game along CREATED -> IN_PROGRESS -> FINISHED.

        Setting the current status again is a no-op.

        Raises:
            GameNotFoundError: If the game does not exist
            InvalidGameStateError: If the transition is not allowed
        """
        target = GameStatus(status)
        game = self.get_game(game_id)
        self._check_transition(game, target)

        if game.status == target:
            return game

        updated = self.store.update_by_id(game_id, {"status": target})
        if updated is None:
            logger.warning("Game %s deleted before update", game_id)
            raise GameNotFoundError()

        logger.info("Game %s status %s -> %s", game_id, game.status.value, target.value)
        return updated

    def start_game(self, game_id: str) -> Game:
        return self.change_status(game_id, GameStatus.IN_PROGRESS)

    def finish_game(self, game_id: str) -> Game:
        return self.change_status(game_id, GameStatus.FINISHED)

    def delete_game(self, game_id: str) -> Game | None:
        """Delete a game. Returns None if there was nothing to delete."""
        deleted = self.store.delete_by_id(game_id)
        if deleted is not None:
            logger.info("Deleted game %s", game_id)
        return deleted

    def _get_editable_game(self, game_id: str) -> Game:
        game = self.get_game(game_id)
        self._check_words_editable(game_id, game.status)
        return game

    def _check_words_editable(self, game_id: str, status: GameStatus) -> None:
        if status == GameStatus.IN_PROGRESS:
            logger.warning("Game %s: word pool locked, game in progress", game_id)
            raise InvalidGameStateError("The game already has been started")

        if status == GameStatus.FINISHED:
            logger.warning("Game %s: word pool locked, game finished", game_id)
            raise InvalidGameStateError("The game already has finished")

    def _check_transition(self, game: Game, target: GameStatus) -> None:
        if not game.status.can_transition_to(target):
            logger.warning(
                "Game %s: rejected status change %s -> %s",
                game.id,
                game.status.value,
                target.value,
            )
            raise InvalidGameStateError(
                f"Cannot change game status from {game.status.value} to {target.value}"
            )

    def _save_words(self, game: Game, words: list[str]) -> Game:
        updated = self.store.update_by_id(game.id, {"words": words})
        if updated is None:
            logger.warning("Game %s deleted before update", game.id)
            raise GameNotFoundError()
        logger.info("Game %s now has %d words", game.id, len(updated.words))
        return updated
