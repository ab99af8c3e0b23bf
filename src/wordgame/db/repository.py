"""
Data access layer (repository pattern) for game records.
"""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from wordgame.domain import Game, GameStatus, Team
from wordgame.store import GameStore, check_fields, new_game_id

from .models import GameRecord


def _to_columns(data: dict[str, Any]) -> dict[str, Any]:
    """Convert domain values into JSON-safe column values."""
    columns = dict(data)
    if "teams" in columns:
        columns["teams"] = [
            t.to_dict() if isinstance(t, Team) else Team.from_dict(t).to_dict()
            for t in columns["teams"]
        ]
    if "words" in columns:
        columns["words"] = list(columns["words"])
    if "status" in columns:
        columns["status"] = GameStatus(columns["status"]).value
    return columns


class GameRepository(GameStore):
    """
    Game store backed by a SQLAlchemy session.

    Writes are flushed, not committed; the session owner commits.
    """

    def __init__(self, session: Session):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy session instance
        """
        self.session = session

    def _get_record(self, game_id: str) -> GameRecord | None:
        stmt = select(GameRecord).where(GameRecord.id == game_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def insert(self, data: dict[str, Any]) -> Game:
        check_fields(data)
        columns = _to_columns(data)
        record = GameRecord(
            id=new_game_id(),
            name=columns["name"],
            teams=columns.get("teams", []),
            words=columns.get("words", []),
            status=columns.get("status", GameStatus.CREATED.value),
        )
        self.session.add(record)
        self.session.flush()
        return record.to_domain()

    def find_by_id(self, game_id: str) -> Game | None:
        record = self._get_record(game_id)
        return record.to_domain() if record else None

    def find_all(self) -> list[Game]:
        stmt = select(GameRecord).order_by(GameRecord.seq)
        return [record.to_domain() for record in self.session.execute(stmt).scalars()]

    def update_by_id(self, game_id: str, changes: dict[str, Any]) -> Game | None:
        check_fields(changes)
        record = self._get_record(game_id)
        if record is None:
            return None

        # JSON columns are replaced wholesale so the change is tracked
        for key, value in _to_columns(changes).items():
            setattr(record, key, value)

        self.session.flush()
        return record.to_domain()

    def delete_by_id(self, game_id: str) -> Game | None:
        record = self._get_record(game_id)
        if record is None:
            return None

        game = record.to_domain()
        self.session.delete(record)
        self.session.flush()
        return game

    def count(self) -> int:
        return self.session.execute(select(func.count(GameRecord.id))).scalar() or 0
