"""
SQLAlchemy models for the wordgame database.

Teams and words are embedded in the game row as JSON, the way a document
store keeps sub-documents.
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import JSON, DateTime

from wordgame.domain import Game, GameStatus, Team


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class GameRecord(Base):
    """A game with its teams and word pool."""

    __tablename__ = "games"
    __table_args__ = (
        CheckConstraint(
            "status IN ('CREATED', 'IN_PROGRESS', 'FINISHED')",
            name="check_games_status",
        ),
    )

    seq: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Auto-incrementing primary key, gives insertion order",
    )
    id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        unique=True,
        comment="UUID assigned on creation, used as the public game id",
    )
    name: Mapped[str] = mapped_column(String, nullable=False, comment="Game name")
    teams: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Embedded teams: [{'name': str, 'points': int}]",
    )
    words: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Unique lowercase words",
    )
    status: Mapped[str] = mapped_column(
        String,
        nullable=False,
        default=GameStatus.CREATED.value,
        comment="Game status: 'CREATED', 'IN_PROGRESS', 'FINISHED'",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=_utcnow, comment="Timestamp of creation"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        comment="Timestamp of the last write",
    )

    def to_domain(self) -> Game:
        return Game(
            id=self.id,
            name=self.name,
            teams=[Team.from_dict(t) for t in self.teams],
            words=list(self.words),
            status=GameStatus(self.status),
        )


Index("idx_games_created_at", GameRecord.created_at)
Index("idx_games_status", GameRecord.status)
