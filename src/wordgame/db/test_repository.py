"""
Tests for the SQLAlchemy game repository on in-memory SQLite.
"""

import pytest

from wordgame.config import Settings
from wordgame.db import Database, GameRepository, create_engine_for_url
from wordgame.domain import GameStatus, Team
from wordgame.errors import WordConflictError
from wordgame.service import GameService


@pytest.fixture
def database():
    database = Database(Settings(database_url="sqlite://"))
    database.init()
    yield database
    database.dispose()


def test_insert_and_find(database):
    with database.session() as session:
        game = GameRepository(session).insert(
            {"name": "G1", "teams": [Team("Red")], "words": ["dog"]}
        )

    with database.session() as session:
        found = GameRepository(session).find_by_id(game.id)

    assert found == game
    assert found.status == GameStatus.CREATED
    assert found.teams == [Team("Red", 0)]


def test_find_unknown_id(database):
    with database.session() as session:
        assert GameRepository(session).find_by_id("nope") is None


def test_update_replaces_json_columns(database):
    with database.session() as session:
        game = GameRepository(session).insert({"name": "G1", "words": ["dog"]})

    with database.session() as session:
        updated = GameRepository(session).update_by_id(
            game.id, {"words": ["dog", "cat"], "status": GameStatus.IN_PROGRESS}
        )
    assert updated.words == ["dog", "cat"]

    with database.session() as session:
        found = GameRepository(session).find_by_id(game.id)
    assert found.words == ["dog", "cat"]
    assert found.status == GameStatus.IN_PROGRESS


def test_update_and_delete_unknown_id(database):
    with database.session() as session:
        repo = GameRepository(session)
        assert repo.update_by_id("nope", {"name": "x"}) is None
        assert repo.delete_by_id("nope") is None


def test_unknown_field_rejected(database):
    with database.session() as session:
        with pytest.raises(ValueError):
            GameRepository(session).insert({"name": "G1", "owner": "me"})


def test_delete_and_count(database):
    with database.session() as session:
        repo = GameRepository(session)
        first = repo.insert({"name": "first"})
        repo.insert({"name": "second"})
        assert repo.count() == 2

        deleted = repo.delete_by_id(first.id)
        assert deleted.name == "first"
        assert repo.count() == 1
        assert {g.name for g in repo.find_all()} == {"second"}


def test_failed_service_call_rolls_back(database):
    with database.session() as session:
        service = GameService(GameRepository(session))
        game = service.create_game(name="G1", words=["dog"])

    with pytest.raises(WordConflictError):
        with database.session() as session:
            service = GameService(GameRepository(session))
            service.add_word(game.id, "cat")
            service.add_word(game.id, "cat")

    with database.session() as session:
        assert GameRepository(session).find_by_id(game.id).words == ["dog"]


def test_unsupported_database_url():
    with pytest.raises(ValueError, match="Unsupported database URL"):
        create_engine_for_url("mysql://localhost/games")


def test_find_all_in_insertion_order(database):
    with database.session() as session:
        repo = GameRepository(session)
        ids = [repo.insert({"name": f"G{i}"}).id for i in range(10)]

    with database.session() as session:
        assert [g.id for g in GameRepository(session).find_all()] == ids


def test_init_drop_all_clears_games(database):
    with database.session() as session:
        GameRepository(session).insert({"name": "G1"})

    database.init(drop_all=True)

    with database.session() as session:
        assert GameRepository(session).count() == 0
