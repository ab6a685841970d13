"""Unit tests for src/db/memory_repository.py"""

from uuid import uuid4

from src.db.memory_repository import InMemoryGameRepository
from src.enclosure.game import Game


def test_create_and_get_game() -> None:
    repo = InMemoryGameRepository()
    game = Game.new_game(7, 7)
    game_id = repo.create_game(game)

    assert repo.get_game(game_id) is game


def test_get_unknown_game() -> None:
    """Should return None if ID does not match anything."""
    repo = InMemoryGameRepository()
    assert repo.get_game(uuid4()) is None

    repo.create_game(Game.new_game(7, 7))
    assert repo.get_game(uuid4()) is None


def test_every_game_gets_its_own_id() -> None:
    repo = InMemoryGameRepository()
    first = repo.create_game(Game.new_game(7, 7))
    second = repo.create_game(Game.new_game(7, 7))
    assert first != second
    assert repo.get_game(first) is not repo.get_game(second)


def test_delete_game() -> None:
    repo = InMemoryGameRepository()
    game = Game.new_game(5, 5)
    game_id = repo.create_game(game)

    assert repo.delete_game(game_id) is game
    assert repo.get_game(game_id) is None
    assert repo.delete_game(game_id) is None
