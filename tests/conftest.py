"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Generator

import pytest

from src.db.memory_repository import InMemoryGameRepository
from src.enclosure.game import Game
from src.services.game_service import GameService


@pytest.fixture
def new_game() -> Game:
    """The standard 7x7 board, nothing played yet."""
    return Game.new_game(7, 7)


@pytest.fixture
def repository() -> Generator[InMemoryGameRepository, None, None]:
    """Fresh repository for every test, so tests of the service layer are independent of each other."""
    repo = InMemoryGameRepository()
    yield repo


@pytest.fixture
def service(repository: InMemoryGameRepository) -> GameService:
    return GameService(repository)
