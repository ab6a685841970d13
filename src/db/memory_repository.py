"""Implementation of (Game)Repository that keeps games in memory for the lifetime of the process"""

from uuid import UUID, uuid4

from src.enclosure.game import Game


class InMemoryGameRepository:
    """Every game is owned by exactly one entry. Nothing is written to disk."""

    def __init__(self) -> None:
        self._games: dict[UUID, Game] = {}

    def get_game(self, game_id: UUID) -> Game | None:
        """Get game by ID, if it exists."""
        return self._games.get(game_id)

    def create_game(self, game: Game) -> UUID:
        """Store new game and return the newly created game ID."""
        new_id = uuid4()
        self._games[new_id] = game
        return new_id

    def delete_game(self, game_id: UUID) -> Game | None:
        """Remove a game."""
        return self._games.pop(game_id, None)
