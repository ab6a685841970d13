"""Protocol repository (the service does not care where the running games are kept)"""

from typing import Protocol
from uuid import UUID

from src.enclosure.game import Game


class GameRepository(Protocol):
    """Keeps track of the games currently being played"""

    def get_game(self, game_id: UUID) -> Game | None:
        """Get game by ID, if it exists."""
        ...

    def create_game(self, game: Game) -> UUID:
        """Store new game and return the newly created game ID."""
        ...

    def delete_game(self, game_id: UUID) -> Game | None:
        """Remove a game."""
        ...
