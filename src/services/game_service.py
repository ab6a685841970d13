"""Orchestration of communication from the console (or any other caller) to the game logic, and the reverse direction."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    ResultResponse,
)
from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
    RepositoryError,
)
from src.core.models import GameModel
from src.core.shared_types import Outcome, PlayerColor, Status
from src.db.repository import GameRepository
from src.enclosure.game import Game
from src.enclosure.notation import parse_move, to_notation

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for the game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- Request handling ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game with the requested board dimensions."""
        new_game = Game.new_game(width=request.width, height=request.height)
        game_id = self.repo.create_game(new_game)
        logger.info("Created game %s (%dx%d)", game_id, request.width, request.height)
        return self._create_game_response(game_id, new_game.to_model())

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game.to_model())

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """The moves available to whoever is to move, in move notation."""
        game = self._fetch_game(request.game_id)
        return LegalMovesResponse(
            game_id=request.game_id,
            player=PlayerColor[game.active_player.name],
            legal_moves=[to_notation(move, game.height) for move in game.legal_moves()],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Make a move attempt.
        ----

        1. the game must still be in progress
        2. it must be the requesting player's turn
        3. the notation must describe a square on this board
        4. the move must be legal (the Game decides)
        """
        game = self._fetch_game(request.game_id)

        if game.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {game.status}")

        if request.player.name != game.active_player.name:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {game.active_player.name.lower()} to make a move first."
            )

        move = parse_move(request.move, game.width, game.height)
        if not game.apply_move(move):
            raise IllegalMoveError(f"Move not allowed: {request.move}")

        return self._create_game_response(request.game_id, game.to_model())

    def game_result(self, request: GetGameRequest) -> ResultResponse:
        """Final score. Only available once the game has finished."""
        game = self._fetch_game(request.game_id)
        result = game.result()
        return ResultResponse(
            game_id=request.game_id,
            winner=Outcome[result.winner.name],
            blue_area=result.score.blue,
            green_area=result.score.green,
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to drop a game."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            width=model.width,
            height=model.height,
            positions=model.positions,
            horizontal_walls=model.horizontal_walls,
            vertical_walls=model.vertical_walls,
            active_player=PlayerColor(model.active_player),
            status=Status(model.status),
            move_history=model.moves,
        )

    def _fetch_game(self, game_id: UUID) -> Game:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game
