"""
The Game class is the entrypoint into the domain layer for the service layer (and the console).
It owns the full state of one game: both tokens, both wall grids and whose turn it is,
and it is the only place where that state gets changed.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import Status
from src.enclosure.coordinate import Coordinate
from src.enclosure.moves import Move, enumerate_moves
from src.enclosure.notation import to_notation
from src.enclosure.player import Player
from src.enclosure.reachability import area, is_connected
from src.enclosure.walls import EdgeGrid, Walls

logger = logging.getLogger(__name__)


class Winner(Enum):
    BLUE = auto()
    GREEN = auto()
    DRAW = auto()


@dataclass(frozen=True)
class Score:
    blue: int
    green: int


@dataclass(frozen=True)
class GameResult:
    winner: Winner
    score: Score


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    width: int
    height: int
    blue_position: Coordinate
    green_position: Coordinate
    walls: Walls
    active_player: Player
    status: Status
    moves: list[Move]

    @classmethod
    def new_game(cls, width: int, height: int) -> Self:
        """Blue starts in the top-left corner and moves first, Green starts in the bottom-right corner."""
        if width < 1 or height < 1:
            raise GameStateError(
                f"Cannot create new game. Board dimensions must be positive, got {width}x{height}."
            )
        game = cls(
            width=width,
            height=height,
            blue_position=Coordinate(0, 0),
            green_position=Coordinate(width - 1, height - 1),
            walls=Walls(width, height),
            active_player=Player.BLUE,
            status=Status.IN_PROGRESS,
            moves=[],
        )
        logger.debug("New %dx%d game created", width, height)
        return game

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        return GameModel(
            width=self.width,
            height=self.height,
            positions={
                player.name.lower(): [self.position(player).x, self.position(player).y]
                for player in Player
            },
            horizontal_walls=_edge_grid_to_rows(self.walls.horizontal),
            vertical_walls=_edge_grid_to_rows(self.walls.vertical),
            active_player=self.active_player.name.lower(),
            status=str(self.status),
            moves=[to_notation(move, self.height) for move in self.moves],
        )

    def position(self, player: Player) -> Coordinate:
        return self.blue_position if player == Player.BLUE else self.green_position

    def occupant(self, cell: Coordinate) -> Optional[Player]:
        """Which token stands on the cell. If both do, Blue is reported."""
        for player in Player:
            if self.position(player) == cell:
                return player
        return None

    def legal_moves(self) -> list[Move]:
        """
        The complete set of moves the active player may submit this turn.
        ----

        Recomputed from scratch on every call: it depends on the walls and on where the active player stands.
        """
        return enumerate_moves(self.walls, self.position(self.active_player))

    def apply_move(self, move: Move) -> bool:
        """
        Attempt to make a move
        -----

        Returns False (and changes nothing) if the move is not in the legal move set. Otherwise:
        1. move the active player's token
        2. place that player's wall next to the destination
        3. record the move
        4. hand the turn to the opponent
        5. update game status (if needed)
        """
        if move not in self.legal_moves():
            logger.debug("Rejected %s for %s", move, self.active_player.name.lower())
            return False

        player = self.active_player
        self._move_token(player, move.destination)
        self.walls.place(move.destination, move.wall_direction, player)
        self.moves.append(move)
        self.active_player = player.opponent
        logger.debug("Accepted %s for %s", move, player.name.lower())

        self._update_game_status()
        return True

    def is_terminal(self) -> bool:
        """The game ends once the walls separate the two players. There is no other ending."""
        return not is_connected(self.walls, self.blue_position, self.green_position)

    def result(self) -> GameResult:
        """
        Each player scores the size of the region they are enclosed in. The larger region wins.

        NOTE only defined once the players are separated. Before that both would score the same shared region.
        """
        if not self.is_terminal():
            raise GameStateError("Game is not over yet: the players can still reach each other.")

        score = Score(
            blue=area(self.walls, self.blue_position),
            green=area(self.walls, self.green_position),
        )
        if score.blue > score.green:
            winner = Winner.BLUE
        elif score.blue < score.green:
            winner = Winner.GREEN
        else:
            winner = Winner.DRAW
        return GameResult(winner, score)

    # -- PRIVATE HELPERS ---
    def _move_token(self, player: Player, destination: Coordinate) -> None:
        if player == Player.BLUE:
            self.blue_position = destination
        else:
            self.green_position = destination

    def _update_game_status(self) -> None:
        if self.status == Status.IN_PROGRESS and self.is_terminal():
            self.status = Status.FINISHED
            logger.info(
                "Game over after %d moves, %d walls on the board",
                len(self.moves),
                self.walls.wall_count(),
            )


def _edge_grid_to_rows(grid: EdgeGrid) -> list[list[Optional[str]]]:
    return [[owner.name.lower() if owner else None for owner in row] for row in grid.cells]
