"""
A cell on the board and the four directions a token can step in.

(placed in its own module as every other module in the engine needs to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

Vector = tuple[int, int]


class Direction(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


# y grows downwards: row 0 is the top row of the board
DISPLACEMENT: dict[Direction, Vector] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

OPPOSITE: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def __add__(self, delta: Vector) -> Coordinate:
        dx, dy = delta
        return Coordinate(self.x + dx, self.y + dy)

    def move_to(self, direction: Direction) -> Coordinate:
        """The neighbouring cell in the given direction (may lie outside the board)"""
        return self + DISPLACEMENT[direction]

    def is_within_bounds(self, width: int, height: int) -> bool:
        return (0 <= self.x < width) and (0 <= self.y < height)
