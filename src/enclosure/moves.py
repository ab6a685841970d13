"""
Definition of a move and the rule that generates the legal move set.

A move is a single action with two parts:
1. move your token to `destination` (at most MAX_STEPS hops away, staying put is allowed)
2. place a wall on the edge on the `wall_direction` side of `destination`

Legality is nothing more than membership of the set generated here. Game applies the move.
"""

from dataclasses import dataclass

from src.enclosure.coordinate import Coordinate, Direction
from src.enclosure.reachability import reachable_set
from src.enclosure.walls import Walls

# How far a token may travel in a single turn
MAX_STEPS = 3


@dataclass(frozen=True)
class Move:
    destination: Coordinate
    wall_direction: Direction


def enumerate_moves(walls: Walls, origin: Coordinate, max_steps: int = MAX_STEPS) -> list[Move]:
    """
    Every (destination, wall direction) pair available to a token standing on `origin`.
    ---

    * destinations: reachable in at most `max_steps` hops under the current walls
    * wall directions: any side of the destination that is not on the border and is not walled yet

    NOTE: The opponent's token does not block movement, and its cell is a valid destination.

    Moves are listed row by row, top row first.
    """
    reachable = reachable_set(walls, origin, max_steps)
    destinations = sorted(reachable, key=lambda cell: (cell.y, cell.x))

    return [
        Move(destination, direction)
        for destination in destinations
        for direction in Direction
        if not walls.is_blocked(destination, direction)
    ]
