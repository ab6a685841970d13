"""
Connectivity engine
-----

Breadth-first search over the grid, where two neighbouring cells are connected unless a wall sits on the edge between them.

---
Used for three things:
* the cells a player can move to this turn (bounded search, see MAX_STEPS in moves.py)
* deciding if the two players are still connected (unbounded search)
* the area each player scores at the end of the game (unbounded search)
"""

from collections import deque
from typing import Optional

from src.enclosure.coordinate import Coordinate, Direction
from src.enclosure.walls import Walls


def reachable_set(
    walls: Walls, origin: Coordinate, max_depth: Optional[int] = None
) -> set[Coordinate]:
    """
    All cells reachable from `origin` in at most `max_depth` hops (no limit when `max_depth` is None).
    ---

    The origin itself is always part of the result (zero hops).
    Cells are visited once, the first time they are found. Since BFS finds cells in order of hop count,
    a cell found at hop count `max_depth` is included, but the search does not continue from there.
    """
    reachable: set[Coordinate] = {origin}
    queue: deque[tuple[Coordinate, int]] = deque([(origin, 0)])

    while queue:
        current, depth = queue.popleft()
        if max_depth is not None and depth >= max_depth:
            continue

        for direction in Direction:
            if walls.is_blocked(current, direction):
                continue
            neighbour = current.move_to(direction)
            if neighbour in reachable:
                continue
            reachable.add(neighbour)
            queue.append((neighbour, depth + 1))

    return reachable


def is_connected(walls: Walls, a: Coordinate, b: Coordinate) -> bool:
    return b in reachable_set(walls, a)


def area(walls: Walls, origin: Coordinate) -> int:
    """Size of the region the origin is enclosed in"""
    return len(reachable_set(walls, origin))
