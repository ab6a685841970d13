"""
The wall layer: walls live on the edges between cells, never on the cells themselves.
---

Two separate grids record who owns each edge:

* horizontal walls (width x (height - 1)): entry (x, y) is the edge between row y and row y + 1 in column x.
* vertical walls ((width - 1) x height): entry (x, y) is the edge between column x and column x + 1 in row y.

An edge is addressed by the cell on its top / left side. Moving RIGHT or DOWN from a cell checks the entry at the cell itself,
moving LEFT or UP checks the entry at the neighbour the token moves into.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.core.exceptions import GameStateError
from src.enclosure.coordinate import OPPOSITE, Coordinate, Direction
from src.enclosure.player import Player

# None: nobody placed a wall on this edge (yet)
EdgeState = Optional[Player]


@dataclass
class EdgeGrid:
    width: int
    height: int
    cells: list[list[EdgeState]] = field(init=False)

    def __post_init__(self):
        # NOTE: a 1-wide or 1-high board has an empty grid in one of the two orientations
        self.cells = [[None] * max(self.width, 0) for _ in range(max(self.height, 0))]

    def contains(self, coordinate: Coordinate) -> bool:
        return coordinate.is_within_bounds(self.width, self.height)

    def owner(self, coordinate: Coordinate) -> EdgeState:
        return self.cells[coordinate.y][coordinate.x]

    def is_empty(self, coordinate: Coordinate) -> bool:
        return self.owner(coordinate) is None

    def claim(self, coordinate: Coordinate, player: Player) -> None:
        """Walls are permanent: an edge that already has an owner can never be claimed again."""
        if not self.contains(coordinate):
            raise GameStateError(f"No edge at {coordinate} on a {self.width}x{self.height} edge grid.")
        current_owner = self.owner(coordinate)
        if current_owner is not None:
            raise GameStateError(f"Edge at {coordinate} is already walled by {current_owner.name.lower()}.")
        self.cells[coordinate.y][coordinate.x] = player

    def count(self) -> int:
        return sum(1 for row in self.cells for owner in row if owner is not None)


@dataclass
class Walls:
    width: int
    height: int
    horizontal: EdgeGrid = field(init=False)
    vertical: EdgeGrid = field(init=False)

    def __post_init__(self):
        self.horizontal = EdgeGrid(self.width, self.height - 1)
        self.vertical = EdgeGrid(self.width - 1, self.height)

    def edge(self, cell: Coordinate, direction: Direction) -> tuple[EdgeGrid, Coordinate]:
        """Which grid, and which entry in it, holds the edge on the `direction` side of `cell`."""
        if direction in (Direction.UP, Direction.LEFT):
            # the edge belongs to the cell on its top / left side: look at it from the neighbour
            return self.edge(cell.move_to(direction), OPPOSITE[direction])
        grid = self.horizontal if direction == Direction.DOWN else self.vertical
        return grid, cell

    def has_edge(self, cell: Coordinate, direction: Direction) -> bool:
        """False for the board's border: there is no edge to wall off there"""
        neighbour = cell.move_to(direction)
        return cell.is_within_bounds(self.width, self.height) and neighbour.is_within_bounds(
            self.width, self.height
        )

    def is_blocked(self, cell: Coordinate, direction: Direction) -> bool:
        """Can a token NOT step from `cell` in `direction`? The border of the board counts as a wall."""
        if not self.has_edge(cell, direction):
            return True
        grid, entry = self.edge(cell, direction)
        return not grid.is_empty(entry)

    def owner(self, cell: Coordinate, direction: Direction) -> EdgeState:
        if not self.has_edge(cell, direction):
            return None
        grid, entry = self.edge(cell, direction)
        return grid.owner(entry)

    def place(self, cell: Coordinate, direction: Direction, player: Player) -> None:
        if not self.has_edge(cell, direction):
            raise GameStateError(f"Cannot place a wall on the border: {cell} {direction.name.lower()}.")
        grid, entry = self.edge(cell, direction)
        grid.claim(entry, player)

    def wall_count(self) -> int:
        return self.horizontal.count() + self.vertical.count()
