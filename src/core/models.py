"""
Boundary layer data model(s).

The service hands these to the API layer, so the API never has to know about Game, Walls or Coordinate.
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PlayerName = str
CellXY = list[int]
WallRow = list[Optional[PlayerName]]


@dataclass
class GameModel:
    """Transport-safe representation of a game used between API, Service and Game layers."""

    width: int
    height: int
    positions: dict[PlayerName, CellXY]
    horizontal_walls: list[WallRow]
    vertical_walls: list[WallRow]
    active_player: PlayerName
    status: str
    moves: list[str]
