"""The two players. The game is fixed to exactly two of them."""

from enum import Enum, auto


class Player(Enum):
    BLUE = auto()
    GREEN = auto()

    @property
    def opponent(self) -> "Player":
        return Player.GREEN if self == Player.BLUE else Player.BLUE
