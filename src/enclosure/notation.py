"""
Move notation
---

A move is written as three characters: <column letter><row digit><wall letter>

examples on a 7x7 board:
* "A6R": stay in the top-left corner and wall off its right side
* "C4D": move to the third column, middle row, and wall off the edge below it

Columns are lettered from the left starting at "A". Rows are numbered from the bottom starting at 0,
so the top row of a 7-high board is row "6".
"""

from string import ascii_uppercase, digits

from src.core.exceptions import InvalidNotationError
from src.enclosure.coordinate import Coordinate, Direction
from src.enclosure.moves import Move

LETTER_TO_DIRECTION: dict[str, Direction] = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}

DIRECTION_TO_LETTER: dict[Direction, str] = {
    value: key for key, value in LETTER_TO_DIRECTION.items()
}


def column_letter(x: int) -> str:
    return ascii_uppercase[x]


def row_label(y: int, height: int) -> str:
    return str(height - 1 - y)


def parse_move(text: str, width: int, height: int) -> Move:
    """Turn user input into a Move. Only checks the notation and the board bounds, legality is up to the Game."""
    notation = text.strip().upper()
    if len(notation) != 3:
        raise InvalidNotationError(
            f"Move {text!r} should have exactly 3 characters, like 'A6R'."
        )

    column, row, wall = notation
    if column not in ascii_uppercase:
        raise InvalidNotationError(f"Cannot interpret {column!r} as a column.")
    if row not in digits:
        raise InvalidNotationError(f"Cannot interpret {row!r} as a row.")
    if wall not in LETTER_TO_DIRECTION:
        raise InvalidNotationError(
            f"Cannot interpret {wall!r} as a wall direction. Pick one from {','.join(LETTER_TO_DIRECTION)}."
        )

    destination = Coordinate(
        x=ascii_uppercase.index(column),
        y=(height - 1) - int(row),
    )
    if not destination.is_within_bounds(width, height):
        raise InvalidNotationError(f"Square {column}{row} is not on the board.")

    return Move(destination, LETTER_TO_DIRECTION[wall])


def to_notation(move: Move, height: int) -> str:
    """reverse operation: write a Move in notation"""
    destination = move.destination
    return f"{column_letter(destination.x)}{row_label(destination.y, height)}{DIRECTION_TO_LETTER[move.wall_direction]}"
