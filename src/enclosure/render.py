"""
Text rendering of the board for the console.

Example (3x3 board, Blue walled off the right side of its corner):

      ┌───┬───┬───┐
    2 │ B ┃       │
      ├   ┼   ┼   ┤
    1 │           │
      ├   ┼   ┼   ┤
    0 │         G │
      └───┴───┴───┘
        A   B   C
"""

from src.enclosure.coordinate import Coordinate
from src.enclosure.game import Game
from src.enclosure.notation import column_letter, row_label
from src.enclosure.player import Player

TOKEN: dict[Player, str] = {Player.BLUE: "B", Player.GREEN: "G"}


def render_board(game: Game) -> str:
    lines: list[str] = []
    lines.append("  ┌" + "┬".join(["───"] * game.width) + "┐")
    for y in range(game.height):
        lines.append(_render_row(game, y))
        if y < game.height - 1:
            lines.append(_render_horizontal_walls(game, y))
    lines.append("  └" + "┴".join(["───"] * game.width) + "┘")
    lines.append("    " + "   ".join(column_letter(x) for x in range(game.width)))
    return "\n".join(lines)


def _render_row(game: Game, y: int) -> str:
    """One row of cells, with the vertical walls between them"""
    parts = [f"{row_label(y, game.height)} │ "]
    for x in range(game.width):
        cell = Coordinate(x, y)
        occupant = game.occupant(cell)
        parts.append(TOKEN[occupant] if occupant else " ")

        if x < game.width - 1:
            parts.append(" ┃ " if not game.walls.vertical.is_empty(cell) else "   ")
    parts.append(" │")
    return "".join(parts)


def _render_horizontal_walls(game: Game, y: int) -> str:
    """The edges between row y and row y + 1"""
    segments = [
        "━━━" if not game.walls.horizontal.is_empty(Coordinate(x, y)) else "   "
        for x in range(game.width)
    ]
    return "  ├" + "┼".join(segments) + "┤"
