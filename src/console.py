"""Entry point for a game at the console: two humans take turns typing their moves."""

import argparse
import logging
from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from src.api.models import (
    CreateGameRequest,
    GetGameRequest,
    LegalMovesRequest,
    MoveRequest,
    ResultResponse,
)
from src.core.config import Settings, load_settings
from src.core.exceptions import ConfigError, GameError
from src.core.shared_types import Outcome, Status
from src.db.memory_repository import InMemoryGameRepository
from src.enclosure.render import render_board
from src.services.game_service import GameService

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Enclosure: move up to 3 squares, then place a wall. Cut your opponent off with the larger area."
    )
    parser.add_argument("--width", type=int, help="Board width (default from settings)")
    parser.add_argument("--height", type=int, help="Board height (default from settings)")
    parser.add_argument("--settings", default=None, help="Path to settings YAML")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def play(
    settings: Settings,
    read_move: Optional[Callable[[str], str]] = None,
    show: Optional[Callable[[str], None]] = None,
) -> Optional[ResultResponse]:
    """
    The read-input / print loop.
    ---

    Returns the final result, or None when the player to move has no legal move left.
    """
    read_move = read_move or input
    show = show or print

    repository = InMemoryGameRepository()
    service = GameService(repository)
    state = service.create_new_game(
        CreateGameRequest(width=settings.width, height=settings.height)
    )
    game_id = state.game_id
    game = repository.get_game(game_id)
    # for the typechecker: the service just stored it
    assert game is not None

    while state.status == Status.IN_PROGRESS:
        show(render_board(game))
        show(f"Now it's {state.active_player.capitalize()}'s turn")

        if not service.legal_moves(LegalMovesRequest(game_id=game_id)).legal_moves:
            show(f"{state.active_player.capitalize()} has no legal move left.")
            return None

        while True:
            text = read_move("Enter your move: ")
            try:
                request = MoveRequest(
                    game_id=game_id, player=state.active_player, move=text
                )
                state = service.make_move(request)
                break
            except (GameError, ValidationError) as error:
                logger.debug("Move %r refused: %s", text, error)
                show("Invalid move")

    show(render_board(game))
    result = service.game_result(GetGameRequest(game_id=game_id))
    if result.winner == Outcome.DRAW:
        show("Game over, it's a draw!")
    else:
        show(f"Game over, {result.winner.capitalize()} wins!")
    show(f"{result.blue_area} - {result.green_area}")
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args.settings).with_overrides(
            width=args.width,
            height=args.height,
            log_level="DEBUG" if args.verbose else None,
        )
    except ConfigError as error:
        print(error)
        return 2

    setup_logging(settings.log_level)
    logger.debug("Starting with %s", settings)

    try:
        play(settings)
    except (EOFError, KeyboardInterrupt):
        print()
        logger.info("Game interrupted")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
