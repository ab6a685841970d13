from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import CreateGameRequest, MoveRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PlayerColor


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_default_board_size() -> None:
    request = CreateGameRequest()
    assert (request.width, request.height) == (7, 7)


@pytest.mark.parametrize("width, height", [(0, 7), (7, 0), (27, 7), (7, 11)])
def test_board_size_out_of_range(width: int, height: int) -> None:
    """The move notation only has letters A-Z for columns and digits 0-9 for rows"""
    with pytest.raises(ValidationError):
        _ = CreateGameRequest(width=width, height=height)


# -- Validation - MoveRequest --
def test_valid_move(mock_id: UUID) -> None:
    request = MoveRequest(game_id=mock_id, player=PlayerColor.BLUE, move="A6R")
    assert request.move == "A6R"


def test_move_is_normalised(mock_id: UUID) -> None:
    request = MoveRequest(game_id=mock_id, player=PlayerColor.GREEN, move=" c4d ")
    assert request.move == "C4D"
    assert request.player == PlayerColor.GREEN


@pytest.mark.parametrize("invalid_move", ["A6", "A6RR", "66R", "AAR", "A61", "A²R", "A٣R", "É6R"])
def test_invalid_move(mock_id: UUID, invalid_move: str) -> None:
    """Structurally invalid: not <letter><digit><letter>."""
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, player=PlayerColor.BLUE, move=invalid_move)


def test_player_name_from_string(mock_id: UUID) -> None:
    request = MoveRequest(game_id=mock_id, player="green", move="G0U")
    assert request.player == PlayerColor.GREEN

    with pytest.raises(ValidationError):
        _ = MoveRequest(game_id=mock_id, player="red", move="G0U")
