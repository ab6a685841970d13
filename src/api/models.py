"""Requests and Response models"""

from string import ascii_uppercase, digits
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.core.config import MAX_HEIGHT, MAX_WIDTH
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Outcome, PlayerColor, Status

PlayerName = str
CellXY = list[int]


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    width: int = Field(default=7, ge=1, le=MAX_WIDTH)
    height: int = Field(default=7, ge=1, le=MAX_HEIGHT)


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    player: PlayerColor
    move: str

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: str) -> str:
        """Only the shape is checked here. Whether the square is on the board depends on the game."""

        def _looks_like_notation(value: str) -> bool:
            if len(value) != 3:
                return False

            column, row, wall = value
            return column in ascii_uppercase and row in digits and wall in ascii_uppercase

        value = value.strip().upper()
        if not _looks_like_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret move: {value!r}. Expected <column><row><wall>, like 'A6R'."
            )
        return value


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    width: int
    height: int
    positions: dict[PlayerName, CellXY]
    horizontal_walls: list[list[Optional[PlayerName]]]
    vertical_walls: list[list[Optional[PlayerName]]]
    active_player: PlayerColor
    status: Status
    move_history: list[str]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player: PlayerColor
    legal_moves: list[str]


class ResultResponse(BaseModel):
    game_id: UUID
    winner: Outcome
    blue_area: int
    green_area: int
