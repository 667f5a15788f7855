"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.config import MIN_PLAYERS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Orientation, Status

PlayerName = str


def _is_cell_notation(value: str) -> bool:
    """Loose shape check ('e5'). Bounds are checked by the domain layer."""
    rank = value[1:]
    return len(value) >= 2 and value[0].isalpha() and rank.isascii() and rank.isdigit()


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    player_names: list[PlayerName]

    @field_validator("player_names")
    @classmethod
    def validate_player_names(cls, value: list[str]) -> list[str]:
        if len(value) < MIN_PLAYERS:
            raise InvalidRequestError(
                f"A game needs at least {MIN_PLAYERS} players, got {len(value)}."
            )
        if any(not name.strip() for name in value):
            raise InvalidRequestError("Player names cannot be empty.")
        if len(set(value)) != len(value):
            raise InvalidRequestError("Player names must be unique.")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class PossibleMovesRequest(BaseModel):
    game_id: UUID
    player_name: str


class MoveRequest(BaseModel):
    game_id: UUID
    player_name: str
    to_cell: str

    @field_validator("to_cell")
    @classmethod
    def validate_cell(cls, value: str) -> str:
        if not _is_cell_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret to_cell: {value!r} as a valid cell name."
            )
        return value


class WallRequest(BaseModel):
    game_id: UUID
    player_name: str
    anchor: str
    orientation: Orientation

    @field_validator("anchor")
    @classmethod
    def validate_anchor(cls, value: str) -> str:
        if not _is_cell_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret anchor: {value!r} as a valid cell name."
            )
        return value

    def to_notation(self) -> str:
        return f"{self.anchor}{self.orientation.value}"


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: list[PlayerName]
    positions: dict[PlayerName, str]
    walls: list[str]
    turn_player: PlayerName
    status: Status
    winner: Optional[PlayerName]
    history: list[str]


class PossibleMovesResponse(BaseModel):
    game_id: UUID
    player_name: str
    possible_moves: list[str]
