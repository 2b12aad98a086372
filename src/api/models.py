"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import InvalidRequestError
from src.core.models import Coordinates, PlayerName
from src.core.shared_types import MoveKind, Status


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    players: list[PlayerName]

    @field_validator("players")
    @classmethod
    def validate_players(cls, value: list[PlayerName]) -> list[PlayerName]:
        """Tic-tac-toe is played by exactly two different players."""
        if len(value) != 2:
            raise InvalidRequestError(
                f"A game needs exactly 2 players, got {len(value)}."
            )
        if any(not name.strip() for name in value):
            raise InvalidRequestError("Player names cannot be blank.")
        if value[0] == value[1]:
            raise InvalidRequestError(
                f"Players must be two different people, got {value[0]!r} twice."
            )
        return value


class MoveRequest(BaseModel):
    game_id: UUID
    player_name: PlayerName
    kind: MoveKind
    x: Optional[int] = None
    y: Optional[int] = None

    @model_validator(mode="after")
    def validate_coordinates(self) -> Self:
        """
        Placements need a square, resignations must not have one.

        NOTE: whether the square is on the board is for the game to decide, not the request.
        """
        has_x, has_y = self.x is not None, self.y is not None
        if self.kind == MoveKind.PLACE and not (has_x and has_y):
            raise InvalidRequestError("Placing a piece requires both x and y.")
        if self.kind == MoveKind.RESIGN and (has_x or has_y):
            raise InvalidRequestError("Resigning does not take coordinates.")
        return self


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: list[PlayerName]
    player_1: list[Coordinates]
    player_2: list[Coordinates]
    player_resigned: Optional[PlayerName]
    status: Status
    winner: Optional[PlayerName]
