"""
The two kinds of moves in tic-tac-toe: placing a piece, or resigning.

Moves are transient: the game consumes them and only keeps the resulting pieces / resignation marker.
"""

from dataclasses import dataclass
from typing import Any, Union

from src.core.exceptions import GameStateError
from src.core.shared_types import MoveKind
from src.tictactoe.piece import Piece, is_coordinate


@dataclass(frozen=True)
class Place:
    piece: Piece

    def to_dict(self) -> dict[str, Any]:
        return {"kind": MoveKind.PLACE.value, "x": self.piece.x, "y": self.piece.y}


@dataclass(frozen=True)
class Resign:
    def to_dict(self) -> dict[str, Any]:
        return {"kind": MoveKind.RESIGN.value}


TicTacToeMove = Union[Place, Resign]


def move_to_dict(game_move: TicTacToeMove) -> dict[str, Any]:
    return game_move.to_dict()


def move_from_dict(data: dict[str, Any]) -> TicTacToeMove:
    """
    Decode a move
    ---

    examples:
    * {"kind": "place", "x": 0, "y": 2}: put a piece on square (0, 2)
    * {"kind": "resign"}: give up the game
    """
    kind = data.get("kind")
    if kind == MoveKind.PLACE:
        x, y = data.get("x"), data.get("y")
        if x is None or y is None:
            raise GameStateError(f"A placement needs both coordinates: {data!r}")
        if not (is_coordinate(x) and is_coordinate(y)):
            raise GameStateError(f"Coordinates must be integers, got x={x!r}, y={y!r}")
        return Place(Piece(x, y))
    if kind == MoveKind.RESIGN:
        return Resign()
    raise GameStateError(
        f"Unknown move kind {kind!r}. Pick one from {','.join(k.value for k in MoveKind)}"
    )
