"""Unit tests for /src/tictactoe/moves.py"""

import pytest

from src.core.exceptions import GameStateError
from src.core.shared_types import MoveKind
from src.tictactoe.moves import Place, Resign, move_from_dict, move_to_dict
from src.tictactoe.piece import Piece


def test_place_to_dict() -> None:
    assert move_to_dict(Place(Piece(0, 2))) == {"kind": "place", "x": 0, "y": 2}


def test_resign_to_dict() -> None:
    assert move_to_dict(Resign()) == {"kind": "resign"}


@pytest.mark.parametrize("game_move", [Place(Piece(1, 2)), Resign()])
def test_moves_survive_encoding(game_move: Place | Resign) -> None:
    assert move_from_dict(move_to_dict(game_move)) == game_move


def test_decode_accepts_enum_kind() -> None:
    """Request models hand over MoveKind members instead of plain strings."""
    assert move_from_dict({"kind": MoveKind.PLACE, "x": 1, "y": 1}) == Place(Piece(1, 1))
    assert move_from_dict({"kind": MoveKind.RESIGN, "x": None, "y": None}) == Resign()


def test_decode_keeps_out_of_range_coordinates() -> None:
    """Bounds are checked when the move is applied, not when it is decoded."""
    assert move_from_dict({"kind": "place", "x": 5, "y": -1}) == Place(Piece(5, -1))


@pytest.mark.parametrize(
    "data",
    [
        {"kind": "castle"},
        {},
        {"kind": "place", "x": 1},
        {"kind": "place", "y": 1},
        {"kind": "place", "x": 1.9, "y": 0},  # would be truncated to 1
        {"kind": "place", "x": 1.0, "y": 0},
        {"kind": "place", "x": "abc", "y": 0},
        {"kind": "place", "x": "1", "y": "2"},
        {"kind": "place", "x": True, "y": 0},
    ],
)
def test_decode_invalid(data: dict) -> None:
    with pytest.raises(GameStateError):
        move_from_dict(data)
