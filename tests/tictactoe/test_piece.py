"""Unit tests for /src/tictactoe/piece.py"""

import pytest

from src.core.exceptions import GameStateError
from src.tictactoe.piece import BOARD_SIZE, Piece


def test_piece_within_bounds() -> None:
    """happy case: every square of the board"""
    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            assert Piece(x, y).is_within_bounds()


@pytest.mark.parametrize("x, y", [(BOARD_SIZE, 0), (0, BOARD_SIZE), (-1, 0), (0, -1)])
def test_piece_out_of_bounds(x: int, y: int) -> None:
    assert not Piece(x, y).is_within_bounds()


def test_coordinates() -> None:
    piece = Piece.from_coordinates([2, 1])
    assert piece == Piece(2, 1)
    assert piece.to_coordinates() == [2, 1]
    assert Piece.from_coordinates((0, 2)) == Piece(0, 2)


def test_pieces_are_hashable_values() -> None:
    assert {Piece(1, 1), Piece(1, 1)} == {Piece(1, 1)}


@pytest.mark.parametrize(
    "coordinates",
    [
        [1.9, 0],  # would be truncated
        [0, "2"],
        [False, 1],
        [1, 2, 3],
        [1],
    ],
)
def test_coordinates_must_be_an_integer_pair(coordinates: list) -> None:
    with pytest.raises(GameStateError):
        Piece.from_coordinates(coordinates)
