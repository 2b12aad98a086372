"""
The dense board: a grid view of who owns which square.

The game state only stores the pieces per player. Whenever the rules need to look at squares
(is it free? is a line complete?) we fold those pieces into a grid, indexed as board[x][y].
"""

from enum import IntEnum

from src.core.exceptions import GameStateError
from src.tictactoe.piece import BOARD_SIZE, Piece


class Mark(IntEnum):
    EMPTY = 0
    PLAYER_1 = 1
    PLAYER_2 = 2


DenseBoard = list[list[Mark]]
VALID_MARKS = {mark.value for mark in Mark}

# Contribution of a single square to the sum along a line
MARK_VALUES: dict[Mark, int] = {
    Mark.EMPTY: 0,
    Mark.PLAYER_1: 1,
    Mark.PLAYER_2: -1,
}


def _build_lines() -> list[list[Piece]]:
    """All lines that win the game: the rows, the columns and both diagonals."""
    rows = [[Piece(x, y) for x in range(BOARD_SIZE)] for y in range(BOARD_SIZE)]
    columns = [[Piece(x, y) for y in range(BOARD_SIZE)] for x in range(BOARD_SIZE)]
    diagonal_down = [Piece(i, i) for i in range(BOARD_SIZE)]
    diagonal_up = [Piece(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)]
    return [*rows, *columns, diagonal_down, diagonal_up]


LINES: list[list[Piece]] = _build_lines()


def empty_board() -> DenseBoard:
    return [[Mark.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def to_dense(player_1: list[Piece], player_2: list[Piece]) -> DenseBoard:
    """
    Fold both collections of pieces into a grid.

    NOTE: player 2 is written last. Should both players hold the same square (only possible when
    bypassing the move validation), player 2 silently wins that square. No re-validation happens here.
    """
    board = empty_board()
    for piece in player_1:
        board[piece.x][piece.y] = Mark.PLAYER_1
    for piece in player_2:
        board[piece.x][piece.y] = Mark.PLAYER_2
    return board


def from_dense(board: list[list[int]]) -> tuple[list[Piece], list[Piece]]:
    """Reverse of to_dense: scan the grid and return the pieces of player 1 and player 2."""
    if len(board) != BOARD_SIZE or any(len(column) != BOARD_SIZE for column in board):
        raise GameStateError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}.")

    player_1: list[Piece] = []
    player_2: list[Piece] = []
    for x, column in enumerate(board):
        for y, square in enumerate(column):
            if square not in VALID_MARKS:
                raise GameStateError(f"Unknown mark {square!r} on square ({x}, {y}).")
            if square == Mark.PLAYER_1:
                player_1.append(Piece(x, y))
            elif square == Mark.PLAYER_2:
                player_2.append(Piece(x, y))
    return player_1, player_2


def line_sums(board: DenseBoard) -> list[int]:
    """
    Sum of the square values along every winning line.

    +BOARD_SIZE means player 1 owns the whole line, -BOARD_SIZE means player 2 does.
    """
    return [
        sum(MARK_VALUES[board[piece.x][piece.y]] for piece in line) for line in LINES
    ]