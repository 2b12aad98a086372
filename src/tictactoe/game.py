"""
The TicTacToe class implements the TurnBasedGame contract for the classic 3x3 game.

It owns the game state (the pieces of both players + who resigned, if anyone), checks whether a move is legal,
applies it, and decides whether the game has ended.

What it deliberately does NOT check (that is up to whoever drives the game):
* that the author of a move is one of the players
* that players take turns
* that the game is still going on
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError, OccupiedError, OutOfBoundsError
from src.core.models import GameModel
from src.core.shared_types import PlayerId, Status
from src.games.turn_based_game import Finished, GameOutcome, Ongoing, TurnBasedGame
from src.tictactoe.board import (
    DenseBoard,
    Mark,
    from_dense,
    line_sums,
    to_dense,
)
from src.tictactoe.moves import Resign, TicTacToeMove
from src.tictactoe.piece import BOARD_SIZE, Piece

logger = logging.getLogger(__name__)

NUMBER_OF_PLAYERS = 2


@dataclass(frozen=True)
class Winner:
    player: PlayerId


@dataclass
class TicTacToe(TurnBasedGame[TicTacToeMove, Winner]):
    player_1: list[Piece] = field(default_factory=list)
    player_2: list[Piece] = field(default_factory=list)
    player_resigned: Optional[PlayerId] = None

    # --- GAME CONTRACT ---
    @classmethod
    def min_players(cls) -> Optional[int]:
        return NUMBER_OF_PLAYERS

    @classmethod
    def max_players(cls) -> Optional[int]:
        return NUMBER_OF_PLAYERS

    @classmethod
    def initial(cls, players: list[PlayerId]) -> Self:
        """The players are only needed later on to tell player 1 from player 2. Every game starts empty."""
        return cls(player_1=[], player_2=[], player_resigned=None)

    def apply_move(
        self, game_move: TicTacToeMove, author: PlayerId, players: list[PlayerId]
    ) -> None:
        """
        Attempt to make a move
        -----

        Placement:
        1. the square must be on the board
        2. the square must be empty
        3. the piece goes to player 1 if the author is the first player in the list, otherwise to player 2

        Resignation: remember who resigned (overwrites an earlier resignation).

        Raises before touching the state, so a rejected move can simply be retried.
        """
        if isinstance(game_move, Resign):
            self.player_resigned = author
            logger.debug("Player %s resigned", author)
            return

        piece = game_move.piece
        self._assert_within_bounds(piece)
        self._assert_empty(piece)
        if author == players[0]:
            self.player_1.append(piece)
        else:
            self.player_2.append(piece)
        logger.debug("Player %s placed a piece on (%d, %d)", author, piece.x, piece.y)

    def outcome(self, players: list[PlayerId]) -> GameOutcome[Winner]:
        """
        Decide whether the game is over
        ----

        In order of priority:
        1. somebody resigned --> the other player wins (whatever is on the board)
        2. a row, column or diagonal is filled by one player --> that player wins (player 1 checked first)
        3. otherwise the game is ongoing. NOTE a full board without a line is also 'ongoing', there is no draw.
        """
        if self.player_resigned is not None:
            winner = players[1] if self.player_resigned == players[0] else players[0]
            return Finished(Winner(winner))

        sums = line_sums(self.to_dense())
        if BOARD_SIZE in sums:
            return Finished(Winner(players[0]))
        if -BOARD_SIZE in sums:
            return Finished(Winner(players[1]))
        return Ongoing()

    # --- BOARD CONVERSION ---
    def to_dense(self) -> DenseBoard:
        return to_dense(self.player_1, self.player_2)

    @classmethod
    def from_dense(cls, board: list[list[int]]) -> Self:
        """Rebuild a state from a grid. Order of the pieces follows the scan order, and nobody has resigned."""
        player_1, player_2 = from_dense(board)
        return cls(player_1=player_1, player_2=player_2, player_resigned=None)

    # --- BOUNDARY MODEL ---
    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a TicTacToe from the information the Service layer actually has"""
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )
        try:
            player_1 = [Piece.from_coordinates(c) for c in model.player_1]
            player_2 = [Piece.from_coordinates(c) for c in model.player_2]
        except TypeError as e:
            raise GameStateError(f"Stored pieces cannot be read: {e}") from e
        cls._assert_valid_pieces(player_1 + player_2)
        return cls(
            player_1=player_1, player_2=player_2, player_resigned=model.player_resigned
        )

    def to_model(self, players: list[PlayerId]) -> GameModel:
        """Encode back into a format the Service layer uses. Status and winner are derived from the outcome."""
        outcome = self.outcome(players)
        finished = isinstance(outcome, Finished)
        return GameModel(
            players=list(players),
            player_1=[piece.to_coordinates() for piece in self.player_1],
            player_2=[piece.to_coordinates() for piece in self.player_2],
            player_resigned=self.player_resigned,
            status=(Status.FINISHED if finished else Status.IN_PROGRESS).value,
            winner=outcome.result.player if finished else None,
        )

    # -- PRIVATE HELPERS ---
    @staticmethod
    def _assert_valid_pieces(pieces: list[Piece]) -> None:
        """Stored state never went through apply_move here, so re-check what apply_move would have enforced."""
        off_board = [piece for piece in pieces if not piece.is_within_bounds()]
        if off_board:
            raise GameStateError(f"Stored pieces are not on the board: {off_board}")
        if len(set(pieces)) != len(pieces):
            raise GameStateError("Stored pieces share a square.")

    def _assert_within_bounds(self, piece: Piece) -> None:
        if not piece.is_within_bounds():
            raise OutOfBoundsError(
                f"Position ({piece.x}, {piece.y}) is not on the {BOARD_SIZE}x{BOARD_SIZE} board."
            )

    def _assert_empty(self, piece: Piece) -> None:
        """NOTE: only call after the bounds check, negative indices would silently wrap around."""
        if self.to_dense()[piece.x][piece.y] != Mark.EMPTY:
            raise OccupiedError(f"A piece already exists at ({piece.x}, {piece.y}).")
