"""Orchestration between whoever submits moves (request models in, responses out), the game rules and the game store.

The service plays the part of the 'outside world' for the game: it knows who the players are,
whose turn it is and whether the game is already over. The game itself only knows the rules.
"""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
)
from src.core.exceptions import (
    GameError,
    GameStateError,
    NotAPlayerError,
    NotYourTurnError,
    RepositoryError,
)
from src.core.models import GameModel
from src.core.shared_types import MoveKind, Status
from src.db.repository import GameStore
from src.games.turn_based_game import check_player_count
from src.tictactoe.game import TicTacToe
from src.tictactoe.moves import move_from_dict

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Orchestration of layers for tic-tac-toe game."""

    def __init__(self, store: GameStore) -> None:
        self.store = store

    # -- Requests ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Both players are known up front, so the game starts right away."""

        # Player list is validated once, here, never again during the game
        check_player_count(TicTacToe, request.players)

        new_game = TicTacToe.initial(request.players)
        created_game_data = new_game.to_model(request.players)

        game_id = self.store.add(created_game_data)
        logger.info("Created game %s for players %s", game_id, request.players)
        return self._create_game_response(game_id, created_game_data)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Make a move attempt.
        -----

        1. game must still be in progress
        2. author must be one of the players
        3. placements only on your turn (resigning is always allowed)
        4. let the game validate + apply the move
        5. evaluate the outcome and store the new state
        """
        stored_model = self._fetch_game(request.game_id)
        players = stored_model.players

        if stored_model.status != Status.IN_PROGRESS:
            raise GameStateError(
                f"Game is not in progress. status: {stored_model.status}"
            )
        if request.player_name not in players:
            raise NotAPlayerError(
                f"{request.player_name!r} is not playing in game {request.game_id}."
            )

        game = TicTacToe.from_model(stored_model)
        if request.kind == MoveKind.PLACE:
            self._assert_your_turn(game, request.player_name, players)

        game_move = move_from_dict(request.model_dump(include={"kind", "x", "y"}))
        try:
            game.apply_move(game_move, request.player_name, players)
        except GameError as e:
            logger.warning(
                "Rejected move by %s in game %s: %s", request.player_name, request.game_id, e
            )
            raise

        after_move = game.to_model(players)
        self.store.save(request.game_id, after_move)
        if after_move.status == Status.FINISHED:
            logger.info("Game %s finished. winner: %s", request.game_id, after_move.winner)

        return self._create_game_response(request.game_id, after_move)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if not self.store.remove(request.game_id):
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")

    # -- Internal helpers --
    def _assert_your_turn(self, game: TicTacToe, player: str, players: list[str]) -> None:
        """The first player in the list opens. After that players alternate, so equal piece counts means player 1 moves."""
        player_to_move = (
            players[0] if len(game.player_1) == len(game.player_2) else players[1]
        )
        if player != player_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {player_to_move} to make a move first."
            )

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        return GameResponse(
            game_id=game_id,
            players=model.players,
            player_1=model.player_1,
            player_2=model.player_2,
            player_resigned=model.player_resigned,
            status=Status(model.status),
            winner=model.winner,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the store and raise error if it fails."""
        game_model = self.store.load(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
