"""
Contract every turn-based game has to fulfil.

The layer that stores and orders moves (service, ledger, ...) only talks to a game through this interface,
so it never needs to know the rules of the game it is hosting.

Flow for the caller:
1. check the player list once with `check_player_count`
2. `initial(players)` to get a fresh state
3. for every incoming move: `apply_move(...)`, then `outcome(...)` to see if the game is over
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, Self, TypeVar, Union

from src.core.exceptions import GameStateError
from src.core.shared_types import PlayerId

MoveT = TypeVar("MoveT")
ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class Ongoing:
    """Nobody has won (yet)."""


@dataclass(frozen=True)
class Finished(Generic[ResultT]):
    """The game is over. What 'result' looks like is up to the game."""

    result: ResultT


GameOutcome = Union[Ongoing, Finished[ResultT]]


class TurnBasedGame(ABC, Generic[MoveT, ResultT]):
    """A game state that knows how to evolve itself one move at a time."""

    @classmethod
    @abstractmethod
    def min_players(cls) -> Optional[int]:
        """Lower bound on the number of players. None means no bound."""

    @classmethod
    @abstractmethod
    def max_players(cls) -> Optional[int]:
        """Upper bound on the number of players. None means no bound."""

    @classmethod
    @abstractmethod
    def initial(cls, players: list[PlayerId]) -> Self:
        """Fresh state for the given (ordered) list of players."""

    @abstractmethod
    def apply_move(
        self, game_move: MoveT, author: PlayerId, players: list[PlayerId]
    ) -> None:
        """
        Validate and apply a move made by `author`, updating the state in place.

        Must raise (and leave the state untouched) when the move is illegal.
        """

    @abstractmethod
    def outcome(self, players: list[PlayerId]) -> GameOutcome[ResultT]:
        """Evaluate the current state. Never mutates."""


def check_player_count(
    game_type: type[TurnBasedGame], players: list[PlayerId]
) -> None:
    """
    Make sure the list of players fits the bounds of the game.

    NOTE: this is a precondition for creating a game. Games do not check it again on every move.
    """
    minimum = game_type.min_players()
    maximum = game_type.max_players()
    if minimum is not None and len(players) < minimum:
        raise GameStateError(
            f"{game_type.__name__} needs at least {minimum} players, got {len(players)}."
        )
    if maximum is not None and len(players) > maximum:
        raise GameStateError(
            f"{game_type.__name__} allows at most {maximum} players, got {len(players)}."
        )
