"""
Custom exceptions shared across layers.

Every layer raises something deriving from GameError, so the service (or whatever sits on top of it) can catch one type.
"""


class GameError(Exception):
    """Top-level exception for anything related to playing a game."""


# --- RULES ENGINE ---
class IllegalMoveError(GameError):
    """The move breaks the rules of the game. The game state is left untouched."""


class OutOfBoundsError(IllegalMoveError):
    """A piece was placed outside of the board."""


class OccupiedError(IllegalMoveError):
    """A piece was placed on a square that already holds a piece."""


class GameStateError(GameError):
    """The game (or the stored representation of it) is not in a state that allows the request."""


# --- PROTOCOL LAYER (service) ---
class NotYourTurnError(GameError):
    """A player tried to place a piece while waiting for the opponent."""


class NotAPlayerError(GameError):
    """The author of a move is not registered in the game."""


# --- PERSISTENCE / API ---
class RepositoryError(GameError):
    """Record could not be found (or stored)."""


class InvalidRequestError(GameError):
    """Incoming request failed validation."""
