"""
Where the service keeps its games between moves.

The game itself never persists anything; the service loads a GameModel, lets the game play one move, and saves the result.
"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameStore(Protocol):
    def add(self, game: GameModel) -> UUID:
        """Record a new game, returns the id it is filed under."""
        ...

    def load(self, game_id: UUID) -> GameModel | None: ...

    def save(self, game_id: UUID, game: GameModel) -> None:
        """Overwrite the state of a known game. Raises RepositoryError for an unknown id."""
        ...

    def remove(self, game_id: UUID) -> bool:
        """True if there was a game to remove."""
        ...
