"""GameStore backed by SQLAlchemy"""

import logging
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.schema import DBGame

logger = logging.getLogger(__name__)


def board_document(game: GameModel) -> dict[str, Any]:
    """The part of the GameModel the game itself owns, as one JSON document."""
    return {
        "player_1": [list(c) for c in game.player_1],
        "player_2": [list(c) for c in game.player_2],
        "player_resigned": game.player_resigned,
    }


class SQLGameStore:
    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def add(self, game: GameModel) -> UUID:
        record = DBGame(id=uuid4())
        self._write(record, game)
        self.db.add(record)
        self.db.commit()
        logger.debug("Stored new game %s", record.id)
        return record.id

    def load(self, game_id: UUID) -> GameModel | None:
        record = self.db.get(DBGame, game_id)
        return self._read(record) if record else None

    def save(self, game_id: UUID, game: GameModel) -> None:
        record = self.db.get(DBGame, game_id)
        if record is None:
            raise RepositoryError(f"Cannot save unknown game {game_id}.")
        self._write(record, game)
        self.db.commit()

    def remove(self, game_id: UUID) -> bool:
        record = self.db.get(DBGame, game_id)
        if record is None:
            return False
        self.db.delete(record)
        self.db.commit()
        return True

    # JSON columns are not tracked for in-place mutation, always assign fresh values
    def _write(self, record: DBGame, game: GameModel) -> None:
        record.players = list(game.players)
        record.board = board_document(game)
        record.pieces_placed = len(game.player_1) + len(game.player_2)
        record.status = game.status
        record.winner = game.winner

    def _read(self, record: DBGame) -> GameModel:
        board = record.board
        return GameModel(
            players=list(record.players),
            player_1=[list(c) for c in board["player_1"]],
            player_2=[list(c) for c in board["player_2"]],
            player_resigned=board.get("player_resigned"),
            status=record.status,
            winner=record.winner,
        )
