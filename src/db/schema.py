"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    """
    One row per game.

    `board` holds the game state as a single document: {"player_1": [[x, y], ...], "player_2": [...], "player_resigned": ...}.
    The outcome (status / winner) and the number of pieces placed get their own columns so they can be queried.
    """

    __tablename__ = "tictactoe_games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    players: Mapped[list[str]] = mapped_column(JSON)
    board: Mapped[dict[str, Any]] = mapped_column(JSON)
    pieces_placed: Mapped[int] = mapped_column(default=0)
    status: Mapped[str] = mapped_column(index=True)
    winner: Mapped[Optional[str]]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
