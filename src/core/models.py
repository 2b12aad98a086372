"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PlayerName = str
Coordinates = list[int]  # [x, y]


@dataclass
class GameModel:
    """Transport-safe representation of a tic-tac-toe game used between API, Service, DB, and Game layers."""

    players: list[PlayerName]
    player_1: list[Coordinates]
    player_2: list[Coordinates]
    player_resigned: Optional[PlayerName]
    status: str
    winner: Optional[PlayerName] = None
