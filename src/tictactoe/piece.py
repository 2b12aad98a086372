"""
A piece on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.core.exceptions import GameStateError

# Only the classic 3x3 board is supported
BOARD_SIZE = 3


def is_coordinate(value: Any) -> bool:
    """Only real integers. Floats would get truncated, and bools are ints in disguise."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Piece:
    """The mark a player left on square (x, y). Which player owns it follows from the collection it is stored in."""

    x: int
    y: int

    @classmethod
    def from_coordinates(cls, coordinates: list[int] | tuple[int, int]) -> Piece:
        if len(coordinates) != 2 or not all(is_coordinate(c) for c in coordinates):
            raise GameStateError(f"Coordinates must be a pair of integers, got {coordinates!r}.")
        x, y = coordinates
        return cls(x, y)

    def to_coordinates(self) -> list[int]:
        return [self.x, self.y]

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_SIZE) and (0 <= self.y < BOARD_SIZE)
