"""
Type definitions used across layers
"""

from enum import StrEnum

PlayerId = str


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


class MoveKind(StrEnum):
    PLACE = "place"
    RESIGN = "resign"
