"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


# --- NOTE the domain layer uses its own Player enum (src/enclosure/player.py). These are the names that cross the boundaries.


class PlayerColor(StrEnum):
    BLUE = "blue"
    GREEN = "green"


class Outcome(StrEnum):
    BLUE = "blue"
    GREEN = "green"
    DRAW = "draw"
