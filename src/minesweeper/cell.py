"""
Cell module for Minesweeper game.

Defines the coordinate value type used as a set key throughout the engine
and the phases a game moves through.
"""
from enum import Enum, auto
from typing import Iterator, NamedTuple


# ============================================================================
# Constants
# ============================================================================

# Literal 3x3 block, centre included.
NEIGHBORHOOD_OFFSETS = tuple(
    (delta_x, delta_y) for delta_x in (-1, 0, 1) for delta_y in (-1, 0, 1)
)


class GameStatus(Enum):
    """Possible phases of a game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    VICTORY = auto()
    DEFEAT = auto()

    @property
    def is_finished(self) -> bool:
        """Check if the game reached a terminal phase."""
        return self in (GameStatus.VICTORY, GameStatus.DEFEAT)


# ============================================================================
# Cell Value Type
# ============================================================================

class Cell(NamedTuple):
    """
    A position on the board.

    Attributes:
        x: Column index, growing to the right.
        y: Row index, growing downwards.
    """

    x: int
    y: int

    def neighborhood(self) -> Iterator["Cell"]:
        """
        Yield the 3x3 block around this cell, the cell itself included.

        Positions are not clipped; callers filter them against the board.
        """
        for delta_x, delta_y in NEIGHBORHOOD_OFFSETS:
            yield Cell(self.x + delta_x, self.y + delta_y)
