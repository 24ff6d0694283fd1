"""
Minesweeper game module.

Provides the rules engine: field generation, cell state tracking,
flood-fill opening, status and clock, and rendering.
"""
from .cell import Cell, GameStatus
from .errors import InvalidCell, InvalidConfiguration, MinesweeperError, OutOfBounds
from .field import FieldConfig, generate_field
from .game import Minesweeper
from .state import FieldState
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "GameStatus",
    "MinesweeperError",
    "InvalidConfiguration",
    "InvalidCell",
    "OutOfBounds",
    "FieldConfig",
    "FieldState",
    "generate_field",
    "Minesweeper",
    "MinesweeperEnv",
]
