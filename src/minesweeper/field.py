"""
Field generation for Minesweeper.

Validates board parameters and places mines either at random or at
explicitly supplied positions.
"""
from dataclasses import dataclass
from numbers import Integral
from typing import FrozenSet, Iterable, List, Union

from .cell import Cell
from .errors import InvalidCell, InvalidConfiguration
from .state import FieldState


MineSpec = Union[int, Iterable[Cell]]


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class FieldConfig:
    """
    Configuration for a Minesweeper field.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mines_count: Total mines to place.
    """

    width: int
    height: int
    mines_count: int

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 0 or self.height < 0:
            raise InvalidConfiguration("Board dimensions cannot be negative")
        if self.mines_count < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        if self.mines_count > self.size:
            raise InvalidConfiguration(f"Too many mines (max {self.size})")

    @property
    def size(self) -> int:
        """Total number of cells on the board."""
        return self.width * self.height


# ============================================================================
# Mine Placement
# ============================================================================

def _board_cells(width: int, height: int) -> List[Cell]:
    return [Cell(x, y) for x in range(width) for y in range(height)]


def place_random_mines(width: int, height: int, count: int, rng) -> FrozenSet[Cell]:
    """
    Choose `count` distinct cells uniformly at random.

    Args:
        width: Number of columns.
        height: Number of rows.
        count: Number of mines, at most width * height.
        rng: Any object with an in-place `shuffle` method.

    Returns:
        The mine cells.
    """
    if not count:
        return frozenset()
    positions = _board_cells(width, height)
    rng.shuffle(positions)
    return frozenset(Cell(*position) for position in positions[:count])


def check_explicit_mines(
    width: int, height: int, cells: Iterable[Cell]
) -> FrozenSet[Cell]:
    """
    Validate explicitly placed mines.

    Raises:
        InvalidConfiguration: More mines than cells on the board.
        InvalidCell: A mine lies outside the board.
    """
    mines = frozenset(Cell(*cell) for cell in cells)
    FieldConfig(width, height, len(mines))
    for cell in mines:
        if not (0 <= cell.x < width and 0 <= cell.y < height):
            raise InvalidCell(f"Incorrect mine position {tuple(cell)}")
    return mines


# ============================================================================
# Field Generation
# ============================================================================

def generate_field(width: int, height: int, mines: MineSpec, rng) -> FieldState:
    """
    Build a fresh field with every cell closed and nothing marked.

    Args:
        width: Number of columns.
        height: Number of rows.
        mines: Either a mine count or an iterable of mine cells.
        rng: Random source used for the count form.

    Returns:
        New field state.
    """
    if isinstance(mines, Integral):
        config = FieldConfig(width, height, int(mines))
        mine_cells = place_random_mines(
            config.width, config.height, config.mines_count, rng
        )
    else:
        mine_cells = check_explicit_mines(width, height, mines)

    state = FieldState(width=width, height=height, mines=mine_cells)
    state.closed = set(state.all_cells())
    return state
