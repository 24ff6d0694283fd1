"""
Cell state tracking for Minesweeper.

Holds the three cell sets of one game (mines, marked, closed) together with
the board dimensions and answers membership and boundary queries.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, Set

from .cell import Cell


# ============================================================================
# Field State
# ============================================================================

@dataclass
class FieldState:
    """
    Mutable state of one field.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mines: Cells holding a mine, fixed for the lifetime of the field.
        marked: Cells flagged by the player.
        closed: Cells not yet opened.
    """

    width: int
    height: int
    mines: FrozenSet[Cell] = frozenset()
    marked: Set[Cell] = field(default_factory=set)
    closed: Set[Cell] = field(default_factory=set)

    # ========================================================================
    # Board Geometry
    # ========================================================================

    def in_bounds(self, cell: Cell) -> bool:
        """Check if a cell lies within [0, width) x [0, height)."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def all_cells(self) -> Iterator[Cell]:
        """Yield every cell of the board, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield Cell(x, y)

    def neighbors(self, cell: Cell) -> Iterator[Cell]:
        """Yield the in-bounds part of the 3x3 block around a cell."""
        for neighbor in Cell(*cell).neighborhood():
            if self.in_bounds(neighbor):
                yield neighbor

    @property
    def size(self) -> int:
        """Total number of cells on the board."""
        return self.width * self.height

    # ========================================================================
    # Membership Queries
    # ========================================================================

    def is_mine(self, cell: Cell) -> bool:
        return cell in self.mines

    def is_marked(self, cell: Cell) -> bool:
        return cell in self.marked

    def is_closed(self, cell: Cell) -> bool:
        return cell in self.closed

    def is_opened(self, cell: Cell) -> bool:
        return not self.is_closed(cell)

    def adjacent_mine_count(self, cell: Cell) -> int:
        """
        Count mines in the 3x3 block around a cell, clipped to the board.

        The block includes the cell itself, which only matters when the
        queried cell is a mine.
        """
        return sum(1 for neighbor in self.neighbors(cell) if self.is_mine(neighbor))

    # ========================================================================
    # Mutations
    # ========================================================================

    def toggle_mark(self, cell: Cell) -> bool:
        """
        Flip the mark on a cell.

        Returns:
            True if the cell is marked afterwards.
        """
        if cell in self.marked:
            self.marked.discard(cell)
            return False
        self.marked.add(cell)
        return True

    def open(self, cell: Cell) -> None:
        """Remove a cell from the closed set."""
        self.closed.discard(cell)

    @property
    def all_safe_opened(self) -> bool:
        """Check if only mine cells remain closed."""
        return len(self.closed) == len(self.mines)
