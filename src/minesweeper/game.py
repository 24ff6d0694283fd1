"""
Game engine for Minesweeper.

Owns the field state, runs the flood-fill open, tracks game status and
elapsed time, and renders the board.
"""
import logging
import random
import time
from collections import deque
from typing import Callable, Deque, FrozenSet, List, Optional, Set

import numpy as np

from .cell import Cell, GameStatus
from .errors import OutOfBounds
from .field import MineSpec, generate_field
from .render import get_observation, render_field
from .state import FieldState

logger = logging.getLogger(__name__)


# ============================================================================
# Engine
# ============================================================================

class Minesweeper:
    """
    Single-player Minesweeper game.

    Every transition happens inside a caller-invoked method; there is no
    background timer. Instances are not thread-safe.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mines: MineSpec,
        rng=None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Create a game.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: Mine count for random placement, or an iterable of cells.
            rng: Random source with a `shuffle` method (default: fresh
                `random.Random`).
            clock: Zero-argument callable returning wall-clock seconds.

        Raises:
            InvalidConfiguration: Bad dimensions or too many mines.
            InvalidCell: An explicit mine lies outside the board.
        """
        self.rng = rng if rng is not None else random.Random()
        self._clock = clock
        self._state = FieldState(width=0, height=0)
        self._status = GameStatus.NOT_STARTED
        self._start_time = 0
        self._finish_time = 0
        self.new_game(width, height, mines)

    # ========================================================================
    # Game Setup
    # ========================================================================

    def new_game(self, width: int, height: int, mines: MineSpec) -> None:
        """
        Replace the whole game with a freshly generated one.

        The new field is validated before anything is discarded, so a
        failed call leaves the current game untouched.
        """
        state = generate_field(width, height, mines, self.rng)
        self._state = state
        self._status = GameStatus.NOT_STARTED
        self._start_time = 0
        self._finish_time = 0
        logger.debug(
            "New game %dx%d with %d mines", width, height, len(state.mines)
        )

    def _now(self) -> int:
        return int(self._clock())

    def _start(self) -> None:
        self._status = GameStatus.IN_PROGRESS
        self._start_time = self._now()
        logger.debug("Game started")

    def _finish(self, status: GameStatus) -> None:
        self._status = status
        self._finish_time = self._now()
        logger.debug("Game finished: %s", status.name)

    def _check_bounds(self, cell: Cell) -> Cell:
        cell = Cell(*cell)
        if not self._state.in_bounds(cell):
            raise OutOfBounds(f"A cell outside the field boundary: {tuple(cell)}")
        return cell

    # ========================================================================
    # Game Actions
    # ========================================================================

    def open_cell(self, cell: Cell) -> Set[Cell]:
        """
        Open a cell, cascading through cells with no adjacent mines.

        Opening a mine loses the game and opens nothing. Opening the last
        closed safe cell wins it. Finished games, marked cells and already
        opened cells are left as they are.

        Args:
            cell: Cell to open.

        Returns:
            Cells opened by this call.

        Raises:
            OutOfBounds: The cell lies outside the board.
        """
        cell = self._check_bounds(cell)
        state = self._state
        if self.is_finished or state.is_marked(cell) or state.is_opened(cell):
            return set()

        if self._status == GameStatus.NOT_STARTED:
            self._start()

        if state.is_mine(cell):
            self._finish(GameStatus.DEFEAT)
            return set()

        opened = self._flood_open(cell)
        logger.debug("Opened %d cells from %s", len(opened), tuple(cell))

        if state.all_safe_opened:
            self._finish(GameStatus.VICTORY)
        return opened

    def _flood_open(self, seed: Cell) -> Set[Cell]:
        """Breadth-first reveal starting at a safe closed cell."""
        state = self._state
        state.open(seed)
        opened = {seed}
        queue: Deque[Cell] = deque([seed])

        while queue:
            current = queue.popleft()
            if state.adjacent_mine_count(current):
                continue
            for neighbor in state.neighbors(current):
                if state.is_closed(neighbor) and not state.is_marked(neighbor):
                    # Opened on enqueue so no cell is queued twice
                    state.open(neighbor)
                    opened.add(neighbor)
                    queue.append(neighbor)

        return opened

    def mark_cell(self, cell: Cell) -> Optional[bool]:
        """
        Toggle the mark on a cell.

        Opened cells can be marked too.

        Args:
            cell: Cell to mark or unmark.

        Returns:
            True if the cell is now marked, False if unmarked, None if the
            game is already finished.

        Raises:
            OutOfBounds: The cell lies outside the board.
        """
        cell = self._check_bounds(cell)
        if self.is_finished:
            return None

        if self._status == GameStatus.NOT_STARTED:
            self._start()

        return self._state.toggle_mark(cell)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_finished(self) -> bool:
        """Check if the game was won or lost."""
        return self._status.is_finished

    def elapsed_time(self) -> int:
        """
        Get game time in whole seconds.

        Zero before the first action, running while in progress, frozen
        once the game ends.
        """
        if self._status == GameStatus.NOT_STARTED:
            return 0
        if self._status == GameStatus.IN_PROGRESS:
            return self._now() - self._start_time
        return self._finish_time - self._start_time

    @property
    def width(self) -> int:
        return self._state.width

    @property
    def height(self) -> int:
        return self._state.height

    @property
    def mines(self) -> FrozenSet[Cell]:
        return self._state.mines

    @property
    def marked(self) -> FrozenSet[Cell]:
        return frozenset(self._state.marked)

    @property
    def closed(self) -> FrozenSet[Cell]:
        return frozenset(self._state.closed)

    def in_bounds(self, cell: Cell) -> bool:
        return self._state.in_bounds(cell)

    def is_mine(self, cell: Cell) -> bool:
        return self._state.is_mine(Cell(*cell))

    def is_marked(self, cell: Cell) -> bool:
        return self._state.is_marked(Cell(*cell))

    def is_closed(self, cell: Cell) -> bool:
        return self._state.is_closed(Cell(*cell))

    def is_opened(self, cell: Cell) -> bool:
        return self._state.is_opened(Cell(*cell))

    def adjacent_mine_count(self, cell: Cell) -> int:
        return self._state.adjacent_mine_count(Cell(*cell))

    # ========================================================================
    # Rendering
    # ========================================================================

    def render(self) -> List[str]:
        """Render the board as one string per row, top row first."""
        return render_field(self._state, self._status)

    def get_observation(self) -> np.ndarray:
        """Get the visible board as an int8 array of shape (height, width)."""
        return get_observation(self._state, self._status)

    def __str__(self) -> str:
        return "\n".join(self.render())
