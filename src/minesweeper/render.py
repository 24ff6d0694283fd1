"""
Board rendering for Minesweeper.

Projects a field into rows of text symbols for display, or into a numeric
array for agents.
"""
from typing import List

import numpy as np

from .cell import Cell, GameStatus
from .state import FieldState


# ============================================================================
# Constants
# ============================================================================

MINE_SYMBOL = "*"
MARKED_SYMBOL = "?"
CLOSED_SYMBOL = "-"
EMPTY_SYMBOL = "."

CLOSED_VALUE = -1
MARKED_VALUE = -2
MINE_VALUE = 9


# ============================================================================
# Text Rendering
# ============================================================================

def render_cell(state: FieldState, status: GameStatus, cell: Cell) -> str:
    """
    Symbol for a single cell.

    Mines are only revealed once the game is lost; a mark hides whatever
    is underneath it, opened or not.
    """
    if status == GameStatus.DEFEAT and state.is_mine(cell):
        return MINE_SYMBOL
    if state.is_marked(cell):
        return MARKED_SYMBOL
    if state.is_closed(cell):
        return CLOSED_SYMBOL
    mines_near = state.adjacent_mine_count(cell)
    return str(mines_near) if mines_near else EMPTY_SYMBOL


def render_field(state: FieldState, status: GameStatus) -> List[str]:
    """
    Render the field as text.

    Args:
        state: Field to render.
        status: Current game status.

    Returns:
        One string per row, top row first, one symbol per column.
    """
    return [
        "".join(render_cell(state, status, Cell(x, y)) for x in range(state.width))
        for y in range(state.height)
    ]


# ============================================================================
# Numeric Observation
# ============================================================================

def get_observation(state: FieldState, status: GameStatus) -> np.ndarray:
    """
    Get the visible field as a numpy array.

    Returns:
        2D int8 array of shape (height, width) where:
            -1 = closed
            -2 = marked
            0-8 = opened with adjacent mine count
            9 = mine, shown after defeat
    """
    obs = np.full((state.height, state.width), CLOSED_VALUE, dtype=np.int8)
    for cell in state.all_cells():
        if status == GameStatus.DEFEAT and state.is_mine(cell):
            obs[cell.y, cell.x] = MINE_VALUE
        elif state.is_marked(cell):
            obs[cell.y, cell.x] = MARKED_VALUE
        elif state.is_opened(cell):
            obs[cell.y, cell.x] = state.adjacent_mine_count(cell)
    return obs
