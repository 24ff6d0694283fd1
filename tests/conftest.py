"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Cell, FieldConfig, Minesweeper


# ============================================================================
# Clock
# ============================================================================

class FakeClock:
    """Manually advanced wall clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at t=1000."""
    return FakeClock()


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_game(clock: FakeClock) -> Minesweeper:
    """3x3 board with a single mine in the bottom-right corner."""
    return Minesweeper(3, 3, [Cell(2, 2)], clock=clock)


@pytest.fixture
def column_game(clock: FakeClock) -> Minesweeper:
    """1x2 board with a mine on top."""
    return Minesweeper(1, 2, [Cell(0, 0)], clock=clock)


@pytest.fixture
def wall_game(clock: FakeClock) -> Minesweeper:
    """
    5x3 board with a wall of mines in column 2.

        .2*2.
        .3*3.
        .2*2.
    """
    return Minesweeper(5, 3, [Cell(2, 0), Cell(2, 1), Cell(2, 2)], clock=clock)


@pytest.fixture
def random_game(clock: FakeClock) -> Minesweeper:
    """9x9 board with 10 randomly placed mines from a seeded source."""
    return Minesweeper(9, 9, 10, rng=random.Random(42), clock=clock)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> FieldConfig:
    """Create a valid field configuration."""
    return FieldConfig(9, 9, 10)


@pytest.fixture
def small_config() -> FieldConfig:
    """Small 3x3 field with 1 mine."""
    return FieldConfig(3, 3, 1)
