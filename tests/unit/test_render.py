"""
Unit tests for board rendering.

Tests the text symbols and the numeric observation array.
"""
import numpy as np
from minesweeper import Cell, GameStatus, Minesweeper


# ============================================================================
# Text Render Tests
# ============================================================================

class TestRender:
    """Test the text projection of the board."""

    def test_new_board_all_closed(self, wall_game: Minesweeper) -> None:
        """Fresh board shows only closed symbols."""
        assert wall_game.render() == ["-----", "-----", "-----"]

    def test_shape(self) -> None:
        """One row per y, one symbol per x."""
        rows = Minesweeper(7, 2, 3).render()
        assert len(rows) == 2
        assert all(len(row) == 7 for row in rows)

    def test_numbers_and_empty_cells(self, wall_game: Minesweeper) -> None:
        """Opened cells show counts, zero as a dot."""
        wall_game.open_cell(Cell(0, 0))
        assert wall_game.render() == [".2---", ".3---", ".2---"]

    def test_marked_cells(self, corner_mine_game: Minesweeper) -> None:
        """Marks show as question marks over closed cells."""
        corner_mine_game.mark_cell(Cell(1, 0))
        corner_mine_game.open_cell(Cell(0, 0))
        assert corner_mine_game.render() == [".?-", ".1-", ".1-"]

    def test_mark_shows_over_opened_cell(self, wall_game: Minesweeper) -> None:
        """A mark on an opened cell hides its number."""
        wall_game.open_cell(Cell(1, 1))
        wall_game.mark_cell(Cell(1, 1))
        assert wall_game.render()[1] == "-?---"

    def test_mines_hidden_on_victory(self, corner_mine_game: Minesweeper) -> None:
        """Winning does not reveal mines."""
        corner_mine_game.open_cell(Cell(0, 0))
        assert corner_mine_game.status == GameStatus.VICTORY
        assert corner_mine_game.render() == ["...", ".11", ".1-"]

    def test_mine_beats_mark_on_defeat(self, wall_game: Minesweeper) -> None:
        """After defeat a marked mine shows as a mine."""
        wall_game.mark_cell(Cell(2, 0))
        wall_game.mark_cell(Cell(0, 0))
        wall_game.open_cell(Cell(2, 2))
        assert wall_game.render() == ["?-*--", "--*--", "--*--"]

    def test_str_joins_rows(self, column_game: Minesweeper) -> None:
        """String form is one line per row."""
        assert str(column_game) == "-\n-"

    def test_empty_board(self) -> None:
        """Zero-height board renders no rows."""
        assert Minesweeper(0, 0, 0).render() == []


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test observation array for agents."""

    def test_observation_shape_matches_board(self, wall_game: Minesweeper) -> None:
        """Observation is (height, width)."""
        assert wall_game.get_observation().shape == (3, 5)

    def test_observation_dtype_is_int8(self, wall_game: Minesweeper) -> None:
        """Observation uses int8."""
        assert wall_game.get_observation().dtype == np.int8

    def test_new_board_observation_all_closed(self, wall_game: Minesweeper) -> None:
        """New board observation is all -1."""
        assert np.all(wall_game.get_observation() == -1)

    def test_marked_and_opened_values(self, wall_game: Minesweeper) -> None:
        """Marks are -2 and opened cells carry their count."""
        wall_game.mark_cell(Cell(4, 0))
        wall_game.open_cell(Cell(0, 0))
        obs = wall_game.get_observation()
        assert obs[0, 4] == -2
        assert obs[1, 1] == 3
        assert obs[2, 0] == 0

    def test_mines_after_defeat(self, wall_game: Minesweeper) -> None:
        """Mines show as 9 after defeat."""
        wall_game.open_cell(Cell(2, 0))
        obs = wall_game.get_observation()
        assert list(obs[:, 2]) == [9, 9, 9]
