"""
Gymnasium environment wrapper for Minesweeper.

Exposes the engine through a standard RL interface.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import Cell, GameStatus
from .field import FieldConfig
from .game import Minesweeper
from .render import MARKED_VALUE, MINE_VALUE


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (height, width) where:
        - -1 = closed cell
        - -2 = marked cell
        - 0-8 = opened cell with adjacent mine count
        - 9 = mine, shown after defeat

    Actions:
        Discrete action space of size width * height.
        Action i opens the cell at (i % width, i // width).

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Field configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or FieldConfig(9, 9, 10)
        self.render_mode = render_mode
        self.game = Minesweeper(
            self.config.width,
            self.config.height,
            self.config.mines_count,
            rng=self.np_random,
        )

        self.observation_space = spaces.Box(
            low=MARKED_VALUE,
            high=MINE_VALUE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.height * self.config.width)

        self._steps = 0
        self._total_safe_cells = self.config.size - self.config.mines_count

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game.rng = self.np_random
        self.game.new_game(
            self.config.width, self.config.height, self.config.mines_count
        )
        self._steps = 0

        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to open (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        cell = self._action_to_cell(action)
        self._steps += 1

        reward = self._calculate_reward(cell)
        terminated = self.game.is_finished

        return self.game.get_observation(), reward, terminated, False, self._get_info()

    def _action_to_cell(self, action: int) -> Cell:
        """Convert flat action index to a cell."""
        return Cell(int(action) % self.config.width, int(action) // self.config.width)

    def _calculate_reward(self, cell: Cell) -> float:
        """Open a cell and score the outcome."""
        if self.game.is_finished:
            return -0.1

        opened = self.game.open_cell(cell)

        if self.game.status == GameStatus.VICTORY:
            return 10.0
        if self.game.status == GameStatus.DEFEAT:
            return -10.0
        if not opened:
            return -0.1
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "opened": self.config.size - len(self.game.closed),
            "total_safe": self._total_safe_cells,
            "game_state": self.game.status.name,
            "elapsed_time": self.game.elapsed_time(),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return str(self.game)
        if self.render_mode == "human":
            print(self.game)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = closed, unmarked cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.game.closed - self.game.marked:
            mask[y * self.config.width + x] = True
        return mask
