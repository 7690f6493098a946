import gymnasium
from gymnasium import spaces
import numpy as np

from slide2048.config import BOARD_SIZE, MAX_TILE_VALUE, INVALID_MOVE_PENALTY
from slide2048.game.board import Board
from slide2048.game.traversal import DIRECTIONS


class Game2048Env(gymnasium.Env):
    """
    Gymnasium environment around the 2048 board engine.

    The environment owns the game lifecycle: every `reset` discards the old
    Board and builds a new one seeded from `self.np_random`, so episodes are
    reproducible through `reset(seed=...)`.

    Reward:
        The points scored by the move, or INVALID_MOVE_PENALTY when the move
        did not change the board. An episode terminates on a win or a loss.
    """
    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(self, render_mode=None, size=BOARD_SIZE):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unknown render_mode: {render_mode}. Must be one of {self.metadata['render_modes']}.")

        self.size = size
        self.render_mode = render_mode
        self.board = None

        # 4 discrete actions, in the order of DIRECTIONS: up, down, left, right
        self.action_space = spaces.Discrete(len(DIRECTIONS))
        self.observation_space = spaces.Box(low=0,
                                            high=MAX_TILE_VALUE,
                                            shape=(self.size, self.size),
                                            dtype=np.int64)

    def _get_obs(self):
        return self.board.grid.copy()

    def _get_info(self):
        return {
            "score": self.board.score,
            "max_tile": self.board.max_tile(),
            "num_empty_cells": len(self.board.empty_cells()),
        }

    def reset(self, seed=None, options=None):
        """Starts a new game and returns its first observation."""
        super().reset(seed=seed)
        self.board = Board(self.size, rng=self.np_random)

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._get_info()

    def step(self, action):
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action}. Must be in {self.action_space}.")

        score_before_move = self.board.score
        moved = self.board.move(DIRECTIONS[int(action)])

        if moved:
            reward = self.board.score - score_before_move
        else:
            reward = INVALID_MOVE_PENALTY

        won = self.board.has_won()
        lost = self.board.has_lost()
        terminated = won or lost
        truncated = False

        info = self._get_info()
        info.update({"moved": moved, "won": won, "lost": lost})

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, info

    def valid_action_mask(self):
        """One boolean per action, True where the move would change the board."""
        return np.array([self.board.is_move_possible(d) for d in DIRECTIONS], dtype=bool)

    def render(self):
        if self.render_mode == "human":
            print(self.board)
        elif self.render_mode == "ansi":
            return str(self.board)
