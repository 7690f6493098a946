"""
Core Board Engine for 2048.

The board owns the grid of tile values and the running score. A move is
resolved line by line (see `slide2048.game.traversal`) in three passes:

1.  Shift: slide every tile as far as it goes towards the end of its line.
2.  Merge: combine equal neighbours once, starting from the end of the line.
3.  Shift: close the gaps the merge pass opened.

If any pass changed the grid, the merge points are added to the score and a
new tile is spawned on a random empty cell.

The per-line kernels are compiled with numba and mutate the grid in place
through the coordinate arrays produced by `lines_for`. Every random draw goes
through `self.rng`, so a seeded Board replays the same game.
"""

import copy

import numpy as np
from numba import njit

from slide2048.config import BOARD_SIZE, WIN_TILE, INITIAL_TILE, \
    SPAWN_VALUES, SPAWN_PROBABILITIES
from slide2048.game.traversal import Direction, DIRECTIONS, lines_for


@njit(fastmath=True)
def _shift_lines(grid, lines):
    """
    Slides the tiles of every line towards its last index.

    A single pass only moves a tile by one cell, e.g. [2, 0, 4, 0] becomes
    [0, 2, 0, 4]. Passes are repeated until nothing moves, giving [0, 0, 2, 4].

    Returns:
        bool: True if any tile moved.
    """
    moved = False
    for k in range(lines.shape[0]):
        line = lines[k]
        swapped = True
        while swapped:
            swapped = False
            for i in range(1, line.shape[0]):
                cur_r, cur_c = line[i, 0], line[i, 1]
                prev_r, prev_c = line[i - 1, 0], line[i - 1, 1]
                if grid[cur_r, cur_c] == 0 and grid[prev_r, prev_c] > 0:
                    grid[cur_r, cur_c] = grid[prev_r, prev_c]
                    grid[prev_r, prev_c] = 0
                    swapped = True
            if swapped:
                moved = True
    return moved


@njit(fastmath=True)
def _merge_lines(grid, lines):
    """
    Merges equal neighbours, scanning each line from its last index down.

    The merged tile lands on the higher index and its partner is zeroed, so
    the next comparison always sees a zero and a tile cannot merge twice.
    [2, 2, 2, 2] -> [0, 4, 0, 4].

    Returns:
        int: Sum of the values of all tiles produced by a merge.
    """
    score = 0
    for k in range(lines.shape[0]):
        line = lines[k]
        for i in range(line.shape[0] - 1, 0, -1):
            cur_r, cur_c = line[i, 0], line[i, 1]
            prev_r, prev_c = line[i - 1, 0], line[i - 1, 1]
            if grid[cur_r, cur_c] > 0 and grid[cur_r, cur_c] == grid[prev_r, prev_c]:
                grid[cur_r, cur_c] *= 2
                grid[prev_r, prev_c] = 0
                score += grid[cur_r, cur_c]
    return score


@njit(fastmath=True)
def _has_mergeable_pair(grid, lines):
    """True if two neighbours in any line hold the same non-zero value."""
    for k in range(lines.shape[0]):
        line = lines[k]
        for i in range(line.shape[0] - 1, 0, -1):
            cur = grid[line[i, 0], line[i, 1]]
            prev = grid[line[i - 1, 0], line[i - 1, 1]]
            if cur > 0 and cur == prev:
                return True
    return False


# Fixed-width cell tokens, as drawn by the terminal front end
_CELL_TOKENS = {0: "   ."}
_CELL_TOKENS.update({2 ** k: "{:>4}".format(2 ** k) for k in range(1, 12)})


def value_as_string(value):
    """Returns the 4 character token for a cell value, or None if it has none."""
    return _CELL_TOKENS.get(int(value))


class Board:
    """
    One game of 2048: the grid, the score and the random source.

    Args:
        size (int): Side length of the square grid.
        rng: None, an int seed, or a numpy Generator. Drives the initial tile
            and every spawned tile.
    """

    def __init__(self, size=BOARD_SIZE, rng=None):
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")

        self.size = size
        self.rng = np.random.default_rng(rng)
        self.score = 0
        self.grid = np.zeros((self.size, self.size), dtype=np.int64)

        # Lines never change for a given size, so build them once
        self._lines = {d: lines_for(d, self.size) for d in DIRECTIONS}

        # A new game starts with a single tile on a random row and column
        row = self.rng.integers(self.size)
        col = self.rng.integers(self.size)
        self.grid[row, col] = INITIAL_TILE

    def add_score(self, points):
        self.score += int(points)

    def empty_cells(self):
        """Lists the (row, col) of every empty cell."""
        rows, cols = np.where(self.grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def max_tile(self):
        return int(np.max(self.grid))

    def has_won(self):
        return bool(np.any(self.grid == WIN_TILE))

    def has_lost(self):
        """
        True when no move can change the board.

        A board with an empty cell can always move. A full board is stuck only
        if no line, in any of the four directions, holds two equal neighbours.
        """
        if self.empty_cells():
            return False

        for direction in DIRECTIONS:
            if _has_mergeable_pair(self.grid, self._lines[direction]):
                return False

        return True

    def spawn_tile(self):
        """
        Places a 2 or a 4 on a uniformly chosen empty cell.

        Returns:
            bool: False if the grid was full and nothing was placed.
        """
        empty_cells = self.empty_cells()
        if not empty_cells:
            return False

        row, col = empty_cells[self.rng.integers(len(empty_cells))]
        self.grid[row, col] = self.rng.choice(SPAWN_VALUES, p=SPAWN_PROBABILITIES)
        return True

    def move(self, direction):
        """
        Resolves one move.

        Side Effects:
            1. Updates self.grid
            2. Updates self.score
            3. Spawns a new tile (if the board changed)

        Args:
            direction (Direction): Also accepts the enum value, e.g. 'left'.

        Returns:
            bool: Whether the board changed.
        """
        lines = self._lines[Direction(direction)]

        moved = _shift_lines(self.grid, lines)
        points = int(_merge_lines(self.grid, lines))
        # Second shift runs unconditionally
        moved = _shift_lines(self.grid, lines) or moved or points > 0

        if moved:
            self.add_score(points)
            self.spawn_tile()

        return moved

    def up(self):
        return self.move(Direction.UP)

    def down(self):
        return self.move(Direction.DOWN)

    def left(self):
        return self.move(Direction.LEFT)

    def right(self):
        return self.move(Direction.RIGHT)

    def fast_copy(self):
        """
        Creates an independent clone for previewing moves.

        Bypasses `__init__` so no tile is placed. The random generator is
        copied too, so previews never advance the live game's draws.
        """
        new_board = self.__class__.__new__(self.__class__)
        new_board.size = self.size
        new_board.score = self.score
        new_board.grid = np.copy(self.grid)
        new_board.rng = copy.deepcopy(self.rng)
        new_board._lines = self._lines
        return new_board

    def is_move_possible(self, direction):
        return self.fast_copy().move(direction)

    def get_valid_moves(self):
        """Returns every Direction that would change the board."""
        return [d for d in DIRECTIONS if self.is_move_possible(d)]

    def as_string(self):
        rendered = ""
        for row in self.grid:
            tokens = [value_as_string(value) or "{:>4}".format(value) for value in row]
            rendered += "   ".join(tokens) + "\n"
        return rendered

    def __str__(self):
        """String representation for printing the board."""
        score_str = "Score: {}\n".format(self.score)
        return score_str + self.as_string()
