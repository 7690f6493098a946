"""
Line Traversal for the 2048 board.

A move never looks at the grid as a whole. It works on independent "lines":
the columns for a vertical move, the rows for a horizontal one. This module
produces those lines as arrays of (row, col) coordinates, ordered so that tiles
always travel towards the LAST index of a line.

Example on a 3x3 board numbered row by row:

    [ 1 2 3 ]
    [ 4 5 6 ]
    [ 7 8 9 ]

    UP    -> [7 4 1] [8 5 2] [9 6 3]
    DOWN  -> [1 4 7] [2 5 8] [3 6 9]
    LEFT  -> [3 2 1] [6 5 4] [9 8 7]
    RIGHT -> [1 2 3] [4 5 6] [7 8 9]

Only UP and LEFT are reversed. Every cell belongs to exactly one line.
"""

from enum import Enum

import numpy as np

from slide2048.config import BOARD_SIZE


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Fixed order used by the Gymnasium action space and by the loss check.
DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def lines_for(direction, size=BOARD_SIZE):
    """
    Groups the board cells into the lines a move in `direction` operates on.

    Args:
        direction (Direction): The direction tiles travel in.
        size (int): Side length of the board.

    Returns:
        np.ndarray: Shape (size, size, 2). lines[k][i] is the (row, col) of the
        i-th cell of line k. Tiles move towards index size - 1.
    """
    rows, cols = np.meshgrid(np.arange(size), np.arange(size), indexing="ij")

    if direction in (Direction.UP, Direction.DOWN):
        # Vertical moves operate on columns
        lines = np.stack([rows.T, cols.T], axis=-1)
    else:
        # Horizontal moves operate on rows
        lines = np.stack([rows, cols], axis=-1)

    if direction in (Direction.UP, Direction.LEFT):
        lines = lines[:, ::-1]

    return np.ascontiguousarray(lines, dtype=np.int64)
