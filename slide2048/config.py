"""
Game Configuration for slide2048.

Central place for the constants shared by the board engine, the Gymnasium
environment and the terminal front end. Import them by name:

    from slide2048.config import BOARD_SIZE, WIN_TILE
"""

# --- Board ---
BOARD_SIZE = 4

# The objective tile. A board holding this value is a win.
WIN_TILE = 2048

# A new game starts with a single tile of this value.
INITIAL_TILE = 2

# --- Spawning ---
# After every move that changes the board, one tile is spawned on an empty cell.
SPAWN_VALUES = (2, 4)
SPAWN_PROBABILITIES = (0.5, 0.5)

# --- Environment ---
# Upper bound of the observation space. The game ends at WIN_TILE, so no
# reachable grid holds more than this.
MAX_TILE_VALUE = WIN_TILE
INVALID_MOVE_PENALTY = -1
