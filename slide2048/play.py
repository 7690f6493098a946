"""
Terminal front end for 2048.

Reads one key per line from stdin and prints the board after every move.
The front end owns the game lifecycle: when the board is won or lost it
announces it and starts a new Board.

Usage:
    python -m slide2048.play [--seed N]
"""

import argparse

import numpy as np

from slide2048.game.board import Board
from slide2048.game.traversal import Direction

TITLE = "2048 - wow. such clone."
WIN_MESSAGE = "Wow. Much win. Such 2048. Starting new game..."
LOSE_MESSAGE = "Much lose! Starting new game..."
SHOW_HELP = "press ? to show help"
HIDE_HELP = "press ? to hide help"
HELP_TEXT = "hjkl - to move\nq    - quit"

# vi-style movement keys
KEY_TO_DIRECTION = {
    'h': Direction.LEFT,
    'j': Direction.DOWN,
    'k': Direction.UP,
    'l': Direction.RIGHT,
}


class TerminalGame:
    """
    Key dispatch and game lifecycle around a Board.

    Args:
        rng: Seed or numpy Generator shared by every Board this session creates.
        output: Callable used to emit text, `print` by default.
    """

    def __init__(self, rng=None, output=print):
        self.rng = np.random.default_rng(rng)
        self.output = output
        self.help_on = False
        self.board = Board(rng=self.rng)

    def restart(self):
        self.board = Board(rng=self.rng)

    def show(self):
        self.output(f"score: {self.board.score}")
        self.output(self.board.as_string())

    def toggle_help(self):
        self.help_on = not self.help_on
        if self.help_on:
            self.output(HIDE_HELP)
            self.output(HELP_TEXT)
        else:
            self.output(SHOW_HELP)

    def handle_key(self, key):
        """
        Handles one key press.

        Returns:
            bool: False when the player asked to quit.
        """
        if key == 'q':
            return False

        if key == '?':
            self.toggle_help()
            return True

        if key not in KEY_TO_DIRECTION:
            self.output(f"Unknown key: {key!r}. {SHOW_HELP}")
            return True

        self.board.move(KEY_TO_DIRECTION[key])
        self.show()

        if self.board.has_won():
            self.output(WIN_MESSAGE)
            self.restart()
            self.show()
        elif self.board.has_lost():
            self.output(LOSE_MESSAGE)
            self.restart()
            self.show()

        return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play 2048 in the terminal.")
    parser.add_argument("--seed", type=int, default=None) # fixes every spawned tile
    args = parser.parse_args(argv)

    game = TerminalGame(rng=args.seed)
    print(TITLE)
    print(SHOW_HELP)
    game.show()

    while True:
        try:
            key = input("> ").strip().lower()
        except EOFError:
            break

        if not game.handle_key(key):
            break


if __name__ == "__main__":
    main()
