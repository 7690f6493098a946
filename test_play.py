import unittest
import numpy as np
from slide2048.play import TerminalGame, WIN_MESSAGE, LOSE_MESSAGE, HELP_TEXT, SHOW_HELP


class TestTerminalGame(unittest.TestCase):

    def setUp(self):
        self.lines = []
        self.game = TerminalGame(rng=0, output=self.lines.append)

    def test_quit_key_stops(self):
        self.assertFalse(self.game.handle_key('q'))

    def test_help_toggles(self):
        self.game.handle_key('?')
        self.assertTrue(self.game.help_on)
        self.assertIn(HELP_TEXT, self.lines)
        self.game.handle_key('?')
        self.assertFalse(self.game.help_on)
        self.assertEqual(self.lines[-1], SHOW_HELP)

    def test_unknown_key_does_not_move(self):
        before = self.game.board.grid.copy()
        self.assertTrue(self.game.handle_key('x'))
        self.assertTrue(np.array_equal(before, self.game.board.grid))

    def test_vi_keys_move_tiles(self):
        self.game.board.grid = np.array([
            [0, 0, 0, 2],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0]
        ], dtype=np.int64)
        self.game.handle_key('h')
        self.assertEqual(self.game.board.grid[0, 0], 2)

        self.game.board.grid = np.array([
            [2, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0]
        ], dtype=np.int64)
        self.game.handle_key('j')
        self.assertEqual(self.game.board.grid[3, 0], 2)

    def test_win_starts_new_game(self):
        self.game.board.grid = np.array([
            [1024, 1024, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0]
        ], dtype=np.int64)
        old_board = self.game.board
        self.game.handle_key('h')
        self.assertIn(WIN_MESSAGE, self.lines)
        self.assertIsNot(self.game.board, old_board)
        self.assertEqual(self.game.board.score, 0)
        self.assertEqual(np.count_nonzero(self.game.board.grid), 1)

    def test_loss_starts_new_game(self):
        self.game.board.grid = np.array([
            [8, 16, 8, 16],
            [16, 8, 16, 8],
            [8, 16, 8, 16],
            [8, 16, 8, 0]
        ], dtype=np.int64)
        self.game.handle_key('l')
        self.assertIn(LOSE_MESSAGE, self.lines)
        self.assertEqual(np.count_nonzero(self.game.board.grid), 1)

if __name__ == "__main__":
    unittest.main()
