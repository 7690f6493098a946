import unittest
import numpy as np
from slide2048.game.traversal import Direction, DIRECTIONS, lines_for

class TestLineTraversal(unittest.TestCase):

    def setUp(self):
        # [ 1 2 3 ]
        # [ 4 5 6 ]
        # [ 7 8 9 ]
        self.numbers = np.arange(1, 10).reshape(3, 3)

    def _values(self, direction):
        lines = lines_for(direction, size=3)
        return self.numbers[lines[..., 0], lines[..., 1]]

    def test_up_uses_reversed_columns(self):
        expected = np.array([[7, 4, 1], [8, 5, 2], [9, 6, 3]])
        self.assertTrue(np.array_equal(self._values(Direction.UP), expected))

    def test_down_uses_columns_in_natural_order(self):
        expected = np.array([[1, 4, 7], [2, 5, 8], [3, 6, 9]])
        self.assertTrue(np.array_equal(self._values(Direction.DOWN), expected))

    def test_left_uses_reversed_rows(self):
        expected = np.array([[3, 2, 1], [6, 5, 4], [9, 8, 7]])
        self.assertTrue(np.array_equal(self._values(Direction.LEFT), expected))

    def test_right_uses_rows_in_natural_order(self):
        expected = np.array([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        self.assertTrue(np.array_equal(self._values(Direction.RIGHT), expected))

    def test_every_cell_covered_exactly_once(self):
        for direction in DIRECTIONS:
            lines = lines_for(direction)
            self.assertEqual(lines.shape, (4, 4, 2))
            cells = [tuple(cell) for line in lines for cell in line]
            self.assertEqual(len(cells), 16)
            self.assertEqual(len(set(cells)), 16,
                             f"{direction} should visit every cell exactly once")

    def test_last_index_is_the_target_edge(self):
        self.assertTrue(all(line[-1][0] == 0 for line in lines_for(Direction.UP)))
        self.assertTrue(all(line[-1][0] == 3 for line in lines_for(Direction.DOWN)))
        self.assertTrue(all(line[-1][1] == 0 for line in lines_for(Direction.LEFT)))
        self.assertTrue(all(line[-1][1] == 3 for line in lines_for(Direction.RIGHT)))

    def test_lines_are_fresh_arrays(self):
        first = lines_for(Direction.LEFT)
        first[0, 0] = (9, 9)
        self.assertFalse(np.array_equal(first, lines_for(Direction.LEFT)))

if __name__ == "__main__":
    unittest.main()
