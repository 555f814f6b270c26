"""
Unit tests for the Tic-Tac-Toe board model.

Run (with venv activated):
  python -m unittest discover tests -v
  pytest tests/tic_tac_toe/ -v
"""
import unittest

from app.projects.tic_tac_toe.core.board import Board, Cell
from app.projects.tic_tac_toe.core.errors import InvalidMoveError


class TestBoard(unittest.TestCase):

    def setUp(self):
        self.board = Board()

    def test_new_board_is_empty(self):
        self.assertEqual(self.board.rows(), [[" "] * 3 for _ in range(3)])
        self.assertFalse(self.board.is_full())

    def test_valid_move_on_empty_cell(self):
        self.assertTrue(self.board.is_valid_move(0, 0))
        self.assertTrue(self.board.is_valid_move(2, 2))

    def test_out_of_range_is_invalid(self):
        for row, col in [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)]:
            self.assertFalse(self.board.is_valid_move(row, col), (row, col))

    def test_occupied_cell_is_invalid(self):
        self.board.place(1, 1, Cell.X)
        self.assertFalse(self.board.is_valid_move(1, 1))
        self.assertEqual(self.board.get(1, 1), Cell.X)

    def test_place_on_occupied_cell_raises(self):
        self.board.place(1, 1, Cell.X)
        with self.assertRaises(InvalidMoveError):
            self.board.place(1, 1, Cell.O)
        self.assertEqual(self.board.get(1, 1), Cell.X)

    def test_place_empty_mark_raises(self):
        with self.assertRaises(InvalidMoveError):
            self.board.place(0, 0, Cell.Empty)

    def test_is_full(self):
        mark = Cell.X
        for row in range(3):
            for col in range(3):
                self.assertFalse(self.board.is_full())
                self.board.place(row, col, mark)
                mark = mark.opponent()
        self.assertTrue(self.board.is_full())

    def test_initialize_clears_marks(self):
        self.board.place(0, 2, Cell.O)
        self.board.initialize()
        self.assertEqual(self.board.get(0, 2), Cell.Empty)
        self.assertEqual(len(self.board.rows()), 3)
        self.assertTrue(all(len(row) == 3 for row in self.board.rows()))


class TestCell(unittest.TestCase):

    def test_opponent(self):
        self.assertEqual(Cell.X.opponent(), Cell.O)
        self.assertEqual(Cell.O.opponent(), Cell.X)

    def test_empty_has_no_opponent(self):
        with self.assertRaises(ValueError):
            Cell.Empty.opponent()

    def test_wire_values(self):
        self.assertEqual(Cell.Empty.value, " ")
        self.assertEqual(Cell.X.value, "X")
        self.assertEqual(Cell.O.value, "O")


if __name__ == "__main__":
    unittest.main()
