import unittest

from tango.core.constants import Constraint, Symbol
from tango.core.models import Board
from tango.engine.rules import edge_neighbors, is_locally_valid

from board_fixtures import make_board


class EdgeNeighborTests(unittest.TestCase):
    def test_corner_and_interior_edges(self) -> None:
        board = Board.empty(4)
        board.set_horizontal_constraint(0, 0, Constraint.EQUALS)
        board.set_vertical_constraint(0, 0, Constraint.DIFFERENT)
        corner = list(edge_neighbors(board, 0, 0))
        self.assertEqual(corner, [(0, 1, Constraint.EQUALS), (1, 0, Constraint.DIFFERENT)])
        interior = list(edge_neighbors(board, 1, 1))
        self.assertEqual([(r, c) for r, c, _ in interior], [(1, 0), (1, 2), (0, 1), (2, 1)])


class LocalValidityTests(unittest.TestCase):
    def test_empty_cell_is_trivially_valid(self) -> None:
        board = make_board(["SS..", "....", "....", "...."])
        self.assertTrue(is_locally_valid(board, 0, 2))

    def test_rejects_third_symbol_after_pair(self) -> None:
        board = make_board(["SSS.", "....", "....", "...."])
        self.assertFalse(is_locally_valid(board, 0, 2))

    def test_rejects_symbol_between_pair(self) -> None:
        board = make_board(["MMM.", "....", "....", "...."])
        self.assertFalse(is_locally_valid(board, 0, 1))

    def test_rejects_symbol_before_pair(self) -> None:
        board = make_board(["....", "S...", "S...", "S..."])
        self.assertFalse(is_locally_valid(board, 1, 0))

    def test_accepts_alternating_runs(self) -> None:
        board = make_board(["SSM.", "S...", "M...", "...."])
        self.assertTrue(is_locally_valid(board, 0, 2))
        self.assertTrue(is_locally_valid(board, 0, 0))

    def test_equals_edge_with_filled_neighbor(self) -> None:
        board = make_board(["SM..", "....", "....", "...."], horizontal=["=..", "...", "...", "..."])
        self.assertFalse(is_locally_valid(board, 0, 1))
        board.set_cell(0, 1, Symbol.SUN)
        self.assertTrue(is_locally_valid(board, 0, 1))

    def test_edge_with_empty_neighbor_is_ignored(self) -> None:
        board = make_board(
            ["S...", "....", "....", "...."],
            horizontal=["=..", "...", "...", "..."],
            vertical=["x...", "....", "...."],
        )
        self.assertTrue(is_locally_valid(board, 0, 0))

    def test_different_edge_below(self) -> None:
        board = make_board(["....", "..M.", "..M.", "...."], vertical=["....", "..x.", "...."])
        self.assertFalse(is_locally_valid(board, 1, 2))
        self.assertFalse(is_locally_valid(board, 2, 2))

    def test_right_edge_checked_from_left_cell(self) -> None:
        board = make_board(["..MS", "....", "....", "...."], horizontal=["..=", "...", "...", "..."])
        self.assertFalse(is_locally_valid(board, 0, 2))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
