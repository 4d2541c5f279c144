import unittest

from tango.core.constants import Symbol
from tango.core.exceptions import BoardShapeError
from tango.core.models import Board
from tango.engine.solver import SolverConfig, solve
from tango.engine.validator import is_globally_valid

from board_fixtures import EXAMPLE_4X4, grid_text, make_board


UNBOUNDED = SolverConfig(max_solutions=10**6, max_iterations=10**7)


class SolverConfigTests(unittest.TestCase):
    def test_defaults_depend_on_board_size(self) -> None:
        small = SolverConfig.for_size(6)
        self.assertEqual((small.max_solutions, small.max_iterations), (100, 1_000_000))
        large = SolverConfig.for_size(7)
        self.assertEqual((large.max_solutions, large.max_iterations), (10, 100_000))

    def test_negative_caps_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SolverConfig(max_solutions=-1)
        with self.assertRaises(ValueError):
            SolverConfig(max_iterations=-5)


class SolveTests(unittest.TestCase):
    def test_empty_four_by_four_enumerates_all_balanced_grids(self) -> None:
        result = solve(Board.empty(4), UNBOUNDED)
        self.assertEqual(result.count, 90)
        self.assertFalse(result.truncated)
        self.assertEqual(grid_text(result.solutions[0]), ["SSMM", "SSMM", "MMSS", "MMSS"])
        for solution in result.solutions:
            for index in range(4):
                self.assertEqual(solution.row(index).count(Symbol.SUN), 2)
                self.assertEqual(solution.column(index).count(Symbol.MOON), 2)

    def test_default_config_used_when_omitted(self) -> None:
        result = solve(Board.empty(4))
        self.assertEqual(result.count, 90)
        self.assertFalse(result.truncated)

    def test_solutions_are_sound_and_keep_prefilled_cells(self) -> None:
        board = make_board(**EXAMPLE_4X4)
        result = solve(board, UNBOUNDED)
        self.assertGreater(result.count, 0)
        prefilled = list(board.filled_cells())
        for solution in result.solutions:
            self.assertTrue(is_globally_valid(solution))
            for r, c, symbol in prefilled:
                self.assertEqual(solution.cell(r, c), symbol)
            self.assertEqual(solution.horizontal, board.horizontal)
            self.assertEqual(solution.vertical, board.vertical)

    def test_equals_edge_forces_neighbor(self) -> None:
        board = make_board([".S..", "....", "....", "...."], horizontal=["=..", "...", "...", "..."])
        result = solve(board, UNBOUNDED)
        self.assertGreater(result.count, 0)
        for solution in result.solutions:
            self.assertEqual(solution.cell(0, 0), Symbol.SUN)

    def test_over_constrained_board_has_no_solution(self) -> None:
        board = make_board(["SSS.", "....", "....", "...."])
        result = solve(board, UNBOUNDED)
        self.assertEqual(result.solutions, [])
        self.assertFalse(result.truncated)
        self.assertIsNone(result.first)

    def test_contradictory_edges_have_no_solution(self) -> None:
        board = make_board(
            ["S...", "....", "....", "...."],
            horizontal=["=..", "...", "...", "..."],
            vertical=["x...", "....", "...."],
        )
        board.set_cell(1, 1, Symbol.SUN)
        board.vertical[0][1] = board.vertical[0][0]
        result = solve(board, UNBOUNDED)
        self.assertEqual(result.count, 0)
        self.assertFalse(result.truncated)

    def test_solution_cap_truncates(self) -> None:
        result = solve(Board.empty(4), SolverConfig(max_solutions=1, max_iterations=10**6))
        self.assertEqual(result.count, 1)
        self.assertTrue(result.truncated)
        self.assertFalse(result.is_unique)

    def test_iteration_cap_truncates(self) -> None:
        result = solve(Board.empty(4), SolverConfig(max_solutions=100, max_iterations=10))
        self.assertEqual(result.count, 0)
        self.assertTrue(result.truncated)

    def test_unique_solution(self) -> None:
        board = make_board(["S.", ".."])
        result = solve(board, UNBOUNDED)
        self.assertTrue(result.is_unique)
        self.assertEqual(grid_text(result.first), ["SM", "MS"])

    def test_deterministic_output(self) -> None:
        board = make_board(**EXAMPLE_4X4)
        first = solve(board, UNBOUNDED)
        second = solve(board, UNBOUNDED)
        self.assertEqual(first.solutions, second.solutions)
        self.assertEqual(first.iterations, second.iterations)

    def test_input_board_is_not_mutated(self) -> None:
        board = make_board(**EXAMPLE_4X4)
        before = board.copy()
        result = solve(board, UNBOUNDED)
        self.assertEqual(board, before)
        result.solutions[0].set_cell(3, 3, Symbol.EMPTY)
        self.assertEqual(board, before)

    def test_malformed_board_fails_before_search(self) -> None:
        board = Board.empty(4)
        board.horizontal[1] = board.horizontal[1][:2]
        with self.assertRaises(BoardShapeError):
            solve(board, UNBOUNDED)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
