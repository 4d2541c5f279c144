"""Depth-first backtracking over the empty cells of a board."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..core.constants import SEARCH_ORDER, Symbol
from ..core.models import Board
from ..utils.logger import get_logger
from .rules import is_locally_valid
from .validator import is_globally_valid

if TYPE_CHECKING:
    from .solver import SolverConfig


LOGGER = get_logger(__name__)


class BacktrackingSearch:
    """Enumerates assignments in row-major order, ``SUN`` before ``MOON``.

    The search mutates ``self.board`` in place and undoes every tentative
    assignment before returning, so the working board is back to its
    starting state once :meth:`run` finishes. Only completed solutions are
    copied.
    """

    def __init__(self, board: Board, config: "SolverConfig") -> None:
        self.board = board
        self.config = config
        self.size = board.size
        self.solutions: List[Board] = []
        self.iterations = 0
        self.truncated = False

    def run(self) -> List[Board]:
        self.explore(0, 0)
        return self.solutions

    def explore(self, row: int, col: int) -> None:
        self.iterations += 1
        if self._should_stop():
            self.truncated = True
            return

        if row == self.size:
            if is_globally_valid(self.board):
                self.solutions.append(self.board.copy())
                LOGGER.debug("Solution %d found after %d iterations", len(self.solutions), self.iterations)
            return

        next_row, next_col = (row + 1, 0) if col == self.size - 1 else (row, col + 1)

        if self.board.cell(row, col).is_filled:
            self.explore(next_row, next_col)
            return

        for symbol in SEARCH_ORDER:
            self.board.set_cell(row, col, symbol)
            if is_locally_valid(self.board, row, col):
                self.explore(next_row, next_col)
            self.board.set_cell(row, col, Symbol.EMPTY)

    def _should_stop(self) -> bool:
        if len(self.solutions) >= self.config.max_solutions:
            return True
        if self.iterations > self.config.max_iterations:
            return True
        should_cancel = self.config.should_cancel
        return should_cancel is not None and should_cancel()
