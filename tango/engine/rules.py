"""Local validity checks used to prune the backtracking search."""

from __future__ import annotations

from typing import Iterator, Tuple

from ..core.constants import Constraint
from ..core.models import Board


AXES: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0))

# Offsets of the two other cells in each length-3 window containing the placed cell.
RUN_WINDOWS: Tuple[Tuple[int, int], ...] = ((-2, -1), (-1, 1), (1, 2))


def edge_neighbors(board: Board, row: int, col: int) -> Iterator[Tuple[int, int, Constraint]]:
    """Yield ``(row, col, constraint)`` for each constraint edge touching the cell."""

    last = board.size - 1
    if col > 0:
        yield row, col - 1, board.horizontal_constraint(row, col - 1)
    if col < last:
        yield row, col + 1, board.horizontal_constraint(row, col)
    if row > 0:
        yield row - 1, col, board.vertical_constraint(row - 1, col)
    if row < last:
        yield row + 1, col, board.vertical_constraint(row, col)


def is_locally_valid(board: Board, row: int, col: int) -> bool:
    """Return ``False`` if the symbol at ``(row, col)`` breaks a rule visible from it.

    Only the four touching constraint edges and the six length-3 windows that
    include the cell are read, so the cost does not depend on the board size.
    """

    symbol = board.cell(row, col)
    if not symbol.is_filled:
        return True

    for nr, nc, constraint in edge_neighbors(board, row, col):
        if not constraint.is_satisfied_by(symbol, board.cell(nr, nc)):
            return False

    size = board.size
    for dr, dc in AXES:
        for first, second in RUN_WINDOWS:
            r1, c1 = row + dr * first, col + dc * first
            r2, c2 = row + dr * second, col + dc * second
            if not (0 <= r1 < size and 0 <= c1 < size and 0 <= r2 < size and 0 <= c2 < size):
                continue
            if board.cell(r1, c1) == symbol and board.cell(r2, c2) == symbol:
                return False
    return True
