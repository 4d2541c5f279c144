"""Independent CP-SAT enumerator used to cross-check the backtracking search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ortools.sat.python import cp_model

from ..core.constants import Constraint, Symbol
from ..core.models import Board
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class _SolutionCollector(cp_model.CpSolverSolutionCallback):
    """Record every grid CP-SAT reports, stopping once ``limit`` is reached."""

    def __init__(self, cell_vars: Dict[Tuple[int, int], cp_model.IntVar], size: int, limit: Optional[int]) -> None:
        super().__init__()
        self._cell_vars = cell_vars
        self._size = size
        self._limit = limit
        self.grids: List[List[List[Symbol]]] = []
        self.stopped = False

    def on_solution_callback(self) -> None:
        grid = [
            [
                Symbol.SUN if self.boolean_value(self._cell_vars[(r, c)]) else Symbol.MOON
                for c in range(self._size)
            ]
            for r in range(self._size)
        ]
        self.grids.append(grid)
        if self._limit is not None and len(self.grids) >= self._limit:
            self.stopped = True
            self.stop_search()


@dataclass
class CpSatEnumeration:
    """Solutions found by CP-SAT and whether they are the whole solution set."""

    solutions: List[Board]
    status: str
    complete: bool


def enumerate_solutions_cpsat(
    board: Board,
    limit: Optional[int] = None,
    timeout: float = 30.0,
) -> List[Board]:
    """Return the solutions of ``board`` found by :func:`run_cpsat_enumeration`."""

    return run_cpsat_enumeration(board, limit=limit, timeout=timeout).solutions


def run_cpsat_enumeration(
    board: Board,
    limit: Optional[int] = None,
    timeout: float = 30.0,
) -> CpSatEnumeration:
    """Enumerate solutions of ``board`` with CP-SAT.

    Args:
        board: Board to solve; it is not modified.
        limit: Stop after this many solutions. Without a limit the full
            solution set is returned. With a limit the subset is whichever
            solutions CP-SAT happened to reach first.
        timeout: Solver time limit in seconds.

    Returns:
        Solutions sorted in the backtracking engine's order (row-major,
        ``SUN`` before ``MOON``). ``complete`` is false when the limit or
        the time limit cut the enumeration short.
    """
    board.validate_shape()
    size = board.size
    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: One Boolean per cell, true meaning SUN
    # ------------------------------------------------------------------
    cell_vars: Dict[Tuple[int, int], cp_model.IntVar] = {}
    for r in range(size):
        for c in range(size):
            var = model.new_bool_var(f"S_{r}_{c}")
            cell_vars[(r, c)] = var
            symbol = board.cell(r, c)
            if symbol.is_filled:
                model.add(var == (1 if symbol == Symbol.SUN else 0))

    # ------------------------------------------------------------------
    # Step 2: Constraint edges
    # ------------------------------------------------------------------
    for r in range(size):
        for c in range(size - 1):
            _add_edge(model, board.horizontal_constraint(r, c), cell_vars[(r, c)], cell_vars[(r, c + 1)])
    for r in range(size - 1):
        for c in range(size):
            _add_edge(model, board.vertical_constraint(r, c), cell_vars[(r, c)], cell_vars[(r + 1, c)])

    # ------------------------------------------------------------------
    # Step 3: Line rules (no three in a row, balance)
    # ------------------------------------------------------------------
    lines = [[cell_vars[(i, j)] for j in range(size)] for i in range(size)]
    lines += [[cell_vars[(j, i)] for j in range(size)] for i in range(size)]
    low, high = size // 2, (size + 1) // 2
    for line in lines:
        for start in range(size - 2):
            model.add_linear_constraint(sum(line[start:start + 3]), 1, 2)
        model.add_linear_constraint(sum(line), low, high)

    # ------------------------------------------------------------------
    # Step 4: Enumerate
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.max_time_in_seconds = timeout
    collector = _SolutionCollector(cell_vars, size, limit)
    status = solver.solve(model, collector)

    complete = not collector.stopped and status in (cp_model.OPTIMAL, cp_model.INFEASIBLE)
    if not complete and not collector.stopped:
        LOGGER.warning("CP-SAT: enumeration hit the %.1fs time limit", timeout)
    LOGGER.info(
        "CP-SAT: %d solution(s) for %dx%d board (status=%s, %.2fs)",
        len(collector.grids),
        size,
        size,
        solver.status_name(status),
        solver.wall_time,
    )

    solutions = []
    for grid in sorted(collector.grids, key=_search_order_key):
        solution = board.copy()
        solution.grid = grid
        solutions.append(solution)
    return CpSatEnumeration(solutions=solutions, status=solver.status_name(status), complete=complete)


def _add_edge(model: cp_model.CpModel, constraint: Constraint, first, second) -> None:
    if constraint is Constraint.EQUALS:
        model.add(first == second)
    elif constraint is Constraint.DIFFERENT:
        model.add(first + second == 1)


def _search_order_key(grid: List[List[Symbol]]) -> Tuple[int, ...]:
    return tuple(0 if symbol == Symbol.SUN else 1 for line in grid for symbol in line)
