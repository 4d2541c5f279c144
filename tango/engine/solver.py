"""Solver façade: snapshot the board, run the bounded search, report results."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..core.constants import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MAX_SOLUTIONS,
    LARGE_BOARD_MAX_ITERATIONS,
    LARGE_BOARD_MAX_SOLUTIONS,
    LARGE_BOARD_SIZE,
)
from ..core.models import Board
from ..utils.logger import get_logger
from .search import BacktrackingSearch


LOGGER = get_logger(__name__)


@dataclass
class SolverConfig:
    """Caps bounding one solve call.

    ``should_cancel`` is an optional host hook polled at the same point the
    caps are checked; returning ``True`` truncates the search.
    """

    max_solutions: int = DEFAULT_MAX_SOLUTIONS
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    should_cancel: Optional[Callable[[], bool]] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.max_solutions < 0:
            raise ValueError("max_solutions must be non-negative")
        if self.max_iterations < 0:
            raise ValueError("max_iterations must be non-negative")

    @classmethod
    def for_size(cls, size: int) -> "SolverConfig":
        if size >= LARGE_BOARD_SIZE:
            return cls(max_solutions=LARGE_BOARD_MAX_SOLUTIONS, max_iterations=LARGE_BOARD_MAX_ITERATIONS)
        return cls(max_solutions=DEFAULT_MAX_SOLUTIONS, max_iterations=DEFAULT_MAX_ITERATIONS)


@dataclass
class SolveResult:
    solutions: List[Board]
    truncated: bool
    iterations: int = 0

    @property
    def count(self) -> int:
        return len(self.solutions)

    @property
    def first(self) -> Optional[Board]:
        return self.solutions[0] if self.solutions else None

    @property
    def is_unique(self) -> bool:
        return self.count == 1 and not self.truncated


def solve(board: Board, config: Optional[SolverConfig] = None) -> SolveResult:
    """Find up to ``config.max_solutions`` solutions for ``board``.

    Raises :class:`~tango.core.exceptions.BoardShapeError` before searching if
    the board is malformed. The caller's board is never modified; solutions
    come back in search order, so identical inputs give identical results.
    """

    board.validate_shape()
    config = config or SolverConfig.for_size(board.size)
    working = board.copy()

    started = time.perf_counter()
    search = BacktrackingSearch(working, config)
    solutions = search.run()
    elapsed = time.perf_counter() - started

    LOGGER.info(
        "Solved %dx%d board: %d solution(s), %d iterations, truncated=%s (%.3fs)",
        board.size,
        board.size,
        len(solutions),
        search.iterations,
        search.truncated,
        elapsed,
    )
    if search.truncated:
        LOGGER.debug(
            "Search stopped early (max_solutions=%d, max_iterations=%d)",
            config.max_solutions,
            config.max_iterations,
        )
    return SolveResult(solutions=solutions, truncated=search.truncated, iterations=search.iterations)
