"""Shared constants and enumerations for the Tango solver."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Symbol(str, Enum):
    """Cell contents. Exactly two filled variants plus the unfilled sentinel."""

    SUN = "sun"
    MOON = "moon"
    EMPTY = "empty"

    @property
    def is_filled(self) -> bool:
        return self is not Symbol.EMPTY


class Constraint(str, Enum):
    """Rule attached to the edge between two adjacent cells."""

    EQUALS = "equals"
    DIFFERENT = "different"
    NONE = "none"

    def is_satisfied_by(self, first: Symbol, second: Symbol) -> bool:
        """An edge can only be violated once both endpoints are filled."""

        if self is Constraint.NONE or not first.is_filled or not second.is_filled:
            return True
        if self is Constraint.EQUALS:
            return first == second
        return first != second


# Candidate order inside one cell. Changing it changes which solution is reported first.
SEARCH_ORDER: Tuple[Symbol, ...] = (Symbol.SUN, Symbol.MOON)

MIN_BOARD_SIZE = 2
MAX_RUN_LENGTH = 2

# Caps used by the puzzle page: larger boards get a tighter budget.
LARGE_BOARD_SIZE = 7
DEFAULT_MAX_SOLUTIONS = 100
DEFAULT_MAX_ITERATIONS = 1_000_000
LARGE_BOARD_MAX_SOLUTIONS = 10
LARGE_BOARD_MAX_ITERATIONS = 100_000
