"""Solver package for the two-symbol Tango grid puzzle.

This package exposes the public API surface via:

- ``tango.engine.solver.solve``: runs one bounded backtracking search.
- ``tango.engine.solver.SolverConfig``: solution and iteration caps.
- ``tango.core.models.Board``: grid of symbols plus the constraint edges.
- ``tango.engine.validator.is_globally_valid``: whole-board acceptance test.
"""

from .core.constants import Constraint, Symbol
from .core.models import Board
from .engine.solver import SolveResult, SolverConfig, solve
from .engine.validator import BoardValidator, is_globally_valid

__all__ = [
    "Board",
    "BoardValidator",
    "Constraint",
    "SolveResult",
    "SolverConfig",
    "Symbol",
    "is_globally_valid",
    "solve",
]

__version__ = "0.1.0"
