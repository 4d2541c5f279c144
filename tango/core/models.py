"""Data models for the Tango board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .constants import MIN_BOARD_SIZE, Constraint, Symbol
from .exceptions import BoardShapeError


Grid = List[List[Symbol]]
ConstraintMatrix = List[List[Constraint]]


@dataclass
class Board:
    """Grid of symbols plus the horizontal and vertical constraint edges.

    ``horizontal[r][c]`` ties ``grid[r][c]`` to ``grid[r][c + 1]`` and
    ``vertical[r][c]`` ties ``grid[r][c]`` to ``grid[r + 1][c]``.
    """

    grid: Grid
    horizontal: ConstraintMatrix = field(default_factory=list)
    vertical: ConstraintMatrix = field(default_factory=list)

    @classmethod
    def empty(cls, size: int) -> "Board":
        if size < MIN_BOARD_SIZE:
            raise BoardShapeError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}")
        return cls(
            grid=[[Symbol.EMPTY] * size for _ in range(size)],
            horizontal=[[Constraint.NONE] * (size - 1) for _ in range(size)],
            vertical=[[Constraint.NONE] * size for _ in range(size - 1)],
        )

    @property
    def size(self) -> int:
        return len(self.grid)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Symbol:
        return self.grid[row][col]

    def set_cell(self, row: int, col: int, symbol: Symbol) -> None:
        self.grid[row][col] = symbol

    def horizontal_constraint(self, row: int, col: int) -> Constraint:
        return self.horizontal[row][col]

    def vertical_constraint(self, row: int, col: int) -> Constraint:
        return self.vertical[row][col]

    def set_horizontal_constraint(self, row: int, col: int, constraint: Constraint) -> None:
        self.horizontal[row][col] = constraint

    def set_vertical_constraint(self, row: int, col: int, constraint: Constraint) -> None:
        self.vertical[row][col] = constraint

    def row(self, index: int) -> List[Symbol]:
        return list(self.grid[index])

    def column(self, index: int) -> List[Symbol]:
        return [line[index] for line in self.grid]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_complete(self) -> bool:
        return all(symbol.is_filled for line in self.grid for symbol in line)

    def filled_cells(self) -> Iterator[Tuple[int, int, Symbol]]:
        for r, line in enumerate(self.grid):
            for c, symbol in enumerate(line):
                if symbol.is_filled:
                    yield r, c, symbol

    def empty_cells(self) -> Iterator[Tuple[int, int]]:
        for r, line in enumerate(self.grid):
            for c, symbol in enumerate(line):
                if not symbol.is_filled:
                    yield r, c

    def copy(self) -> "Board":
        # Enum members are immutable, so copying the row lists is a deep copy.
        return Board(
            grid=[list(line) for line in self.grid],
            horizontal=[list(line) for line in self.horizontal],
            vertical=[list(line) for line in self.vertical],
        )

    def validate_shape(self) -> None:
        """Raise :class:`BoardShapeError` unless every matrix matches the board size."""

        size = self.size
        if size < MIN_BOARD_SIZE:
            raise BoardShapeError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}")
        for r, line in enumerate(self.grid):
            if len(line) != size:
                raise BoardShapeError(f"Grid row {r} has {len(line)} cells, expected {size}")
            for c, symbol in enumerate(line):
                if not isinstance(symbol, Symbol):
                    raise BoardShapeError(f"Cell ({r},{c}) holds {symbol!r}, not a Symbol")
        self._check_matrix("horizontal", self.horizontal, size, size - 1)
        self._check_matrix("vertical", self.vertical, size - 1, size)

    @staticmethod
    def _check_matrix(name: str, matrix: ConstraintMatrix, rows: int, cols: int) -> None:
        if len(matrix) != rows:
            raise BoardShapeError(f"{name} constraints have {len(matrix)} rows, expected {rows}")
        for r, line in enumerate(matrix):
            if len(line) != cols:
                raise BoardShapeError(
                    f"{name} constraint row {r} has {len(line)} entries, expected {cols}"
                )
            for c, constraint in enumerate(line):
                if not isinstance(constraint, Constraint):
                    raise BoardShapeError(
                        f"{name} constraint ({r},{c}) holds {constraint!r}, not a Constraint"
                    )
