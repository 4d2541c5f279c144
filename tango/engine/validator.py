"""Deterministic rule validation for whole boards."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from ..core.constants import MAX_RUN_LENGTH, Symbol
from ..core.exceptions import ValidationError
from ..core.models import Board
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class BoardValidator:
    """Runs every puzzle rule over the full board.

    The checks do not rely on anything the search already verified, so the
    validator doubles as a standalone checker for boards built by hand.
    """

    def validate(self, board: Board, require_complete: bool = True) -> ValidationResult:
        try:
            board.validate_shape()
            if require_complete:
                self._check_complete(board)
            self._check_runs(board)
            self._check_balance(board)
            self._check_constraints(board)
        except ValidationError as exc:
            LOGGER.debug("Board rejected: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True)

    def _check_complete(self, board: Board) -> None:
        if board.is_complete():
            return
        r, c = next(board.empty_cells())
        raise ValidationError(f"Cell ({r},{c}) is empty")

    def _check_runs(self, board: Board) -> None:
        for index in range(board.size):
            self._check_line_runs(board.row(index), f"row {index}")
            self._check_line_runs(board.column(index), f"column {index}")

    @staticmethod
    def _check_line_runs(line: Sequence[Symbol], label: str) -> None:
        run = 0
        previous = Symbol.EMPTY
        for position, symbol in enumerate(line):
            run = run + 1 if symbol.is_filled and symbol == previous else 1
            previous = symbol
            if symbol.is_filled and run > MAX_RUN_LENGTH:
                raise ValidationError(
                    f"Three {symbol.value} symbols in a row in {label} ending at {position}"
                )

    def _check_balance(self, board: Board) -> None:
        for index in range(board.size):
            self._check_line_balance(board.row(index), f"row {index}")
            self._check_line_balance(board.column(index), f"column {index}")

    @staticmethod
    def _check_line_balance(line: Sequence[Symbol], label: str) -> None:
        if not all(symbol.is_filled for symbol in line):
            return
        suns = sum(1 for symbol in line if symbol == Symbol.SUN)
        moons = len(line) - suns
        if len(line) % 2 == 0:
            balanced = suns == moons
        else:
            balanced = abs(suns - moons) <= 1
        if not balanced:
            raise ValidationError(f"Unbalanced {label}: {suns} suns, {moons} moons")

    def _check_constraints(self, board: Board) -> None:
        for r in range(board.size):
            for c in range(board.size - 1):
                constraint = board.horizontal_constraint(r, c)
                if not constraint.is_satisfied_by(board.cell(r, c), board.cell(r, c + 1)):
                    raise ValidationError(
                        f"Horizontal {constraint.value} edge broken between ({r},{c}) and ({r},{c + 1})"
                    )
        for r in range(board.size - 1):
            for c in range(board.size):
                constraint = board.vertical_constraint(r, c)
                if not constraint.is_satisfied_by(board.cell(r, c), board.cell(r + 1, c)):
                    raise ValidationError(
                        f"Vertical {constraint.value} edge broken between ({r},{c}) and ({r + 1},{c})"
                    )


_DEFAULT_VALIDATOR = BoardValidator()


def is_globally_valid(board: Board) -> bool:
    """Return ``True`` when the board is fully assigned and breaks no rule."""

    return _DEFAULT_VALIDATOR.validate(board, require_complete=True).ok
