"""Pretty-print helpers for Tango boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from ..core.constants import Constraint, Symbol

if TYPE_CHECKING:
    from ..core.models import Board
    from ..engine.solver import SolveResult


SYMBOLS = {
    Symbol.SUN: "S",
    Symbol.MOON: "M",
    Symbol.EMPTY: ".",
}

CONSTRAINT_MARKS = {
    Constraint.EQUALS: "=",
    Constraint.DIFFERENT: "x",
    Constraint.NONE: " ",
}


def format_board(board: Board) -> str:
    """Render cells with ``=``/``x`` markers on constrained edges."""

    size = board.size
    lines = ["     " + "   ".join(str(c % 10) for c in range(size))]
    lines.append("    " + "-" * (4 * size - 1))
    for r in range(size):
        parts = [SYMBOLS[board.cell(r, 0)]]
        for c in range(1, size):
            parts.append(f" {CONSTRAINT_MARKS[board.horizontal_constraint(r, c - 1)]} ")
            parts.append(SYMBOLS[board.cell(r, c)])
        lines.append(f"{r:>2} | " + "".join(parts))
        if r < size - 1:
            marks = "   ".join(CONSTRAINT_MARKS[board.vertical_constraint(r, c)] for c in range(size))
            lines.append(("   | " + marks).rstrip())
    return "\n".join(lines)


def pretty_print_board(board: Board, *, label: str | None = None, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board), file=stream)


def print_solve_summary(result: SolveResult, *, stream=None) -> None:
    """Print every solution followed by the search statistics."""

    stream = stream or sys.stdout
    for index, solution in enumerate(result.solutions, start=1):
        pretty_print_board(solution, label=f"Solution {index}/{result.count}", stream=stream)
        print(file=stream)

    print("--- Search ---", file=stream)
    print(f"  Solutions:     {result.count}", file=stream)
    print(f"  Iterations:    {result.iterations}", file=stream)
    print(f"  Truncated:     {'yes' if result.truncated else 'no'}", file=stream)
    if not result.solutions:
        print("  No solution satisfies the given cells and constraints.", file=stream)
    elif result.truncated:
        print("  Caps were reached; more solutions may exist.", file=stream)
