"""CLI entrypoint for the Tango puzzle solver."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, Optional

from tango.core.exceptions import TangoError
from tango.core.models import Board
from tango.engine.solver import SolverConfig, solve
from tango.io.board_json import board_to_dict, load_board
from tango.utils.logger import configure_logging, get_logger
from tango.utils.pretty import pretty_print_board, print_solve_summary


LOGGER = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a Tango sun/moon grid puzzle by bounded backtracking",
    )
    parser.add_argument(
        "board",
        type=Path,
        nargs="?",
        help="Path to a board JSON file (grid plus horizontal/vertical constraints)",
    )
    parser.add_argument("--size", type=int, help="Solve an empty N x N board instead of a file")
    parser.add_argument(
        "--max-solutions",
        type=int,
        help="Stop after this many solutions (default depends on board size)",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        help="Ceiling on recursive search steps (default depends on board size)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--show", action="store_true", help="Pretty-print the input and every solution")
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check the solutions against an independent CP-SAT enumeration",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if (args.board is None) == (args.size is None):
        parser.error("provide exactly one of a board file or --size")

    try:
        board = load_board(args.board) if args.board is not None else Board.empty(args.size)
    except (OSError, TangoError) as exc:
        parser.error(str(exc))

    defaults = SolverConfig.for_size(board.size)
    try:
        config = SolverConfig(
            max_solutions=args.max_solutions if args.max_solutions is not None else defaults.max_solutions,
            max_iterations=args.max_iterations if args.max_iterations is not None else defaults.max_iterations,
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.show:
        pretty_print_board(board, label="Input")
        print()

    result = solve(board, config)

    if args.show:
        print_solve_summary(result)

    payload: Dict[str, Any] = {
        "size": board.size,
        "solution_count": result.count,
        "truncated": result.truncated,
        "iterations": result.iterations,
        "solutions": [board_to_dict(solution)["grid"] for solution in result.solutions],
    }

    if args.verify:
        payload["verified"] = verify_with_cpsat(board, result)

    output_text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


def verify_with_cpsat(board: Board, result) -> Optional[bool]:
    """Compare backtracking output with CP-SAT.

    A truncated search is compared against the matching prefix of the full
    CP-SAT enumeration. Returns ``None`` when CP-SAT could not finish.
    """

    from tango.engine.cpsat import run_cpsat_enumeration

    enumeration = run_cpsat_enumeration(board)
    if not enumeration.complete:
        LOGGER.warning("Cross-check inconclusive: CP-SAT stopped with status %s", enumeration.status)
        return None
    expected = enumeration.solutions
    if result.truncated:
        matches = result.solutions == expected[: result.count]
    else:
        matches = result.solutions == expected
    if not matches:
        LOGGER.warning(
            "Cross-check mismatch: backtracking found %d solution(s), CP-SAT found %d",
            result.count,
            len(expected),
        )
    return matches


if __name__ == "__main__":  # pragma: no cover
    main()
