"""JSON (de)serialization for boards exchanged with the editor and the CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.constants import Constraint, Symbol
from ..core.exceptions import BoardParseError
from ..core.models import Board


_KEY_ALIASES = {
    "horizontal_constraints": ("horizontal_constraints", "horizontalConstraints"),
    "vertical_constraints": ("vertical_constraints", "verticalConstraints"),
}


def board_from_dict(payload: Dict[str, Any]) -> Board:
    """Build a board from its JSON form; ``null`` marks empty cells and missing edges.

    Constraint matrices may be omitted, in which case every edge is unconstrained.
    """

    if "grid" not in payload:
        raise BoardParseError("Board payload is missing 'grid'")
    raw_grid = payload["grid"]
    if not isinstance(raw_grid, list) or not all(isinstance(line, list) for line in raw_grid):
        raise BoardParseError("'grid' must be a list of rows")

    grid = [[_parse_symbol(value) for value in line] for line in raw_grid]
    size = len(grid)
    horizontal = _lookup(payload, "horizontal_constraints")
    vertical = _lookup(payload, "vertical_constraints")

    board = Board(
        grid=grid,
        horizontal=(
            [[_parse_constraint(v) for v in line] for line in horizontal]
            if horizontal is not None
            else [[Constraint.NONE] * max(0, size - 1) for _ in range(size)]
        ),
        vertical=(
            [[_parse_constraint(v) for v in line] for line in vertical]
            if vertical is not None
            else [[Constraint.NONE] * size for _ in range(max(0, size - 1))]
        ),
    )
    board.validate_shape()
    return board


def board_to_dict(board: Board) -> Dict[str, Any]:
    return {
        "grid": [[symbol.value if symbol.is_filled else None for symbol in line] for line in board.grid],
        "horizontal_constraints": _dump_matrix(board.horizontal),
        "vertical_constraints": _dump_matrix(board.vertical),
    }


def load_board(path: Path | str) -> Board:
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise BoardParseError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise BoardParseError(f"Expected a JSON object in {path}")
    return board_from_dict(payload)


def dump_board(board: Board, path: Path | str) -> None:
    Path(path).write_text(json.dumps(board_to_dict(board), indent=2), encoding="utf-8")


def _lookup(payload: Dict[str, Any], key: str) -> Optional[List[List[Any]]]:
    for alias in _KEY_ALIASES[key]:
        if alias in payload:
            value = payload[alias]
            if not isinstance(value, list) or not all(isinstance(line, list) for line in value):
                raise BoardParseError(f"'{alias}' must be a list of rows")
            return value
    return None


def _parse_symbol(value: Any) -> Symbol:
    if value is None:
        return Symbol.EMPTY
    try:
        return Symbol(str(value).lower())
    except ValueError as exc:
        raise BoardParseError(f"Unknown symbol {value!r}") from exc


def _parse_constraint(value: Any) -> Constraint:
    if value is None:
        return Constraint.NONE
    try:
        return Constraint(str(value).lower())
    except ValueError as exc:
        raise BoardParseError(f"Unknown constraint {value!r}") from exc


def _dump_matrix(matrix: List[List[Constraint]]) -> List[List[Optional[str]]]:
    return [[c.value if c is not Constraint.NONE else None for c in line] for line in matrix]
