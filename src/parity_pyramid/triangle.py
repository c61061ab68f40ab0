"""
Triangle data model and builder.

A triangle of N text rows becomes a DAG of `Cell` objects:
- row i (1-indexed) must hold exactly i integers;
- every non-bottom cell points to the cell directly below and to the one
  diagonally down-right, so neighbouring cells share a child
  (cell (r, c).diagonal_right is cell (r, c+1).below).

Blank lines are dropped by the line source before rows reach the builder.

Usage:
    root = build_triangle(split_lines("1\\n2 3\\n4 5 6"))
    root = build_triangle(read_triangle_lines("data/pyramid.txt"))
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .config import COLUMN_SEPARATORS, INT32_MAX, INT32_MIN
from .errors import EmptyInputError, InvalidStateError, MalformedRowError


class Choice(Enum):
    """Memoized decision for a cell."""
    UNVISITED = "unvisited"
    BELOW = "below"
    DIAGONAL_RIGHT = "diagonal_right"
    INFEASIBLE = "infeasible"


@dataclass(eq=False)
class Cell:
    value: int
    below: Optional["Cell"] = field(default=None, repr=False)
    diagonal_right: Optional["Cell"] = field(default=None, repr=False)
    status: Choice = Choice.UNVISITED
    best_sum: Optional[int] = None

    @property
    def is_bottom(self) -> bool:
        return self.below is None and self.diagonal_right is None

    def record(self, status: Choice, best_sum: Optional[int] = None) -> Optional[int]:
        """Store the solver's decision once; returns best_sum for convenience."""
        if self.status is not Choice.UNVISITED:
            raise InvalidStateError(f"Cell {self.value} is already decided ({self.status.value})")
        if status is Choice.UNVISITED:
            raise InvalidStateError("Cannot record UNVISITED as a decision")
        if (status is Choice.INFEASIBLE) != (best_sum is None):
            raise InvalidStateError(
                f"best_sum must be set exactly when a path exists (status={status.value}, best_sum={best_sum})"
            )
        self.status = status
        self.best_sum = best_sum
        return best_sum


# ---------- line source ----------
def iter_data_lines(lines: Iterable[str]) -> Iterator[str]:
    """Drop line terminators and skip empty / whitespace-only lines."""
    for line in lines:
        line = line.rstrip("\r\n")
        if line.strip():
            yield line


def split_lines(text: str) -> List[str]:
    # rows end at \n only; a trailing \r is stripped by iter_data_lines
    return list(iter_data_lines(text.split("\n")))


def read_triangle_lines(path: str | Path) -> List[str]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Triangle file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return list(iter_data_lines(f))


# ---------- parsing ----------
_SEPARATOR_RE = re.compile("[" + re.escape("".join(COLUMN_SEPARATORS)) + "]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_token(token: str, line: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise MalformedRowError(f"Couldn't parse number {token} in row '{line}'", line=line, token=token)
    num = int(token)
    if not INT32_MIN <= num <= INT32_MAX:
        raise MalformedRowError(
            f"Number {token} in row '{line}' is outside the 32-bit range", line=line, token=token
        )
    return num


def parse_row(line: str, expected_count: int) -> List[Cell]:
    """Split a row on spaces/tabs (runs collapse) and build one Cell per integer."""
    parts = [p for p in _SEPARATOR_RE.split(line) if p]
    if len(parts) != expected_count:
        raise MalformedRowError(
            f"Expected {expected_count} numbers in row '{line}', but got {len(parts)}",
            line=line, expected=expected_count, actual=len(parts),
        )
    return [Cell(_parse_token(p, line)) for p in parts]


def build_rows(lines: Iterable[str]) -> List[List[Cell]]:
    """Parse every data line and link each row to the one below it."""
    it = iter(lines)
    first = next(it, None)
    if first is None:
        raise EmptyInputError()

    rows = [parse_row(first, 1)]
    for line in it:
        prev = rows[-1]
        new = parse_row(line, len(prev) + 1)
        for j, cell in enumerate(prev):
            cell.below = new[j]
            cell.diagonal_right = new[j + 1]
        rows.append(new)
    return rows


def build_triangle(lines: Iterable[str]) -> Cell:
    return build_rows(lines)[0][0]


def iter_rows(root: Cell) -> Iterator[List[Cell]]:
    """Walk an already built triangle row by row, starting at the root."""
    row = [root]
    while True:
        yield row
        if row[0].below is None:
            return
        row = [row[0].below] + [cell.diagonal_right for cell in row]
