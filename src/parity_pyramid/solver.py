"""
Best alternating-parity path from the root of a triangle to its bottom row.

Both solvers annotate each evaluated cell with a `Choice` and its best sum
to the bottom, and return the root's best sum (None when no path alternates
odd/even all the way down).

- `solve`            memoized depth-first recursion, depth == number of rows
                     (check `fits_recursion` first on tall triangles)
- `solve_bottom_up`  the same decisions computed row by row from the bottom

Ties between the two children go to `below`.
"""

from __future__ import annotations
import sys
from collections import Counter
from typing import List, Optional

from .errors import InvalidStateError
from .triangle import Cell, Choice, iter_rows


RECURSION_HEADROOM = 100  # frames kept free for callers of solve()


def same_parity(a: int, b: int) -> bool:
    return (a - b) % 2 == 0


def _decide(cell: Cell, sum_below: Optional[int], sum_diag: Optional[int]) -> Optional[int]:
    if sum_below is None and sum_diag is None:
        return cell.record(Choice.INFEASIBLE)
    if sum_diag is None or (sum_below is not None and sum_below >= sum_diag):
        return cell.record(Choice.BELOW, sum_below + cell.value)
    return cell.record(Choice.DIAGONAL_RIGHT, sum_diag + cell.value)


def solve(cell: Optional[Cell], previous: Optional[int] = None,
          stats: Optional[Counter] = None) -> Optional[int]:
    """
    Best sum from `cell` down to the bottom row.

    `previous` is the value of the cell we came from; a child with the same
    parity is rejected before its memo is looked at, because that rejection
    belongs to the edge, not to the child. Pass a Counter as `stats` to count
    fresh evaluations under "evaluated".
    """
    if cell is None:
        return 0  # past the bottom row: empty remainder

    if previous is not None and same_parity(previous, cell.value):
        return None

    if cell.status is Choice.UNVISITED:
        if stats is not None:
            stats["evaluated"] += 1
        sum_below = solve(cell.below, cell.value, stats)
        sum_diag = solve(cell.diagonal_right, cell.value, stats)
        return _decide(cell, sum_below, sum_diag)
    if cell.status in (Choice.BELOW, Choice.DIAGONAL_RIGHT):
        return cell.best_sum
    if cell.status is Choice.INFEASIBLE:
        return None
    raise InvalidStateError(f"Unknown cell status: {cell.status!r}")


def triangle_height(root: Cell) -> int:
    height = 0
    cell: Optional[Cell] = root
    while cell is not None:
        height += 1
        cell = cell.below
    return height


def fits_recursion(root: Cell) -> bool:
    """True when `solve(root)` stays under the interpreter's recursion limit."""
    return triangle_height(root) + RECURSION_HEADROOM <= sys.getrecursionlimit()


def _edge_sum(parent: Cell, child: Optional[Cell]) -> Optional[int]:
    if child is None:
        return 0
    if same_parity(parent.value, child.value):
        return None
    return child.best_sum


def solve_bottom_up(root: Cell, stats: Optional[Counter] = None) -> Optional[int]:
    """
    Iterative equivalent of `solve(root)`.

    Unlike the recursion it evaluates every cell, including those no
    alternating path can reach. Cells already decided (by an earlier call to
    either solver) keep their memoized result.
    """
    if root.status is not Choice.UNVISITED:
        return root.best_sum

    rows = list(iter_rows(root))
    for row in reversed(rows):
        for cell in row:
            if cell.status is not Choice.UNVISITED:
                continue
            if stats is not None:
                stats["evaluated"] += 1
            _decide(cell, _edge_sum(cell, cell.below), _edge_sum(cell, cell.diagonal_right))
    return root.best_sum


SOLVERS = {
    "recursive": solve,
    "bottom-up": solve_bottom_up,
}


# ---------- path reconstruction ----------
def best_path(root: Cell) -> List[Cell]:
    """Follow the recorded choices from `root` until the bottom row."""
    path = []
    cell: Optional[Cell] = root
    while cell is not None:
        path.append(cell)
        if cell.status is Choice.BELOW:
            cell = cell.below
        elif cell.status is Choice.DIAGONAL_RIGHT:
            cell = cell.diagonal_right
        else:
            raise InvalidStateError(
                f"Can't follow the path through cell {cell.value} with status {cell.status.value}"
            )
    return path


def path_values(root: Cell) -> List[int]:
    return [cell.value for cell in best_path(root)]
