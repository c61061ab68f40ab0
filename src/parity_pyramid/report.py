"""Console text and a per-cell table for a solved triangle."""

from __future__ import annotations
from pathlib import Path
from typing import Optional

import pandas as pd

from .triangle import Cell, Choice, iter_rows
from .solver import best_path

NO_PATH_MESSAGE = "It's impossible to reach a goal with these numbers!"

COLUMNS = ["row", "col", "value", "status", "best_sum", "on_path"]


def format_result(root: Cell, best: Optional[int]) -> str:
    if best is None:
        return NO_PATH_MESSAGE
    path = ", ".join(str(c.value) for c in best_path(root))
    return f"Max sum: {best}\nPath: {path}"


def annotations_frame(root: Cell) -> pd.DataFrame:
    """One row per cell (1-indexed row/col) with the solver's annotations."""
    on_path = set()
    if root.status in (Choice.BELOW, Choice.DIAGONAL_RIGHT):
        on_path = {id(c) for c in best_path(root)}

    records = []
    for r, row in enumerate(iter_rows(root), start=1):
        for c, cell in enumerate(row, start=1):
            records.append({
                "row": r,
                "col": c,
                "value": cell.value,
                "status": cell.status.value,
                "best_sum": cell.best_sum,
                "on_path": id(cell) in on_path,
            })

    df = pd.DataFrame.from_records(records, columns=COLUMNS)
    df["best_sum"] = pd.array([rec["best_sum"] for rec in records], dtype="Int64")
    return df


def save_annotations(df: pd.DataFrame, out_path: str | Path) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False)
    return out_path
