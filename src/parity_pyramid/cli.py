"""
Find the best odd/even alternating path through a number triangle.

Default behavior:
- Input:  the built-in 15-row triangle (parity_pyramid.config.DEFAULT_TRIANGLE)
- Method: bottom-up (row by row, no recursion depth limit)
- Output: max sum and the path on stdout

CLI overrides (optional):
    python -m parity_pyramid data/pyramid.txt \
        --method recursive \
        --out-csv artifacts/pyramid_cells.csv
"""

from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_METHOD, DEFAULT_TRIANGLE, METHODS, RunConfig
from .errors import TriangleInputError
from .report import annotations_frame, format_result, save_annotations
from .solver import SOLVERS, fits_recursion, triangle_height
from .triangle import build_triangle, read_triangle_lines, split_lines


def _parse_args(argv: Optional[List[str]] = None) -> RunConfig:
    ap = argparse.ArgumentParser(
        description="Max-sum path through a number triangle, alternating odd and even values."
    )
    ap.add_argument("input", nargs="?", default=None,
                    help="(Optional) Text file with the triangle, one row per line. "
                         "If omitted, the built-in triangle is used.")
    ap.add_argument("--method", choices=METHODS, default=DEFAULT_METHOD,
                    help=f"Solver to use (default: {DEFAULT_METHOD}).")
    ap.add_argument("--out-csv", type=str, default=None,
                    help="(Optional) Save per-cell annotations to this CSV.")
    args = ap.parse_args(argv)

    input_path = Path(args.input) if args.input else None
    if input_path is not None and not input_path.is_file():
        ap.error(f"input file not found: {input_path}")

    return RunConfig(input_path=input_path, method=args.method,
                     out_csv=Path(args.out_csv) if args.out_csv else None)


def run(config: RunConfig) -> int:
    try:
        if config.input_path is not None:
            print(f"Using input from file {config.input_path}")
            root = build_triangle(read_triangle_lines(config.input_path))
        else:
            print("Using input from the built-in triangle. "
                  "Pass a file name as the first argument to use a file instead. "
                  f"Built-in value:\n{DEFAULT_TRIANGLE}")
            root = build_triangle(split_lines(DEFAULT_TRIANGLE))
    except (TriangleInputError, UnicodeDecodeError, OSError) as ex:
        print(f"Couldn't parse input: {ex}", file=sys.stderr)
        return 1

    method = config.method
    if method == "recursive" and not fits_recursion(root):
        print(f"Triangle has {triangle_height(root)} rows, too deep for the recursive solver; "
              "using bottom-up instead.")
        method = "bottom-up"

    best = SOLVERS[method](root)
    print(format_result(root, best))

    if config.out_csv is not None:
        out = save_annotations(annotations_frame(root), config.out_csv)
        print(f"Saved cells : {out}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return run(_parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
