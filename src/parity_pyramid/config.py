"""
Defaults shared by the builder, the solvers and the CLI.

The embedded triangle is only a default input: callers pass their own text or
file explicitly, nothing here is mutated at runtime.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np


# ---------- input format ----------
COLUMN_SEPARATORS = (" ", "\t")  # runs of these are collapsed

# cell values are 32-bit; sums are plain python ints and never overflow
INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

DEFAULT_TRIANGLE = """
215
192 124
117 269 442
218 836 347 235
320 805 522 417 345
229 601 728 835 133 124
248 202 277 433 207 263 257
359 464 504 528 516 716 871 182
461 441 426 656 863 560 380 171 923
381 348 573 533 448 632 387 176 975 449
223 711 445 645 245 543 931 532 937 541 444
330 131 333 928 376 733 017 778 839 168 197 197
131 171 522 137 217 224 291 413 528 520 227 229 928
223 626 034 683 839 052 627 310 713 999 629 817 410 121
924 622 911 233 325 139 721 218 253 223 107 233 230 124 233
"""


# ---------- run settings ----------
METHODS = ("bottom-up", "recursive")
DEFAULT_METHOD = "bottom-up"  # no recursion depth limit on tall triangles


@dataclass
class RunConfig:
    input_path: Optional[Path] = None  # None -> DEFAULT_TRIANGLE
    method: str = DEFAULT_METHOD
    out_csv: Optional[Path] = None

    def __post_init__(self):
        if self.method not in METHODS:
            raise ValueError(f"Unknown method '{self.method}'. Expected one of: {', '.join(METHODS)}")
        if self.input_path is not None:
            self.input_path = Path(self.input_path)
        if self.out_csv is not None:
            self.out_csv = Path(self.out_csv)
