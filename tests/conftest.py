# Always add the source folder (folder that contains `parity_pyramid/`) to sys.path
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Optional sanity check during collection:
assert (SRC / "parity_pyramid").exists(), f"'src/parity_pyramid' not found at {ROOT}"

import pytest

from parity_pyramid.triangle import build_rows, split_lines


@pytest.fixture
def small_rows():
    """The 3-row example: best alternating path is 1 -> 2 -> 5."""
    return build_rows(split_lines("1\n2 3\n4 5 6\n"))
