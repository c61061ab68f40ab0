"""Maximum-sum path through a triangle of integers with odd/even alternation."""

from .errors import EmptyInputError, InvalidStateError, MalformedRowError, TriangleInputError
from .triangle import Cell, Choice, build_rows, build_triangle, iter_rows, parse_row
from .solver import best_path, path_values, solve, solve_bottom_up

__version__ = "0.1.0"
