from __future__ import annotations
from typing import Optional


class TriangleInputError(ValueError):
    """Base class for problems with the triangle text itself."""


class EmptyInputError(TriangleInputError):
    def __init__(self, message: str = "The input is empty!"):
        super().__init__(message)


class MalformedRowError(TriangleInputError):
    """A row has the wrong number of tokens or a token that is not an integer."""

    def __init__(self, message: str, line: str, token: Optional[str] = None,
                 expected: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.token = token
        self.expected = expected
        self.actual = actual


class InvalidStateError(RuntimeError):
    """A cell was used in a way its memoization status does not allow (a bug, not bad input)."""
