"""
Exceptions raised by matrix operations whose preconditions are violated.
"""
from __future__ import annotations

from typing import Sequence


class DimensionMismatch(ValueError):
    """
    The dimensions of the operands do not fit together, for example adding a 2 x 3 matrix to a 3 x 2 matrix, or
    building a matrix from rows of different lengths. The conflicting sizes (or row lengths) are kept in `dimensions`.

    >>> DimensionMismatch("Ragged rows", [3, 4]).dimensions
    (3, 4)
    """
    def __init__(self, message: str, dimensions: Sequence = ()):
        super().__init__(message)
        self.dimensions = tuple(dimensions)


class IndexOutOfBounds(IndexError):
    """An index lying outside a matrix. The offending index and the size of the matrix are kept for inspection."""
    def __init__(self, message: str, index, size: tuple[int, int]):
        super().__init__(message)
        self.index = index
        self.size = size
