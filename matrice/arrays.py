"""
arrays: conversion between matrices and numpy arrays or pandas frames.

Conversions always copy: an array built from a matrix shares no storage with it, and vice versa. Entries come back
out of numpy as plain Python numbers (via tolist), so arithmetic on the resulting Matrix behaves exactly as it does
on a matrix built from nested lists.
"""

import numpy as np
import numpy.typing as npt
import pandas as pd

from .errors import DimensionMismatch
from .matrix import Matrix, orbit


def to_array(mat: Matrix, dtype: npt.DTypeLike = None) -> npt.NDArray:
    """
    Return the matrix as a 2D numpy array of shape (rows, columns).

    >>> to_array(Matrix.from_rows([[1, 2], [3, 4]]))
    array([[1, 2],
           [3, 4]])
    """
    # Reshape explicitly, since np.array([]) would lose the shape of a degenerate matrix.
    return np.array(mat.elements, dtype=dtype).reshape(mat.rows, mat.columns)


def from_array(A: npt.ArrayLike) -> Matrix:
    """
    Convert a 2D array into a matrix.

    >>> from_array(np.identity(2, dtype=int))
    Matrix([
        [1, 0],
        [0, 1],
    ])
    """
    A = np.asarray(A)
    if len(A.shape) != 2:
        raise DimensionMismatch(f"Only 2D arrays can be converted to a matrix, was given shape {A.shape}", A.shape)

    rows, columns = A.shape
    return Matrix(rows, columns, A.ravel().tolist())


def to_frame(mat: Matrix) -> pd.DataFrame:
    """A DataFrame with one row per matrix row, and default integer index and columns."""
    return pd.DataFrame(to_array(mat))


def from_frame(frame: pd.DataFrame) -> Matrix:
    return from_array(frame.to_numpy())


def orbit_frame(mat: Matrix, start: Matrix, max_steps: int = 1000) -> pd.DataFrame:
    """
    Tabulate the orbit of the column vector start under repeated application of mat: the step number, followed by
    one column x0, x1, ... for each coordinate.

    >>> orbit_frame(Matrix.from_rows([[0, 1], [1, 0]]), Matrix.column_vector([1, 2]))
       step  x0  x1
    0     0   1   2
    1     1   2   1
    """
    if start.columns != 1:
        raise DimensionMismatch(f"The start of an orbit should be a column vector, got size {start.size}", [start.size])

    return pd.DataFrame(
        columns=['step', *(f'x{i}' for i in range(start.rows))],
        data=[(step, *point.elements) for step, point in enumerate(orbit(mat, start, max_steps))],
    )
