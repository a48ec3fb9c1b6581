from __future__ import annotations

import dataclasses
import numbers
from typing import Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from .errors import DimensionMismatch, IndexOutOfBounds

T = TypeVar('T')


@dataclasses.dataclass(init=False)
class Matrix(Generic[T]):
    """
    A dense matrix of numbers, stored as a flat list in row-major order: the entry (i, j) lives at index
    i * columns + j of the elements. Any element type supporting +, - and * (and mixing with the integers 0 and 1)
    can be used. Matrices may be constructed in the following ways, for example direct construction::

    >>> Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    Matrix([
        [1, 2, 3],
        [4, 5, 6],
    ])

    Construction from a list of rows::

    >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    Matrix([
        [1, 2, 3],
        [4, 5, 6],
    ])

    Construction of special matrices::

    >>> Matrix.identity(2)
    Matrix([
        [1, 0],
        [0, 1],
    ])
    >>> Matrix.ones(2, 3)
    Matrix([
        [1, 1, 1],
        [1, 1, 1],
    ])
    >>> Matrix(2, 3)
    Matrix([
        [0, 0, 0],
        [0, 0, 0],
    ])

    Arithmetic never modifies its operands, and always returns a freshly allocated matrix of the same class as the
    left operand. Only set() (or item assignment) changes a matrix in place.
    """
    rows: int
    columns: int
    elements: list[T]

    def __init__(self, rows: int, columns: int, elements: Iterable[T] | None = None):
        if not (rows >= 0 and columns >= 0):
            raise ValueError("Cannot have a negative number of rows or columns.")

        self.rows = rows
        self.columns = columns
        self.elements = [0] * (rows * columns) if elements is None else list(elements)

        if len(self.elements) != rows * columns:
            raise DimensionMismatch(
                f"{len(self.elements)} elements cannot fill a {rows} x {columns} matrix",
                [(rows, columns), len(self.elements)],
            )

    def _like(self, rows: int, columns: int, elements: Iterable) -> Matrix:
        return type(self)(rows, columns, elements)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[T]]):
        """
        Construct a matrix from a sequence of rows, which must all have the same length. No rows at all gives the
        0 x 0 matrix.

        >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).to_rows()
        [[1, 2, 3], [4, 5, 6]]
        >>> Matrix.from_rows([[1, 2], [3]])
        Traceback (most recent call last):
            ...
        matrice.errors.DimensionMismatch: Each row must have the same number of columns, but found row lengths [1, 2]
        >>> Matrix.from_rows([])
        Matrix(0, 0, [])
        """
        rows = [list(row) for row in rows]
        if not rows:
            return cls(0, 0)

        lengths = sorted({len(row) for row in rows})
        if len(lengths) > 1:
            raise DimensionMismatch(
                f"Each row must have the same number of columns, but found row lengths {lengths}",
                lengths,
            )

        return cls(len(rows), lengths[0], (x for row in rows for x in row))

    @classmethod
    def full(cls, rows: int, columns: int, value: T):
        """A rows x columns matrix with every entry equal to value."""
        return cls(rows, columns, [value] * (rows * columns))

    @classmethod
    def identity(cls, size: int):
        """
        >>> Matrix.identity(3).to_rows()
        [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
        """
        return cls.scalar(size, 1)

    @classmethod
    def ones(cls, rows: int, columns: int):
        return cls.full(rows, columns, 1)

    @classmethod
    def zeroes(cls, rows: int, columns: int):
        return cls.full(rows, columns, 0)

    @classmethod
    def scalar(cls, size: int, scalar: T):
        """
        Create an n x n scalar matrix: the diagonal matrix with every diagonal entry equal to the scalar.

        >>> Matrix.scalar(3, 6).to_rows()
        [[6, 0, 0], [0, 6, 0], [0, 0, 6]]
        """
        return cls(size, size, (scalar if i == j else 0 for i in range(size) for j in range(size)))

    @classmethod
    def row_vector(cls, elems: Sequence[T]):
        return cls(1, len(elems), elems)

    @classmethod
    def column_vector(cls, elems: Sequence[T]):
        """
        >>> Matrix.column_vector([4, -1])
        Matrix([[4], [-1]])
        """
        return cls(len(elems), 1, elems)

    def copy(self):
        return self._like(self.rows, self.columns, self.elements)

    @property
    def size(self) -> tuple[int, int]:
        """The pair (rows, columns)."""
        return (self.rows, self.columns)

    @property
    def length(self) -> int:
        """The total number of entries, rows * columns."""
        return len(self.elements)

    def __len__(self):
        return len(self.elements)

    def _checkbounds(self, i, j):
        if not (0 <= i < self.rows and 0 <= j < self.columns):
            raise IndexOutOfBounds(
                f"Index ({i}, {j}) out of range for matrix with dimensions ({self.rows}, {self.columns})",
                (i, j),
                self.size,
            )

    def get(self, i: int, j: int) -> T:
        """
        Return the zero-indexed (i, j)th entry.

        >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).get(1, 0)
        4
        >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).get(2, 0)
        Traceback (most recent call last):
            ...
        matrice.errors.IndexOutOfBounds: Index (2, 0) out of range for matrix with dimensions (2, 3)
        """
        self._checkbounds(i, j)
        return self.elements[self.columns * i + j]

    def set(self, i: int, j: int, value: T):
        """Overwrite the zero-indexed (i, j)th entry in place."""
        self._checkbounds(i, j)
        self.elements[self.columns * i + j] = value

    def _unpack_key(self, key):
        if not isinstance(key, tuple) or len(key) != 2:
            raise KeyError(f"Supplied key {key!r} should be a tuple of length 2.")
        return key

    def __getitem__(self, key):
        """
        For a matrix M, M[i, j] returns the zero-indexed (i, j)th entry.

        >>> M = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        >>> M[0, 0]
        1
        >>> M[1, 1]
        5
        """
        return self.get(*self._unpack_key(key))

    def __setitem__(self, key, value):
        self.set(*self._unpack_key(key), value)

    def row(self, row: int):
        """
        Return a row of the matrix as a row vector.
        """
        if not 0 <= row < self.rows:
            raise IndexOutOfBounds(f"Row {row} is out of bounds for a {self.rows} x {self.columns} matrix.", row, self.size)

        return self._like(1, self.columns, self.elements[self.columns * row:self.columns * (row + 1)])

    def column(self, col: int):
        """
        Return a column of the matrix as a column vector.
        """
        if not 0 <= col < self.columns:
            raise IndexOutOfBounds(f"Column {col} is out of bounds for a {self.rows} x {self.columns} matrix.", col, self.size)

        return self._like(self.rows, 1, (self.elements[self.columns * i + col] for i in range(self.rows)))

    def to_rows(self) -> list[list[T]]:
        """Return the matrix as a list of lists of rows.

        >>> Matrix.from_rows([[1, 2], [3, 4]]).to_rows()
        [[1, 2], [3, 4]]
        """
        return [self.elements[self.columns * i:self.columns * (i + 1)] for i in range(self.rows)]

    def keys(self) -> Iterator[tuple[int, int]]:
        """
        The positions (i, j) of the matrix in row-major order.

        >>> list(Matrix(2, 2).keys())
        [(0, 0), (0, 1), (1, 0), (1, 1)]
        """
        for i in range(self.rows):
            for j in range(self.columns):
                yield i, j

    def values(self) -> Iterator[T]:
        """The entries of the matrix in row-major order, read as they are reached."""
        for i, j in self.keys():
            yield self.elements[self.columns * i + j]

    def entries(self) -> Iterator[tuple[tuple[int, int], T]]:
        """
        Pairs ((i, j), entry) in row-major order.

        >>> list(Matrix.from_rows([[1, 2]]).entries())
        [((0, 0), 1), ((0, 1), 2)]
        """
        for i, j in self.keys():
            yield (i, j), self.elements[self.columns * i + j]

    def flat_keys(self) -> Iterator[int]:
        yield from range(len(self.elements))

    def flat_entries(self) -> Iterator[tuple[int, T]]:
        """Pairs (index, entry) over the flat row-major storage."""
        for index in self.flat_keys():
            yield index, self.elements[index]

    def _check_same_size(self, other: Matrix, verb: str):
        if self.size != other.size:
            raise DimensionMismatch(f"Cannot {verb} incompatibly sized matrices: {self.size} and {other.size}", [self.size, other.size])

    def add(self, right: Matrix) -> Matrix:
        """
        >>> Matrix.from_rows([[1, 2], [3, 4]]).add(Matrix.ones(2, 2)).to_rows()
        [[2, 3], [4, 5]]
        """
        self._check_same_size(right, 'add')
        return self._like(self.rows, self.columns, (a + b for a, b in zip(self.elements, right.elements)))

    def subtract(self, right: Matrix) -> Matrix:
        self._check_same_size(right, 'subtract')
        return self._like(self.rows, self.columns, (a - b for a, b in zip(self.elements, right.elements)))

    def scale(self, factor) -> Matrix:
        """
        Multiply every entry by factor, using the arithmetic of the entries.

        >>> Matrix.from_rows([[3, -6]]).scale(1 / 3).to_rows()
        [[1.0, -2.0]]
        """
        return self._like(self.rows, self.columns, (x * factor for x in self.elements))

    def multiply(self, right: Matrix) -> Matrix:
        """
        The matrix product self * right. Each entry is summed over k in ascending order, starting from 0.

        >>> M = Matrix.from_rows([[1, 1], [1, 0]]) # Fibonacci matrix
        >>> M.multiply(M).multiply(M).to_rows()
        [[3, 2], [2, 1]]
        """
        if self.columns != right.rows:
            raise DimensionMismatch(
                f"Multiplying A * B requires cols(A) == rows(B), but got {self.size} * {right.size}",
                [self.size, right.size],
            )

        newdata = [0] * (self.rows * right.columns)
        for i in range(self.rows):
            for j in range(right.columns):
                for k in range(self.columns):
                    newdata[right.columns * i + j] += self.elements[self.columns * i + k] * right.elements[right.columns * k + j]

        return self._like(self.rows, right.columns, newdata)

    def transpose(self) -> Matrix:
        """
        >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).transpose().to_rows()
        [[1, 4], [2, 5], [3, 6]]
        """
        return self._like(
            self.columns,
            self.rows,
            (self.elements[self.columns * j + i] for i in range(self.columns) for j in range(self.rows)),
        )

    def map(self, f: Callable[[T], T]):
        """Map a function over the entries of the matrix."""
        return self._like(self.rows, self.columns, (f(c) for c in self.elements))

    def __add__(self, other):
        if isinstance(other, Matrix):
            return self.add(other)

        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix):
            return self.subtract(other)

        return NotImplemented

    def __neg__(self):
        return self.map(lambda x: -x)

    def __mul__(self, other):
        """
        >>> M = Matrix.from_rows([[1, 1], [1, 0]])
        >>> (M*M*M*M*M*M).to_rows()
        [[13, 8], [8, 5]]
        >>> (M * 2).to_rows()
        [[2, 2], [2, 0]]
        """
        if isinstance(other, Matrix):
            return self.multiply(other)

        if isinstance(other, numbers.Number):
            return self.scale(other)

        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return self.scale(other)

        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)

        return NotImplemented

    def __pow__(self, exp: int):
        """
        >>> (Matrix.from_rows([[1, 1], [1, 0]]) ** 10).to_rows()
        [[89, 55], [55, 34]]
        """
        if not isinstance(exp, numbers.Integral):
            return NotImplemented

        if not self.is_square():
            raise ValueError("Can only take powers of square matrices")

        if exp < 0:
            raise NotImplementedError("Negative powers of matrices unimplemented")

        acc = type(self).identity(self.rows)
        pow2 = self
        while exp:
            if exp % 2 == 1:
                acc = acc * pow2

            exp //= 2
            pow2 = pow2 * pow2

        return acc

    def trace(self):
        """
        The trace of a square matrix is the sum of the diagonal entries.

        >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).trace()
        15
        """
        if not self.is_square():
            raise ValueError("Trace defined only for square matrices")

        return sum(self.elements[self.columns * i + i] for i in range(self.rows))

    def is_square(self):
        return self.rows == self.columns

    def is_symmetric(self):
        return self.is_square() and all(self[i, j] == self[j, i] for i, j in self.keys() if i < j)

    def __repr__(self):
        """
        >>> Matrix(5, 0)
        Matrix(5, 0, [])
        >>> Matrix.from_rows([[1, 2, 3, 4]])
        Matrix([[1, 2, 3, 4]])
        >>> Matrix.from_rows([[1], [2], [3], [4]])
        Matrix([[1], [2], [3], [4]])
        >>> Matrix.from_rows([[2, 3, 4], [5, 6, 7]])
        Matrix([
            [2, 3, 4],
            [5, 6, 7],
        ])
        """
        name = type(self).__name__
        if self.rows == 0 or self.columns == 0:
            return f'{name}({self.rows}, {self.columns}, [])'
        if self.rows == 1:
            return f'{name}([[' + ', '.join(repr(c) for c in self.elements) + ']])'
        if self.columns == 1:
            return f'{name}([' + ', '.join(f'[{c!r}]' for c in self.elements) + '])'
        return '\n'.join([
            f'{name}([',
            *('    [' + ', '.join(repr(c) for c in row) + '],' for row in self.to_rows()),
            '])'
        ])

    def _repr_latex_(self):
        def get_repr(x):
            return x._repr_latex_() if hasattr(x, '_repr_latex_') else repr(x)

        return ''.join([
            r'\begin{pmatrix}',
            r' \\ '.join(' & '.join(get_repr(c) for c in row) for row in self.to_rows()),
            r'\end{pmatrix}',
        ])

    def __str__(self):
        """
        >>> print(Matrix.identity(2))
        M[[1, 0], [0, 1]]
        """
        rows = ['[' + ', '.join(str(c) for c in row) + ']' for row in self.to_rows()]
        return f"M[{', '.join(rows)}]"


def orbit(matrix: Matrix, start: Matrix, max_steps: int = 1000) -> Iterator[Matrix]:
    """
    Yield start, M start, M^2 start, ... until applying M would bring the orbit back to start, or until max_steps
    points have been produced.

    >>> R = Matrix.from_rows([[0, -1], [1, 1]])
    >>> [p.elements for p in orbit(R, Matrix.column_vector([4, -1]))]
    [[4, -1], [1, 3], [-3, 4], [-4, 1], [-1, -3], [3, -4]]
    """
    if max_steps < 0:
        raise ValueError(f"max_steps={max_steps} is illegal.")

    point = start
    for _ in range(max_steps):
        yield point
        point = matrix @ point
        if point.size == start.size and point.elements == start.elements:
            return
