import pytest

from matrice import DimensionMismatch, IndexOutOfBounds, Matrix


@pytest.mark.parametrize("rows, columns", [(5, 3), (3, 4), (1, 1), (0, 0), (0, 4), (3, 0)])
def test_dimensions(rows: int, columns: int):
    m = Matrix(rows, columns)
    assert m.rows == rows
    assert m.columns == columns
    assert m.size == (rows, columns)
    assert m.length == rows * columns
    assert len(m) == rows * columns


def test_negative_dimensions():
    with pytest.raises(ValueError):
        Matrix(-1, 3)

    with pytest.raises(ValueError):
        Matrix(2, -3)


def test_wrong_element_count():
    with pytest.raises(DimensionMismatch):
        Matrix(2, 2, [1, 2, 3])


TWO_D = [
    [1, 2, 3, 4, 5],
    [6, 7, 8, 9, 10],
    [11, 12, 13, 14, 15],
]

def test_from_rows():
    m = Matrix.from_rows(TWO_D)
    assert m.size == (3, 5)
    assert m.elements == list(range(1, 16))
    assert m.to_rows() == TWO_D

    # Tuples of tuples are accepted too, and always come back out as lists.
    assert Matrix.from_rows(tuple(zip(*TWO_D))).to_rows() == [list(col) for col in zip(*TWO_D)]


def test_from_rows_ragged():
    with pytest.raises(DimensionMismatch) as excinfo:
        Matrix.from_rows([
            [1, 2, 3, 4],
            [4, 2, 0],
            [1, 3, 3, 7],
        ])

    assert excinfo.value.dimensions == (3, 4)


def test_from_rows_empty():
    m = Matrix.from_rows([])
    assert m.size == (0, 0)
    assert m.to_rows() == []


def test_storage_not_shared():
    rows = [[1, 2], [3, 4]]
    m = Matrix.from_rows(rows)
    rows[0][0] = 100
    assert m[0, 0] == 1

    out = m.to_rows()
    out[1][1] = 100
    assert m[1, 1] == 4

    copy = m.copy()
    copy[0, 1] = 100
    assert m[0, 1] == 2
    assert copy != m


def test_get_set():
    m = Matrix(2, 3)
    m.set(1, 2, 7)
    m[0, 1] = -4
    assert m.get(1, 2) == 7
    assert m[0, 1] == -4
    assert m.elements == [0, -4, 0, 0, 0, 7]


@pytest.mark.parametrize("i, j", [(2, 0), (0, 3), (-1, 0), (0, -1), (5, 5)])
def test_out_of_bounds(i: int, j: int):
    m = Matrix.ones(2, 3)
    with pytest.raises(IndexOutOfBounds) as excinfo:
        m.get(i, j)
    assert excinfo.value.index == (i, j)
    assert excinfo.value.size == (2, 3)

    with pytest.raises(IndexOutOfBounds):
        m[i, j] = 0

    # Still an IndexError as far as everyone else is concerned.
    with pytest.raises(IndexError):
        m[i, j]


def test_bad_key():
    with pytest.raises(KeyError):
        Matrix.identity(2)[0]


def test_row_column():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert m.row(1) == Matrix.row_vector([4, 5, 6])
    assert m.column(2) == Matrix.column_vector([3, 6])

    with pytest.raises(IndexOutOfBounds):
        m.row(2)
    with pytest.raises(IndexOutOfBounds):
        m.column(3)


def test_iteration_order():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert list(m.keys()) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
    assert list(m.values()) == [1, 2, 3, 4, 5, 6]
    assert list(m.entries()) == list(zip(m.keys(), m.values()))
    assert list(m.flat_keys()) == list(range(6))
    assert list(m.flat_entries()) == list(enumerate(range(1, 7)))

    # Each call gives a new traversal.
    assert list(m.values()) == list(m.values())
    assert list(Matrix(0, 3).entries()) == []


def test_iteration_is_lazy():
    m = Matrix.zeroes(2, 2)
    values = m.values()
    assert next(values) == 0
    m[1, 1] = 9
    assert list(values) == [0, 0, 9]


def test_factories():
    assert Matrix.identity(4).to_rows() == [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]
    assert Matrix.identity(0).size == (0, 0)
    assert Matrix.ones(5, 3).to_rows() == [[1] * 3] * 5
    assert Matrix.zeroes(3, 4).to_rows() == [[0] * 4] * 3
    assert Matrix.full(2, 2, 0.5).to_rows() == [[0.5, 0.5], [0.5, 0.5]]
    assert Matrix(3, 4) == Matrix.zeroes(3, 4)


def test_equality():
    assert Matrix.zeroes(2, 3) != Matrix.zeroes(3, 2)
    assert Matrix.zeroes(1, 0) != Matrix.zeroes(0, 1)
    assert Matrix.from_rows([[1.0, 2.0]]) == Matrix.from_rows([[1, 2]])

    with pytest.raises(TypeError):
        hash(Matrix.identity(2))


def test_display():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    assert str(m) == 'M[[1, 2], [3, 4]]'
    assert m._repr_latex_() == r'\begin{pmatrix}1 & 2 \\ 3 & 4\end{pmatrix}'
    assert repr(Matrix(0, 2)) == 'Matrix(0, 2, [])'
