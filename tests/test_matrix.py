import pytest

from geostatics.matrix import Matrix


def test_from_rows_values():
    m1 = Matrix.from_rows([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])
    expected = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    assert m1.rows == 3
    assert m1.cols == 4
    for i, row in enumerate(expected):
        for j, value in enumerate(row):
            assert m1[i, j] == value


def test_new_matrix_is_zero():
    m = Matrix(2, 3)
    assert (m.rows, m.cols) == (2, 3)
    assert all(m[i, j] == 0.0 for i in range(2) for j in range(3))


def test_setitem():
    m = Matrix(2, 2)
    m[1, 0] = 7
    assert m[1, 0] == 7.0
    assert m[0, 1] == 0.0


def test_identity_is_neutral_for_multiplication():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert Matrix.identity(2) @ m == m
    assert m @ Matrix.identity(3) == m
    assert m * Matrix.identity(3) == m


def test_multiplication():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[5, 6], [7, 8]])
    assert a @ b == Matrix.from_rows([[19, 22], [43, 50]])


def test_multiplication_shape():
    a = Matrix(2, 3)
    b = Matrix(3, 4)
    product = a @ b
    assert (product.rows, product.cols) == (2, 4)


def test_multiplication_size_mismatch():
    with pytest.raises(ValueError, match="do not match"):
        Matrix(2, 3) @ Matrix(2, 3)


def test_empty_rows_rejected():
    with pytest.raises(ValueError):
        Matrix.from_rows([])


def test_equality():
    assert Matrix.from_rows([[1, 2]]) == Matrix.from_rows([[1.0, 2.0]])
    assert not Matrix.from_rows([[1, 2]]) == Matrix.from_rows([[1], [2]])


def test_str_format():
    text = str(Matrix.from_rows([[1, 2]]))
    assert text == "Matrix: \n1.00000000000000000 2.00000000000000000 \n"