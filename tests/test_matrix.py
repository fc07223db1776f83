import numpy as np
import pytest
from wheelkf.utils import matrix
from wheelkf.utils.matrix import ShapeError, DimensionError, SingularMatrixError

A = [[1., 2., 3.],
     [4., 5., 6.]]
B = [[-1., 0.5, 2.],
     [3., 0., -7.]]
C = [[0.1, 0.2, 0.3],
     [0.4, 0.5, 0.6]]


def test_multiply():
    result = matrix.multiply(A, [[1.], [0.], [-1.]])
    np.testing.assert_array_equal(result, [[-2.], [-2.]])
    assert result.shape == (2, 1)


def test_multiply_dimension_mismatch():
    with pytest.raises(DimensionError):
        matrix.multiply(np.ones((2, 3)), np.ones((4, 2)))


def test_multiply_requires_2d():
    with pytest.raises(ShapeError):
        matrix.multiply([1., 2.], [[1.], [2.]])


def test_sum_commutative():
    np.testing.assert_array_equal(matrix.sum(A, B), matrix.sum(B, A))
    np.testing.assert_allclose(matrix.sum(A, B, C), matrix.sum(C, A, B))


def test_sum_single():
    result = matrix.sum(A)
    np.testing.assert_array_equal(result, A)
    assert result is not A


def test_sum_errors():
    with pytest.raises(ShapeError):
        matrix.sum()
    with pytest.raises(DimensionError):
        matrix.sum(A, [[1., 2.], [3., 4.]])
    with pytest.raises(ShapeError):
        matrix.sum(A, [1., 2., 3.])
    with pytest.raises(ShapeError):
        matrix.sum([['a', 'b']], [[1., 2.]])
    with pytest.raises(ShapeError):
        matrix.sum([[1., 2.], [3.]])
    with pytest.raises(ShapeError):
        matrix.sum([[None, 1.]], [[1., 1.]])
    with pytest.raises(ShapeError):
        matrix.subtract([[1., 2.]], [[1., None]])


def test_sum_converts_numeric_strings():
    np.testing.assert_array_equal(matrix.sum([['1', '2']], [[1, 1]]), [[2., 3.]])


def test_subtract_antisymmetric():
    np.testing.assert_array_equal(matrix.subtract(A, B), -1 * matrix.subtract(B, A))


def test_subtract_errors():
    with pytest.raises(DimensionError):
        matrix.subtract(A, [[1., 2.]])
    with pytest.raises(ShapeError):
        matrix.subtract([1., 2.], [1., 2.])


def test_transpose():
    result = matrix.transpose(A)
    assert result.shape == (3, 2)
    np.testing.assert_array_equal(result, [[1., 4.], [2., 5.], [3., 6.]])
    np.testing.assert_array_equal(matrix.transpose(matrix.transpose(A)), A)
    np.testing.assert_array_equal(matrix.transpose([[7.]]), [[7.]])


def test_transpose_empty():
    with pytest.raises(ShapeError):
        matrix.transpose([])
    with pytest.raises(ShapeError):
        matrix.transpose([[]])


def test_inputs_not_modified():
    M = np.array(A)
    copy = np.copy(M)
    matrix.sum(M, B)
    matrix.subtract(M, B)
    matrix.transpose(M)
    matrix.multiply(M, matrix.transpose(B))
    np.testing.assert_array_equal(M, copy)


def test_identity():
    np.testing.assert_array_equal(matrix.identity(2), [[1., 0.], [0., 1.]])
    with pytest.raises(ValueError):
        matrix.identity(0)


def test_inverse():
    np.testing.assert_allclose(matrix.inverse([[4.]]), [[0.25]])
    S = np.array([[4., 1.], [1., 3.]])
    np.testing.assert_allclose(matrix.inverse(S).dot(S), np.eye(2), atol=1e-12)


def test_inverse_singular():
    with pytest.raises(SingularMatrixError):
        matrix.inverse([[0.]])
    with pytest.raises(SingularMatrixError):
        matrix.inverse([[-4.]])
    with pytest.raises(SingularMatrixError):
        matrix.inverse([[5e-324]])
    with pytest.raises(SingularMatrixError):
        matrix.inverse([[1., 2.], [2., 1.]])
    with pytest.raises(SingularMatrixError):
        matrix.inverse([[np.inf]])
    with pytest.raises(DimensionError):
        matrix.inverse(A)


def test_errors_are_value_errors():
    assert issubclass(ShapeError, ValueError)
    assert issubclass(DimensionError, ValueError)
    assert issubclass(SingularMatrixError, np.linalg.LinAlgError)
