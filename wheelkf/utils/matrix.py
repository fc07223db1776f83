"""
Dimension checked matrix operations used by the Kalman filter.

All functions accept anything numpy can turn into a rectangular 2D numeric
array (nested lists included) and return a new array. Inputs are never
modified.
"""
import numpy as np
import scipy.linalg
from ..models.constants import defaultType


class MatrixError(Exception):
    pass


class ShapeError(MatrixError, ValueError):
    """Argument is not a well-formed, non-empty, rectangular 2D numeric array"""
    pass


class DimensionError(MatrixError, ValueError):
    """Operand shapes are incompatible for the requested operation"""
    pass


class SingularMatrixError(MatrixError, np.linalg.LinAlgError):
    pass


def _asMatrix(A, name='A'):
    # Object dtype first, a direct float conversion turns None into NaN
    try:
        cells = np.array(A, dtype=object)
    except (TypeError, ValueError) as e:
        raise ShapeError("{0:} is not a rectangular array: {1:}".format(name, e))
    if cells.ndim != 2:
        raise ShapeError("{0:} must be a rectangular 2D array, got {1:} dimension(s)".format(name, cells.ndim))
    if cells.size == 0:
        raise ShapeError("{0:} is empty, shape {1:}".format(name, cells.shape))
    if any(cell is None for cell in cells.flat):
        raise ShapeError("{0:} has empty (None) cells".format(name))
    try:
        return cells.astype(defaultType)
    except (TypeError, ValueError) as e:
        raise ShapeError("{0:} has non-numeric cells: {1:}".format(name, e))


def multiply(A, B):
    A = _asMatrix(A, 'A')
    B = _asMatrix(B, 'B')
    if A.shape[1] != B.shape[0]:
        raise DimensionError(
            "Matrix dimensions do not match for multiplication. "
            "A has {0:} columns and B has {1:} rows.".format(A.shape[1], B.shape[0]))
    return A.dot(B)


def sum(*matrices):
    """
    Element-wise sum of one or more matrices of equal shape
    """
    if len(matrices) == 0:
        raise ShapeError("sum needs at least one matrix")
    first = _asMatrix(matrices[0], 'M1')
    result = np.copy(first)
    for i, M in enumerate(matrices[1:], start=2):
        M = _asMatrix(M, 'M' + str(i))
        if M.shape != first.shape:
            raise DimensionError(
                "M{0:} has shape {1:}, expected {2:}".format(i, M.shape, first.shape))
        result += M
    return result


def subtract(A, B):
    A = _asMatrix(A, 'A')
    B = _asMatrix(B, 'B')
    if A.shape != B.shape:
        raise DimensionError(
            "Inputs must have matching dimensions, got {0:} and {1:}".format(A.shape, B.shape))
    return A - B


def transpose(A):
    return np.copy(_asMatrix(A).T)


def identity(n):
    if n != int(n) or n < 1:
        raise ValueError("Identity size must be a positive integer, got " + str(n))
    return np.eye(int(n), dtype=defaultType)


def inverse(S):
    """
    Invert a symmetric positive definite matrix, e.g. an innovation covariance.

    A 1x1 matrix is inverted by taking the reciprocal of its only entry,
    anything larger goes through a Cholesky factorisation.
    """
    S = _asMatrix(S, 'S')
    if S.shape[0] != S.shape[1]:
        raise DimensionError("Only square matrices can be inverted, got " + str(S.shape))
    if not np.all(np.isfinite(S)):
        raise SingularMatrixError("Matrix has non-finite entries:\n" + np.array_str(S))
    if S.shape == (1, 1):
        with np.errstate(divide="ignore", over="ignore"):
            reciprocal = np.reciprocal(S[0, 0])
        if not S[0, 0] > 0 or not np.isfinite(reciprocal):
            raise SingularMatrixError("Scalar innovation variance {0:} is not positive".format(S[0, 0]))
        return np.array([[reciprocal]], dtype=defaultType)
    try:
        factor = scipy.linalg.cho_factor(S)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError("Matrix is not positive definite: " + str(e))
    return scipy.linalg.cho_solve(factor, np.eye(S.shape[0], dtype=defaultType))
