"""
Numeric backend for all-numeric matrices.

A thin adapter over NumPy and SciPy: it converts a ``Matrix`` of literals to
an array, delegates, and maps library failures onto ``MatrixError`` types.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict
from scipy import linalg

from matrixmaster.errors import (
    EmptyMatrixError,
    NonSquareMatrixError,
    ShapeMismatchError,
    SingularMatrixError,
    SymbolicInputError,
)
from matrixmaster.expression.ast import Literal

from .matrix import Matrix, is_finite_real


class EigenResult(BaseModel):
    """Eigenvalues and (column) eigenvectors."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    values: np.ndarray
    vectors: np.ndarray


class LUResult(BaseModel):
    """Pivoted LU factorization with ``A = P @ L @ U``."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    L: np.ndarray
    U: np.ndarray
    P: np.ndarray


class QRResult(BaseModel):
    """QR factorization with ``A = Q @ R``."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    Q: np.ndarray
    R: np.ndarray


def to_array(value: Matrix | Any) -> np.ndarray:
    """
    Convert a matrix of literals (or any array-like) to a float array.

    Raises:
        SymbolicInputError: If a matrix entry is not a literal
    """
    if isinstance(value, Matrix):
        cells = []
        for row in value.rows:
            if not all(isinstance(cell, Literal) for cell in row):
                raise SymbolicInputError("Numeric operations require all elements to be numbers.")
            cells.append([cell.value for cell in row])
        return np.array(cells, dtype=float)
    return np.asarray(value, dtype=float)


def _square(value: Matrix | Any, operation: str) -> np.ndarray:
    array = to_array(value)
    if array.size == 0:
        raise EmptyMatrixError(operation)
    rows, cols = array.shape
    if rows != cols:
        raise NonSquareMatrixError(rows, cols, operation)
    return array


def determinant(value: Matrix | Any) -> float:
    return float(np.linalg.det(_square(value, "det")))


def inverse(value: Matrix | Any) -> np.ndarray:
    """
    Calculate the matrix inverse.

    Raises:
        SingularMatrixError: If the matrix is not invertible
    """
    array = _square(value, "inv")
    try:
        return np.linalg.inv(array)
    except np.linalg.LinAlgError:
        raise SingularMatrixError()


def eigen(value: Matrix | Any) -> EigenResult:
    values, vectors = np.linalg.eig(_square(value, "eigs"))
    return EigenResult(values=values, vectors=vectors)


def lu(value: Matrix | Any) -> LUResult:
    """LU decomposition with partial pivoting."""
    P, L, U = linalg.lu(_square(value, "lu"))
    return LUResult(L=L, U=U, P=P)


def qr(value: Matrix | Any) -> QRResult:
    array = to_array(value)
    if array.size == 0:
        raise EmptyMatrixError("qr")
    Q, R = np.linalg.qr(array)
    return QRResult(Q=Q, R=R)


def rank(value: Matrix | Any) -> int:
    array = to_array(value)
    if array.size == 0:
        raise EmptyMatrixError("rank")
    return int(np.linalg.matrix_rank(array))


def transpose(value: Matrix | Any) -> np.ndarray:
    return to_array(value).T


def trace(value: Matrix | Any) -> float:
    return float(np.trace(_square(value, "trace")))


def _same_shape(left: np.ndarray, right: np.ndarray, operation: str) -> None:
    if left.shape != right.shape:
        raise ShapeMismatchError(left.shape, right.shape, operation)


def add(left: Matrix | Any, right: Matrix | Any) -> np.ndarray:
    a, b = to_array(left), to_array(right)
    _same_shape(a, b, "add")
    return a + b


def subtract(left: Matrix | Any, right: Matrix | Any) -> np.ndarray:
    a, b = to_array(left), to_array(right)
    _same_shape(a, b, "subtract")
    return a - b


def multiply(left: Matrix | Any, right: Matrix | Any) -> np.ndarray:
    a, b = to_array(left), to_array(right)
    if a.shape[1] != b.shape[0]:
        raise ShapeMismatchError(a.shape, b.shape, "multiply")
    return a @ b


def scalar_multiply(value: Matrix | Any, scalar: str | float) -> np.ndarray:
    if isinstance(scalar, str):
        if not is_finite_real(scalar):
            raise SymbolicInputError("Scalar must be a finite number.")
        scalar = float(scalar)
    return to_array(value) * scalar


def solve(matrix: Matrix, vector: list[str] | list[float]) -> np.ndarray:
    """
    Solve the linear system ``Ax = b``.

    Args:
        matrix: Square coefficient matrix
        vector: Right-hand side, one entry per row

    Raises:
        SymbolicInputError: If any coefficient or right-hand side entry is symbolic
        SingularMatrixError: If the system has no unique solution
    """
    tokens = [str(v).strip() for v in vector]
    if not all(is_finite_real(t) for t in tokens):
        raise SymbolicInputError()
    try:
        a = _square(matrix, "solve")
    except SymbolicInputError:
        raise SymbolicInputError()

    b = np.array([float(t) for t in tokens])
    if b.shape[0] != a.shape[0]:
        raise ShapeMismatchError(a.shape, (b.shape[0], 1), "solve")
    try:
        return np.linalg.solve(a, b)
    except np.linalg.LinAlgError:
        raise SingularMatrixError("System has no unique solution.")
