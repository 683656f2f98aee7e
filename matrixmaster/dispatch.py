"""
Mode dispatcher.

Classifies a matrix as all-numeric or symbolic and routes the requested
operation either to the numeric backend or to the symbolic evaluator. Shape
checks run before classification, and a symbolic matrix is never silently
handed to the numeric path.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from matrixmaster.core.config import Settings, get_settings
from matrixmaster.core.logging import get_context_logger
from matrixmaster.errors import (
    DimensionLimitError,
    EmptyMatrixError,
    NonSquareMatrixError,
    UnsupportedSymbolicOperationError,
)
from matrixmaster.expression.ast import Literal
from matrixmaster.linalg import numeric, symbolic
from matrixmaster.linalg.matrix import Matrix

logger = get_context_logger(__name__)


class Mode(str, Enum):
    """Evaluation path for a matrix"""
    NUMERIC = "numeric"
    SYMBOLIC = "symbolic"


class Operation(str, Enum):
    """Unary matrix operations, keyed like the calculator's operation buttons"""
    DETERMINANT = "det"
    INVERSE = "inv"
    TRANSPOSE = "transpose"
    TRACE = "trace"
    CHARACTERISTIC_POLYNOMIAL = "charpoly"
    EIGENVALUES = "eigs"
    LU = "lu"
    QR = "qr"
    RANK = "rank"


SQUARE_OPERATIONS = frozenset({
    Operation.DETERMINANT,
    Operation.INVERSE,
    Operation.TRACE,
    Operation.CHARACTERISTIC_POLYNOMIAL,
    Operation.EIGENVALUES,
    Operation.LU,
})

SYMBOLIC_OPERATIONS = frozenset({
    Operation.DETERMINANT,
    Operation.INVERSE,
    Operation.TRANSPOSE,
    Operation.TRACE,
    Operation.CHARACTERISTIC_POLYNOMIAL,
})


class CalculationResult(BaseModel):
    """Outcome of a dispatched operation, handed to the display layer"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    operation: Operation
    mode: Mode
    value: Any


def classify(matrix: Matrix) -> Mode:
    """NUMERIC iff every entry is a finite real literal."""
    for row in matrix.rows:
        for cell in row:
            if not isinstance(cell, Literal):
                return Mode.SYMBOLIC
    return Mode.NUMERIC


def validate(operation: Operation, matrix: Matrix) -> None:
    """
    Check shape preconditions before any classification or expansion.

    Raises:
        EmptyMatrixError: If the matrix has dimension 0
        NonSquareMatrixError: If a square-only operation gets rows != columns
    """
    if matrix.is_empty:
        raise EmptyMatrixError(operation.value)
    rows, cols = matrix.shape
    if operation in SQUARE_OPERATIONS and rows != cols:
        raise NonSquareMatrixError(rows, cols, operation.value)


def _evaluate_symbolic(operation: Operation, matrix: Matrix, symbol: str) -> Any:
    if operation is Operation.DETERMINANT:
        return symbolic.determinant(matrix)
    if operation is Operation.INVERSE:
        return symbolic.adjugate(matrix)
    if operation is Operation.TRANSPOSE:
        return symbolic.transpose(matrix)
    if operation is Operation.TRACE:
        return symbolic.trace(matrix)
    return symbolic.characteristic_polynomial(matrix, symbol)


def _evaluate_numeric(operation: Operation, matrix: Matrix, symbol: str) -> Any:
    if operation is Operation.CHARACTERISTIC_POLYNOMIAL:
        # No numeric polynomial backend; expand the literal entries symbolically.
        return symbolic.characteristic_polynomial(matrix, symbol)

    handlers = {
        Operation.DETERMINANT: numeric.determinant,
        Operation.INVERSE: numeric.inverse,
        Operation.TRANSPOSE: numeric.transpose,
        Operation.TRACE: numeric.trace,
        Operation.EIGENVALUES: numeric.eigen,
        Operation.LU: numeric.lu,
        Operation.QR: numeric.qr,
        Operation.RANK: numeric.rank,
    }
    return handlers[operation](matrix)


def evaluate(
    operation: Operation | str,
    matrix: Matrix,
    *,
    symbol: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> CalculationResult:
    """
    Run one unary operation on a matrix.

    Args:
        operation: Operation or its key ("det", "inv", ...)
        matrix: Input matrix of Terms
        symbol: Eigenvalue symbol for the characteristic polynomial
        settings: Application settings (defaults to the cached settings)

    Returns:
        CalculationResult with the operation, the evaluation mode and the value

    Raises:
        EmptyMatrixError, NonSquareMatrixError: Shape preconditions
        UnsupportedSymbolicOperationError: Symbolic matrix, numeric-only operation
        DimensionLimitError: Symbolic matrix larger than MAX_SYMBOLIC_DIMENSION
    """
    settings = settings or get_settings()
    operation = Operation(operation)
    symbol = symbol or settings.CHARACTERISTIC_SYMBOL

    validate(operation, matrix)
    mode = classify(matrix)

    logger.debug(
        "Dispatching matrix operation",
        extra_data={"operation": operation.value, "mode": mode.value, "shape": matrix.shape},
    )

    if mode is Mode.SYMBOLIC and operation not in SYMBOLIC_OPERATIONS:
        raise UnsupportedSymbolicOperationError(operation.value)

    expands = mode is Mode.SYMBOLIC or operation is Operation.CHARACTERISTIC_POLYNOMIAL
    if expands and operation is not Operation.TRANSPOSE:
        if matrix.dimension > settings.MAX_SYMBOLIC_DIMENSION:
            raise DimensionLimitError(matrix.dimension, settings.MAX_SYMBOLIC_DIMENSION)

    if mode is Mode.SYMBOLIC:
        value = _evaluate_symbolic(operation, matrix, symbol)
    else:
        value = _evaluate_numeric(operation, matrix, symbol)

    return CalculationResult(operation=operation, mode=mode, value=value)
