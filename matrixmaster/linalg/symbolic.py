"""
Symbolic linear algebra over matrices of opaque terms.

Determinants are computed by Laplace (cofactor) expansion along the first row,
producing an unsimplified expression tree. The adjugate, characteristic
polynomial and trace are built on the same expansion. No algebra library is
involved and no expression is ever simplified or evaluated.

Cost is O(n!) with no reuse of minors between sibling branches; callers are
expected to bound n (see ``Settings.MAX_SYMBOLIC_DIMENSION``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from matrixmaster.errors import EmptyMatrixError, InvalidSymbolError, NonSquareMatrixError
from matrixmaster.expression.ast import BinaryOp, Expression, Group, Literal, Negate, Sum, Symbol

from .matrix import Matrix, is_finite_real
from .minors import MinorView


class SymbolicInverse(BaseModel):
    """
    Inverse of a symbolic matrix, kept as ``adjugate / determinant``.

    The division is left to the caller, and the determinant is never checked
    for being identically zero.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    determinant: Expression
    adjugate: Matrix


def _require_square(matrix: Matrix, operation: str) -> None:
    if matrix.is_empty:
        raise EmptyMatrixError(operation)
    rows, cols = matrix.shape
    if rows != cols:
        raise NonSquareMatrixError(rows, cols, operation)


def _product(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp(Group(left), "*", Group(right))


def _expand(view: MinorView) -> Expression:
    n = view.size
    if n == 1:
        return view.entry(0, 0)

    if n == 2:
        return Group(
            BinaryOp(
                _product(view.entry(0, 0), view.entry(1, 1)),
                "-",
                _product(view.entry(0, 1), view.entry(1, 0)),
            )
        )

    expansion: Expression | None = None
    for j in range(n):
        sign = "+" if j % 2 == 0 else "-"
        term = _product(view.entry(0, j), _expand(view.without(0, j)))
        if expansion is None:
            expansion = term if sign == "+" else Negate(term)
        else:
            expansion = BinaryOp(expansion, sign, term)
    return Group(expansion)


def determinant(matrix: Matrix) -> Expression:
    """
    Compute the symbolic determinant of a square matrix.

    Args:
        matrix: Square matrix, n >= 1

    Returns:
        The sole entry for n == 1, ``(a*d) - (b*c)`` for n == 2, and the
        signed first-row cofactor expansion for n >= 3

    Raises:
        EmptyMatrixError: If the matrix has dimension 0
        NonSquareMatrixError: If rows != columns
    """
    _require_square(matrix, "det")
    return _expand(MinorView.of(matrix))


def cofactor(matrix: Matrix, row: int, col: int) -> Expression:
    """Signed minor determinant; negated iff ``row + col`` is odd."""
    _require_square(matrix, "inv")
    view = MinorView.of(matrix)
    if not (0 <= row < view.size and 0 <= col < view.size):
        raise IndexError(f"Cofactor position ({row}, {col}) out of range")
    if view.size == 1:
        return Literal("1")

    value = Group(_expand(view.without(row, col)))
    if (row + col) % 2 == 1:
        return Negate(value)
    return value


def cofactor_matrix(matrix: Matrix) -> Matrix:
    """Build the n x n matrix of cofactors."""
    _require_square(matrix, "inv")
    n = matrix.dimension
    return Matrix([[cofactor(matrix, i, j) for j in range(n)] for i in range(n)])


def adjugate(matrix: Matrix) -> SymbolicInverse:
    """
    Compute the determinant and the adjugate (transposed cofactor matrix).

    The inverse is ``adjugate / determinant``; forming and validating that
    division is up to the caller.
    """
    _require_square(matrix, "inv")
    return SymbolicInverse(
        determinant=determinant(matrix),
        adjugate=cofactor_matrix(matrix).transpose(),
    )


def characteristic_matrix(matrix: Matrix, symbol: str = "λ") -> Matrix:
    """Return ``matrix`` with ``symbol`` subtracted from each diagonal entry."""
    _require_square(matrix, "charpoly")
    symbol = symbol.strip()
    if not symbol or is_finite_real(symbol):
        raise InvalidSymbolError(symbol)

    scalar = Symbol(symbol)
    return Matrix(
        [
            [BinaryOp(cell, "-", scalar) if i == j else cell for j, cell in enumerate(row)]
            for i, row in enumerate(matrix.rows)
        ]
    )


def characteristic_polynomial(matrix: Matrix, symbol: str = "λ") -> Expression:
    """det(A - symbol*I), unexpanded."""
    return determinant(characteristic_matrix(matrix, symbol))


def trace(matrix: Matrix) -> Expression:
    """Unsimplified sum of the diagonal entries."""
    _require_square(matrix, "trace")
    diagonal = matrix.diagonal()
    if len(diagonal) == 1:
        return diagonal[0]
    return Sum(diagonal)


def transpose(matrix: Matrix) -> Matrix:
    return matrix.transpose()
