"""
Matrix evaluation exceptions.

Every error is terminal for the requested operation: the engine never retries,
never returns a partial result and never falls back to another code path.
"""

from typing import Any, Dict, Optional


class MatrixError(Exception):
    """Base exception for matrix evaluation errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NonSquareMatrixError(MatrixError):
    """Raised when an operation requiring a square matrix gets rows != columns"""

    def __init__(self, rows: int, cols: int, operation: Optional[str] = None):
        label = f'Operation "{operation}"' if operation else "Operation"
        super().__init__(
            message=f"{label} requires a square matrix (got {rows}x{cols}).",
            details={"rows": rows, "cols": cols, "operation": operation},
        )


class EmptyMatrixError(MatrixError):
    """Raised when a matrix has dimension 0"""

    def __init__(self, operation: Optional[str] = None):
        super().__init__(
            message="Matrix must have at least one row and one column.",
            details={"operation": operation} if operation else {},
        )


class UnsupportedSymbolicOperationError(MatrixError):
    """Raised when a symbolic matrix is routed to an operation with no symbolic implementation"""

    def __init__(self, operation: str):
        super().__init__(
            message=f'Symbolic calculation for "{operation}" is not supported.',
            details={"operation": operation},
        )


class MissingEntryError(MatrixError):
    """Raised when an input cell is empty (row and column are 1-based)"""

    def __init__(self, row: int, col: int, name: str = "Matrix"):
        super().__init__(
            message=f"{name} has an empty cell at ({row},{col}).",
            details={"row": row, "col": col},
        )


class DimensionError(MatrixError):
    """Raised when a matrix is too small for the requested structural operation"""


class DimensionLimitError(MatrixError):
    """Raised when a symbolic expansion would exceed the configured dimension limit"""

    def __init__(self, dimension: int, limit: int):
        super().__init__(
            message=(
                f"Symbolic expansion is limited to {limit}x{limit} matrices "
                f"(got {dimension}x{dimension})."
            ),
            details={"dimension": dimension, "limit": limit},
        )


class SingularMatrixError(MatrixError):
    """Raised when a numeric matrix has no inverse"""

    def __init__(self, message: str = "Matrix is singular (not invertible)."):
        super().__init__(message=message)


class ShapeMismatchError(MatrixError):
    """Raised when two operands have incompatible shapes"""

    def __init__(self, left: tuple[int, int], right: tuple[int, int], operation: str):
        super().__init__(
            message=f'Shapes {left} and {right} are incompatible for "{operation}".',
            details={"left": left, "right": right, "operation": operation},
        )


class SymbolicInputError(MatrixError):
    """Raised when a numeric-only operation receives symbolic entries"""

    def __init__(self, message: str = "Equation solver requires all elements to be numbers."):
        super().__init__(message=message)


class InvalidSymbolError(MatrixError, ValueError):
    """Raised when the characteristic-polynomial symbol is blank or numeric"""

    def __init__(self, symbol: str):
        super().__init__(
            message=f"Characteristic symbol must be a non-numeric token, got {symbol!r}.",
            details={"symbol": symbol},
        )
