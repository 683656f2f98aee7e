"""
Immutable matrix of expressions.

Caller-built matrices hold Terms only (``Literal`` or ``Symbol``); matrices
produced by the evaluator (cofactors, adjugates, characteristic matrices) hold
arbitrary expressions.
"""

from __future__ import annotations

import math
import re
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from matrixmaster.errors import DimensionError, MissingEntryError
from matrixmaster.expression.ast import Expression, Literal, Symbol, Term
from matrixmaster.expression.visitors import StringVisitor

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def is_finite_real(token: str) -> bool:
    """
    Check whether a raw token is a finite real number.

    Only plain decimal literals qualify ("3", "-0.5", "1e3"); "inf", "nan",
    hex literals and values that overflow a float do not.
    """
    token = token.strip()
    if not _DECIMAL.fullmatch(token):
        return False
    return math.isfinite(float(token))


def make_term(token: str) -> Term:
    """Build a Term from a non-empty raw token."""
    token = token.strip()
    if not token:
        raise ValueError("Term tokens must be non-empty")
    if is_finite_real(token):
        return Literal(token)
    return Symbol(token)


class Matrix(BaseModel):
    """
    Ordered grid of expressions (row-major).

    Rows must all have the same length; rectangular matrices are allowed so
    that shape validation can happen at the dispatcher.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    rows: tuple[tuple[Expression, ...], ...] = Field(default_factory=tuple)

    def __init__(self, rows: Iterable[Iterable[Any]] = (), **kwargs: Any) -> None:
        super().__init__(rows=rows, **kwargs)

    @field_validator("rows", mode="before")
    @classmethod
    def _validate_rows(cls, value: Any) -> tuple[tuple[Expression, ...], ...]:
        if value is None:
            return ()
        if isinstance(value, Matrix):
            return value.rows
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise TypeError("Matrix rows must be iterable sequences")

        normalized: list[tuple[Expression, ...]] = []
        for row in value:
            if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
                raise TypeError("Matrix rows must be iterable sequences")
            normalized.append(tuple(cls._coerce_cell(cell) for cell in row))

        if normalized:
            row_len = len(normalized[0])
            if not all(len(row) == row_len for row in normalized):
                raise ValueError("Matrix rows must all have same length")
        return tuple(normalized)

    @staticmethod
    def _coerce_cell(cell: Any) -> Any:
        if isinstance(cell, str):
            return make_term(cell)
        if isinstance(cell, (int, float)) and not isinstance(cell, bool):
            return make_term(str(cell))
        return cell

    @classmethod
    def from_tokens(cls, grid: Iterable[Iterable[str]], name: str = "Matrix") -> "Matrix":
        """
        Build a matrix from raw input tokens.

        Args:
            grid: Rows of raw string tokens
            name: Label used in error messages

        Returns:
            Matrix of Terms

        Raises:
            MissingEntryError: If a token is empty after stripping
            DimensionError: If the rows differ in length
        """
        rows = []
        for i, raw_row in enumerate(grid, start=1):
            row = []
            for j, token in enumerate(raw_row, start=1):
                token = str(token).strip()
                if token == "":
                    raise MissingEntryError(i, j, name)
                row.append(make_term(token))
            if rows and len(row) != len(rows[0]):
                raise DimensionError(
                    f"{name} row {i} has {len(row)} entries, expected {len(rows[0])}.",
                    details={"row": i, "entries": len(row), "expected": len(rows[0])},
                )
            rows.append(row)
        return cls(rows)

    @property
    def shape(self) -> tuple[int, int]:
        """Get matrix dimensions (rows, cols)."""
        if len(self.rows) == 0:
            return (0, 0)
        return (len(self.rows), len(self.rows[0]))

    @property
    def dimension(self) -> int:
        """Row count; the dimension n of a square matrix."""
        return len(self.rows)

    @property
    def is_square(self) -> bool:
        rows, cols = self.shape
        return rows == cols

    @property
    def is_empty(self) -> bool:
        rows, cols = self.shape
        return rows == 0 or cols == 0

    def entry(self, row: int, col: int) -> Expression:
        return self.rows[row][col]

    def __getitem__(self, index: tuple[int, int] | int) -> Any:
        """Get element by (row, col) or an entire row."""
        if isinstance(index, tuple):
            row, col = index
            return self.rows[row][col]
        return self.rows[index]

    def __len__(self) -> int:
        return len(self.rows)

    def diagonal(self) -> tuple[Expression, ...]:
        """Diagonal entries in order (square part only)."""
        rows, cols = self.shape
        return tuple(self.rows[i][i] for i in range(min(rows, cols)))

    def transpose(self) -> Matrix:
        """Pure re-indexing; no arithmetic is performed."""
        if len(self.rows) == 0:
            return Matrix([])

        n_cols = len(self.rows[0])
        return Matrix([[row[j] for row in self.rows] for j in range(n_cols)])

    def to_tokens(self) -> list[list[str]]:
        """Render every entry to its plain-text form."""
        visitor = StringVisitor()
        return [[cell.accept(visitor) for cell in row] for row in self.rows]

    def __str__(self) -> str:
        rows_str = ", ".join("[" + ", ".join(row) + "]" for row in self.to_tokens())
        return f"[{rows_str}]"
