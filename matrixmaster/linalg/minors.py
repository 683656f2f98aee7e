"""
Minor extraction.

A minor is addressed as an index-exclusion mask over the original matrix
buffer: ``MinorView`` keeps the surviving row and column indices and reads
entries straight from the source rows, so recursive expansion never copies
Terms. ``minor()`` materializes a view into a standalone ``Matrix``.
"""

from __future__ import annotations

from dataclasses import dataclass

from matrixmaster.errors import DimensionError
from matrixmaster.expression.ast import Expression

from .matrix import Matrix


@dataclass(frozen=True)
class MinorView:
    """Square sub-matrix of ``buffer`` selected by row and column indices."""

    buffer: tuple[tuple[Expression, ...], ...]
    row_indices: tuple[int, ...]
    col_indices: tuple[int, ...]

    @classmethod
    def of(cls, matrix: Matrix) -> "MinorView":
        rows, cols = matrix.shape
        return cls(matrix.rows, tuple(range(rows)), tuple(range(cols)))

    @property
    def size(self) -> int:
        return len(self.row_indices)

    def entry(self, row: int, col: int) -> Expression:
        return self.buffer[self.row_indices[row]][self.col_indices[col]]

    def without(self, row: int, col: int) -> "MinorView":
        """Drop one row and one column (positions relative to this view)."""
        if self.size < 2:
            raise DimensionError("A minor needs a matrix of dimension 2 or more.")
        if not (0 <= row < self.size and 0 <= col < len(self.col_indices)):
            raise IndexError(f"Minor position ({row}, {col}) out of range")

        return MinorView(
            self.buffer,
            self.row_indices[:row] + self.row_indices[row + 1:],
            self.col_indices[:col] + self.col_indices[col + 1:],
        )

    def to_matrix(self) -> Matrix:
        return Matrix([[self.buffer[i][j] for j in self.col_indices] for i in self.row_indices])


def minor(matrix: Matrix, row: int, col: int) -> Matrix:
    """
    Return the (n-1)x(n-1) matrix with ``row`` and ``col`` removed.

    Raises:
        DimensionError: If the matrix has fewer than 2 rows
        IndexError: If ``row`` or ``col`` is out of range
    """
    return MinorView.of(matrix).without(row, col).to_matrix()
