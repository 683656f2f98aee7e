"""
Linear algebra package.

- matrix: immutable matrix of terms and the numeric-token classifier
- minors: minor extraction over index-exclusion masks
- symbolic: determinant, adjugate, characteristic polynomial and trace by cofactor expansion
- numeric: NumPy/SciPy backend for all-numeric matrices
"""

from .matrix import Matrix, is_finite_real, make_term
from .minors import MinorView, minor
from .symbolic import (
    SymbolicInverse,
    adjugate,
    characteristic_matrix,
    characteristic_polynomial,
    cofactor,
    cofactor_matrix,
    determinant,
    trace,
    transpose,
)

__all__ = [
    "Matrix",
    "is_finite_real",
    "make_term",
    "MinorView",
    "minor",
    "SymbolicInverse",
    "determinant",
    "cofactor",
    "cofactor_matrix",
    "adjugate",
    "characteristic_matrix",
    "characteristic_polynomial",
    "trace",
    "transpose",
]
