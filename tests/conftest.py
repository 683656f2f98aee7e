"""
Shared pytest fixtures for matrix and expression tests.

This module provides:
- Factories for building matrices from raw tokens
- Fixtures for isolated application settings
- Helpers for comparing expressions against a SymPy oracle
"""

import pytest
import sympy as sp

from matrixmaster.core.config import Settings, get_settings
from matrixmaster.expression.visitors import to_sympy
from matrixmaster.linalg.matrix import Matrix


@pytest.fixture
def matrix_factory():
    """Factory for building matrices from rows of raw tokens."""
    def _factory(*rows: str) -> Matrix:
        """Build a matrix from rows written as "a,b,c"."""
        return Matrix.from_tokens([row.split(",") for row in rows])
    return _factory


@pytest.fixture
def symbol_matrix():
    """Factory for an n x n matrix of distinct symbols a0, a1, ..."""
    def _factory(n: int) -> Matrix:
        return Matrix([[f"a{i * n + j}" for j in range(n)] for i in range(n)])
    return _factory


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Settings isolated from the environment and the settings cache."""
    for name in ("PRECISION", "LOCALE", "MAX_SYMBOLIC_DIMENSION", "CHARACTERISTIC_SYMBOL"):
        monkeypatch.delenv(f"MATRIXMASTER_{name}", raising=False)
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()


@pytest.fixture
def assert_expands_to():
    """Helper asserting that an expression expands to the given SymPy value."""
    def _assert(expression, expected) -> None:
        actual = sp.expand(to_sympy(expression))
        assert sp.expand(actual - sp.expand(expected)) == 0, f"{actual} != {expected}"
    return _assert


@pytest.fixture
def sympy_matrix():
    """Convert a matrix of expressions to a SymPy matrix."""
    def _convert(matrix: Matrix) -> sp.Matrix:
        return sp.Matrix([[to_sympy(cell) for cell in row] for row in matrix.rows])
    return _convert
