"""Tests for the numeric/symbolic mode dispatcher."""

import numpy as np
import pytest

from matrixmaster import dispatch
from matrixmaster.core.config import Settings
from matrixmaster.dispatch import CalculationResult, Mode, Operation, classify, evaluate
from matrixmaster.errors import (
    DimensionLimitError,
    EmptyMatrixError,
    NonSquareMatrixError,
    UnsupportedSymbolicOperationError,
)
from matrixmaster.expression.ast import Expression
from matrixmaster.expression.visitors import render
from matrixmaster.linalg import numeric
from matrixmaster.linalg.matrix import Matrix
from matrixmaster.linalg.minors import MinorView
from matrixmaster.linalg.symbolic import SymbolicInverse


class TestClassify:

    def test_all_numeric(self, matrix_factory):
        assert classify(matrix_factory("1,2.5", "-3,1e2")) is Mode.NUMERIC

    def test_single_symbol_forces_symbolic(self, matrix_factory):
        assert classify(matrix_factory("1,2", "3,x")) is Mode.SYMBOLIC

    def test_non_finite_tokens_are_symbolic(self, matrix_factory):
        assert classify(matrix_factory("1,inf", "3,4")) is Mode.SYMBOLIC


class TestEndToEnd:
    """End-to-end scenarios through the dispatcher."""

    def test_scenario_a_determinant_and_trace(self, matrix_factory, settings):
        matrix = matrix_factory("x,1", "0,x")
        det = evaluate("det", matrix, settings=settings)
        assert det.mode is Mode.SYMBOLIC
        assert render(det.value) == "((x)*(x) - (1)*(0))"
        assert render(evaluate(Operation.TRACE, matrix, settings=settings).value) == "x+x"

    def test_scenario_b_non_square_fails_before_any_work(self, matrix_factory, settings, monkeypatch):
        """Test a 2x3 determinant fails before classification or minors."""
        def fail(*args, **kwargs):
            raise AssertionError("should not be reached")

        monkeypatch.setattr(dispatch, "classify", fail)
        monkeypatch.setattr(MinorView, "without", fail)
        with pytest.raises(NonSquareMatrixError) as exc_info:
            evaluate("det", matrix_factory("a,b,c", "d,e,f"), settings=settings)
        assert exc_info.value.details["rows"] == 2
        assert exc_info.value.details["cols"] == 3

    def test_scenario_c_digits_are_not_evaluated_symbolically(self, matrix_factory, settings):
        """Test the symbolic engine keeps the 1..9 expansion unsimplified."""
        matrix = Matrix([["1", "2", "3"], ["4", "5", "6"], ["7", "8", "9"]])
        value = dispatch._evaluate_symbolic(Operation.DETERMINANT, matrix, "λ")
        assert isinstance(value, Expression)
        assert render(value).count("*") == 9

    def test_symbolic_inverse(self, matrix_factory, settings):
        result = evaluate("inv", matrix_factory("a,b", "c,d"), settings=settings)
        assert isinstance(result.value, SymbolicInverse)

    def test_symbolic_transpose_of_rectangular(self, matrix_factory, settings):
        result = evaluate("transpose", matrix_factory("a,b,c", "1,2,3"), settings=settings)
        assert result.value.shape == (3, 2)

    def test_symbolic_characteristic_polynomial(self, matrix_factory, settings):
        result = evaluate("charpoly", matrix_factory("a,b", "c,d"), symbol="t", settings=settings)
        assert render(result.value) == "((a - t)*(d - t) - (b)*(c))"

    def test_default_symbol_from_settings(self, matrix_factory, settings):
        custom = settings.model_copy(update={"CHARACTERISTIC_SYMBOL": "s"})
        result = evaluate("charpoly", matrix_factory("a"), settings=custom)
        assert render(result.value) == "a - s"


class TestUnsupportedSymbolicOperations:

    @pytest.mark.parametrize("operation", ["eigs", "lu", "qr", "rank"])
    def test_raises_and_never_delegates(self, operation, matrix_factory, settings, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("numeric backend must not be called")

        for name in ("eigen", "lu", "qr", "rank"):
            monkeypatch.setattr(numeric, name, fail)
        with pytest.raises(UnsupportedSymbolicOperationError) as exc_info:
            evaluate(operation, matrix_factory("x,1", "0,x"), settings=settings)
        assert exc_info.value.message == f'Symbolic calculation for "{operation}" is not supported.'


class TestNumericRouting:

    def test_numeric_determinant(self, matrix_factory, settings):
        result = evaluate("det", matrix_factory("1,2", "3,4"), settings=settings)
        assert result.mode is Mode.NUMERIC
        assert result.value == pytest.approx(-2.0)

    def test_numeric_eigenvalues(self, matrix_factory, settings):
        result = evaluate("eigs", matrix_factory("2,0", "0,3"), settings=settings)
        assert sorted(result.value.values.real) == pytest.approx([2.0, 3.0])

    def test_numeric_inverse(self, matrix_factory, settings):
        result = evaluate("inv", matrix_factory("2,0", "0,4"), settings=settings)
        assert np.allclose(result.value, [[0.5, 0.0], [0.0, 0.25]])

    def test_numeric_characteristic_polynomial_is_expanded(self, matrix_factory, settings):
        result = evaluate("charpoly", matrix_factory("1,2", "3,4"), settings=settings)
        assert result.mode is Mode.NUMERIC
        assert render(result.value) == "((1 - λ)*(4 - λ) - (2)*(3))"

    def test_numeric_lu_requires_square(self, matrix_factory, settings):
        with pytest.raises(NonSquareMatrixError):
            evaluate("lu", matrix_factory("1,2,3", "4,5,6"), settings=settings)

    def test_numeric_qr_accepts_rectangular(self, matrix_factory, settings):
        result = evaluate("qr", matrix_factory("1,2", "3,4", "5,6"), settings=settings)
        assert result.value.R.shape == (2, 2)


class TestPreconditions:

    def test_empty_matrix(self, settings):
        with pytest.raises(EmptyMatrixError):
            evaluate("det", Matrix([]), settings=settings)

    def test_empty_matrix_for_transpose(self, settings):
        with pytest.raises(EmptyMatrixError):
            evaluate("transpose", Matrix([]), settings=settings)

    def test_unknown_operation(self, matrix_factory, settings):
        with pytest.raises(ValueError):
            evaluate("pow", matrix_factory("1"), settings=settings)

    def test_dimension_limit(self, symbol_matrix):
        settings = Settings(_env_file=None, MAX_SYMBOLIC_DIMENSION=3)
        with pytest.raises(DimensionLimitError) as exc_info:
            evaluate("det", symbol_matrix(4), settings=settings)
        assert exc_info.value.details == {"dimension": 4, "limit": 3}

    def test_dimension_limit_does_not_apply_to_numeric(self, settings):
        limited = settings.model_copy(update={"MAX_SYMBOLIC_DIMENSION": 2})
        matrix = Matrix([[str(int(i == j)) for j in range(4)] for i in range(4)])
        assert evaluate("det", matrix, settings=limited).value == pytest.approx(1.0)

    def test_result_model(self, matrix_factory, settings):
        result = evaluate("trace", matrix_factory("a,b", "c,d"), settings=settings)
        assert isinstance(result, CalculationResult)
        assert result.operation is Operation.TRACE
