"""Tests for minor extraction."""

import pytest

from matrixmaster.errors import DimensionError
from matrixmaster.linalg.matrix import Matrix
from matrixmaster.linalg.minors import MinorView, minor


class TestMinor:

    def test_minor_removes_row_and_column(self, matrix_factory):
        matrix = matrix_factory("a,b,c", "d,e,f", "g,h,i")
        assert minor(matrix, 0, 1).to_tokens() == [["d", "f"], ["g", "i"]]
        assert minor(matrix, 2, 2).to_tokens() == [["a", "b"], ["d", "e"]]

    def test_minor_of_two_by_two_is_one_by_one(self, matrix_factory):
        matrix = matrix_factory("a,b", "c,d")
        assert minor(matrix, 1, 0).to_tokens() == [["b"]]

    def test_minor_shape(self, symbol_matrix):
        for n in range(2, 6):
            assert minor(symbol_matrix(n), 0, 0).shape == (n - 1, n - 1)

    def test_minor_of_one_by_one_rejected(self):
        with pytest.raises(DimensionError):
            minor(Matrix([["x"]]), 0, 0)

    def test_out_of_range_position_rejected(self, matrix_factory):
        with pytest.raises(IndexError):
            minor(matrix_factory("a,b", "c,d"), 2, 0)

    def test_source_matrix_unchanged(self, matrix_factory):
        matrix = matrix_factory("a,b", "c,d")
        minor(matrix, 0, 0)
        assert matrix.to_tokens() == [["a", "b"], ["c", "d"]]


class TestMinorView:
    """Test index-exclusion views over the source buffer."""

    def test_nested_views_index_the_original_buffer(self, matrix_factory):
        matrix = matrix_factory("a,b,c", "d,e,f", "g,h,i")
        view = MinorView.of(matrix).without(0, 0).without(0, 1)
        assert view.row_indices == (2,)
        assert view.col_indices == (1,)
        assert view.entry(0, 0) == matrix[2, 1]

    def test_view_shares_the_buffer(self, matrix_factory):
        matrix = matrix_factory("a,b,c", "d,e,f", "g,h,i")
        view = MinorView.of(matrix).without(1, 1)
        assert view.buffer is matrix.rows
        assert view.size == 2

    def test_to_matrix_matches_minor(self, symbol_matrix):
        matrix = symbol_matrix(4)
        assert MinorView.of(matrix).without(2, 1).to_matrix() == minor(matrix, 2, 1)
