"""Tests for array_matrix.errors module."""

from __future__ import annotations

import pytest

from array_matrix import IndexOutOfRangeError, Matrix, MatrixError, ShapeMismatchError
from array_matrix.errors import ERROR_DIMENSION_MISMATCH, ERROR_INDEX_OUT_OF_BOUNDS


class TestMatrixError:
    """Tests for the error hierarchy."""

    def test_base_message(self):
        err = MatrixError()
        assert err.message == "Unknown error"

    def test_detail_appended(self):
        err = ShapeMismatchError("cannot add (1, 2) with (2, 1)")
        assert str(err) == "Dimension mismatch: cannot add (1, 2) with (2, 1)"

    def test_codes(self):
        assert ShapeMismatchError.code == ERROR_DIMENSION_MISMATCH
        assert IndexOutOfRangeError.code == ERROR_INDEX_OUT_OF_BOUNDS

    def test_builtin_bases(self):
        assert issubclass(ShapeMismatchError, ValueError)
        assert issubclass(IndexOutOfRangeError, IndexError)
        assert issubclass(ShapeMismatchError, MatrixError)

    def test_catch_all(self):
        with pytest.raises(MatrixError) as exc_info:
            Matrix([1, 2, 3, 4], 2).get(5, 5)
        assert exc_info.value.code == ERROR_INDEX_OUT_OF_BOUNDS
        assert "(5, 5)" in str(exc_info.value)
