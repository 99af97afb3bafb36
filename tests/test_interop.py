"""Tests for array_matrix.interop module."""

from __future__ import annotations

import jax.numpy as jnp
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from array_matrix import IndexOutOfRangeError, Matrix, MatrixLike, ShapeMismatchError
from array_matrix.interop import ArrayView, from_array, to_array


@st.composite
def int_matrices(draw, square=False, max_side=6):
    rows = draw(st.integers(min_value=1, max_value=max_side))
    cols = rows if square else draw(st.integers(min_value=1, max_value=max_side))
    data = draw(st.lists(st.integers(-10, 10), min_size=rows * cols, max_size=rows * cols))
    return Matrix(data, rows)


class TestToArray:
    """Tests for to_array."""

    def test_shape(self):
        a = to_array(Matrix([1, 2, 3, 4, 5, 6], 2))
        assert a.shape == (2, 3)

    def test_default_dtype(self):
        a = to_array(Matrix([1, 2, 3, 4], 2))
        assert a.dtype == jnp.float32

    def test_explicit_dtype(self):
        a = to_array(Matrix([1, 2, 3, 4], 2), dtype=jnp.int32)
        assert a.dtype == jnp.int32
        assert a.tolist() == [[1, 2], [3, 4]]

    def test_row_major_layout(self):
        a = to_array(Matrix([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], 3))
        assert float(a[2, 0]) == 5.0
        assert float(a[0, 1]) == 2.0


class TestFromArray:
    """Tests for from_array."""

    def test_basic(self):
        m = from_array(jnp.array([[1, 2], [3, 4]]))
        assert m == Matrix([1, 2, 3, 4], 2)

    def test_python_scalars(self):
        m = from_array(jnp.ones((2, 3)))
        assert m.size() == (2, 3)
        assert all(isinstance(x, float) for x in m)

    def test_accepts_nested_lists(self):
        assert from_array([[1, 2, 3]]) == Matrix([1, 2, 3], 1)

    def test_rejects_1d(self):
        with pytest.raises(ShapeMismatchError):
            from_array(jnp.ones(4))

    def test_rejects_empty(self):
        with pytest.raises(ShapeMismatchError):
            from_array(jnp.ones((0, 3)))

    def test_preserves_values(self):
        m = Matrix([1.5, -2.0, 0.25, 4.0], 2)
        assert from_array(to_array(m)) == m


class TestArrayView:
    """Tests for ArrayView."""

    def test_is_matrix_like(self):
        assert isinstance(ArrayView(jnp.eye(2)), MatrixLike)

    def test_shape_and_read(self):
        view = ArrayView(jnp.array([[1, 2, 3], [4, 5, 6]]))
        assert view.row_len() == 2
        assert view.column_len() == 3
        assert view[1, 0] == 4

    def test_out_of_bounds(self):
        view = ArrayView(jnp.eye(2))
        with pytest.raises(IndexOutOfRangeError):
            view[2, 0]

    def test_rejects_3d(self):
        with pytest.raises(ShapeMismatchError):
            ArrayView(jnp.ones((2, 2, 2)))

    def test_as_multiply_operand(self):
        m = Matrix([1, 2, 3, 4], 2)
        assert m * ArrayView(jnp.array([[1, 2], [3, 4]])) == Matrix([7, 10, 15, 22], 2)

    def test_as_add_operand(self):
        m = Matrix([1, 2, 3, 4], 2)
        assert m + ArrayView(jnp.array([[1, 1], [1, 1]])) == Matrix([2, 3, 4, 5], 2)

    def test_left_operand_unsupported(self):
        m = Matrix([1, 2, 3, 4], 2)
        with pytest.raises(TypeError):
            ArrayView(jnp.eye(2)) * m

    def test_multiply_shape_checked(self):
        with pytest.raises(ShapeMismatchError):
            Matrix.identity(2) * ArrayView(jnp.eye(3))


class TestAgainstJaxNumpy:
    """Cross-checks against jax.numpy as the reference implementation."""

    @given(int_matrices())
    @settings(max_examples=10)
    def test_transpose_property(self, m):
        """Property: to_array(M.T) == to_array(M).T."""
        expected = jnp.transpose(to_array(m, dtype=jnp.int32))
        assert jnp.array_equal(to_array(m.transpose(), dtype=jnp.int32), expected)

    @given(int_matrices(square=True))
    @settings(max_examples=10)
    def test_transpose_mut_property(self, m):
        expected = jnp.transpose(to_array(m, dtype=jnp.int32))
        m.transpose_mut()
        assert jnp.array_equal(to_array(m, dtype=jnp.int32), expected)

    @given(int_matrices(square=True, max_side=5), st.data())
    @settings(max_examples=10)
    def test_matmul_property(self, a, data):
        """Property: A * B agrees with jnp.matmul for square operands."""
        n = a.row_len()
        values = data.draw(st.lists(st.integers(-10, 10), min_size=n * n, max_size=n * n))
        b = Matrix(values, n)
        expected = jnp.matmul(to_array(a, dtype=jnp.int32), to_array(b, dtype=jnp.int32))
        assert jnp.array_equal(to_array(a * b, dtype=jnp.int32), expected)

    @given(int_matrices(), st.integers(-10, 10))
    @settings(max_examples=10)
    def test_scalar_broadcast_property(self, m, s):
        expected = to_array(m, dtype=jnp.int32) + s
        assert jnp.array_equal(to_array(m + s, dtype=jnp.int32), expected)
