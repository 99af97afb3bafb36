"""Conversion recipes between ``Matrix`` and ``jax.Array``.

``to_array`` / ``from_array`` copy data across the boundary.
``ArrayView`` wraps a 2D array as a read-only ``MatrixLike`` so it can
be used directly as the right-hand operand of matrix arithmetic.

References:
    - JAX NumPy API: https://jax.readthedocs.io/en/latest/jax.numpy.html
    - Default dtypes and x64 mode:
      https://jax.readthedocs.io/en/latest/default_dtypes.html

"""

from __future__ import annotations

from typing import Any

import jax.numpy as jnp
from jax import Array

from array_matrix.config import get_default_dtype
from array_matrix.errors import IndexOutOfRangeError, ShapeMismatchError
from array_matrix.matrix import Matrix


def _as_matrix_array(x: Any) -> Array:
    x = jnp.asarray(x)
    if x.ndim != 2 or x.size == 0:
        raise ShapeMismatchError(f"expected a non-empty 2D array, got shape {x.shape}")
    return x


def to_array(m: Matrix, dtype: jnp.dtype | None = None) -> Array:
    """Copy a matrix into a JAX array of shape ``m.size()``.

    Args:
        m: Source matrix. Elements must be numeric.
        dtype: Target dtype. Default: ``config.get_default_dtype()``
            (``jnp.float32`` unless configured otherwise).

    Returns:
        JAX array on the default device.

    Examples:
        >>> a = to_array(Matrix([1, 2, 3, 4, 5, 6], 2))
        >>> a.shape
        (2, 3)
        >>> a.dtype
        dtype('float32')

    """
    if dtype is None:
        dtype = get_default_dtype()
    return jnp.array(m.rows(), dtype=dtype)


def from_array(x: Array) -> Matrix:
    """Copy a 2D array into a new ``Matrix`` of Python scalars.

    Args:
        x: 2D array (or anything ``jnp.asarray`` accepts).

    Returns:
        Matrix with the same shape and row-major element order.

    Raises:
        ShapeMismatchError: If ``x`` is not a non-empty 2D array.

    Examples:
        >>> import jax.numpy as jnp
        >>> from_array(jnp.array([[1, 2], [3, 4]]))
        Matrix([1, 2, 3, 4], row_len=2)

    """
    x = _as_matrix_array(x)
    return Matrix(x.reshape(-1).tolist(), x.shape[0])


class ArrayView:
    """Read-only ``MatrixLike`` over a 2D JAX array.

    Values are pulled to the host once, at construction, and read back
    as Python scalars.

    Examples:
        >>> import jax.numpy as jnp
        >>> m = Matrix([1, 2, 3, 4], 2)
        >>> m * ArrayView(jnp.eye(2, dtype=jnp.int32))
        Matrix([1, 2, 3, 4], row_len=2)

    """

    __slots__ = ("_array", "_rows")

    def __init__(self, x: Array):
        self._array = _as_matrix_array(x)
        self._rows = self._array.tolist()

    @property
    def array(self) -> Array:
        """The wrapped array."""
        return self._array

    def row_len(self) -> int:
        return self._array.shape[0]

    def column_len(self) -> int:
        return self._array.shape[1]

    def size(self) -> tuple[int, int]:
        return self._array.shape

    def __getitem__(self, index: tuple[int, int]) -> Any:
        i, j = index
        if not (0 <= i < self.row_len() and 0 <= j < self.column_len()):
            raise IndexOutOfRangeError(f"{(i, j)} outside array of shape {self.size()}")
        return self._rows[i][j]

    def __repr__(self) -> str:
        return f"ArrayView(shape={self.size()}, dtype={self._array.dtype})"
