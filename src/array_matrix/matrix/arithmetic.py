"""Arithmetic recipes for row-major matrices.

Functional forms of the matrix operators. Each recipe validates its
operands first and only then computes, and always returns a new matrix;
the in-place operators on ``Matrix`` reuse these and copy the result
into the receiver.

The recipes are generic over the element type: they only use ``+``,
``-``, ``*``, ``/`` and ``//`` of the elements themselves, so rounding,
overflow and division by zero behave exactly as the element type
defines them.

References:
    - Python data model, emulating numeric types:
      https://docs.python.org/3/reference/datamodel.html#emulating-numeric-types
    - JAX equivalent: jax.numpy.matmul, jax.numpy.add

"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable
from typing import Any

from array_matrix.errors import ShapeMismatchError
from array_matrix.matrix.protocols import MatrixLike

logger = logging.getLogger(__name__)


def _shape(m: MatrixLike) -> tuple[int, int]:
    return (m.row_len(), m.column_len())


def _read_flat(m: MatrixLike) -> list[Any]:
    # Row-major through indexed reads; MatrixLike guarantees nothing else.
    rows, cols = _shape(m)
    return [m[i, j] for i in range(rows) for j in range(cols)]


def check_same_shape(a: MatrixLike, b: MatrixLike, op_name: str = "combine") -> None:
    """Raise ``ShapeMismatchError`` unless ``a`` and ``b`` share a shape.

    Examples:
        >>> from array_matrix import Matrix
        >>> check_same_shape(Matrix([1, 2], 1), Matrix([3, 4], 2))
        Traceback (most recent call last):
        ...
        array_matrix.errors.ShapeMismatchError: Dimension mismatch: cannot combine (1, 2) with (2, 1)

    """
    if _shape(a) != _shape(b):
        raise ShapeMismatchError(f"cannot {op_name} {_shape(a)} with {_shape(b)}")


def check_multiply_shapes(a: MatrixLike, b: MatrixLike) -> None:
    """Validate operands of ``matmul``.

    The left row length must equal the right column length. On top of
    that, the product is stored in a matrix shaped like ``a``, which
    only holds the true ``(a.rows, b.cols)`` product when both operands
    are square and of the same order. Every other combination is
    rejected instead of producing a wrongly shaped result.

    Raises:
        ShapeMismatchError: If the shapes cannot be multiplied.

    """
    if a.row_len() != b.column_len():
        raise ShapeMismatchError(
            f"cannot multiply {_shape(a)} by {_shape(b)}: "
            f"left row length {a.row_len()} != right column length {b.column_len()}"
        )
    if a.column_len() != b.row_len() or a.column_len() != b.column_len():
        raise ShapeMismatchError(
            f"cannot multiply {_shape(a)} by {_shape(b)}: "
            "only square operands of the same order are supported"
        )


def _elementwise(a, b: MatrixLike, op: Callable[[Any, Any], Any], op_name: str):
    check_same_shape(a, b, op_name)
    other = b.to_list() if isinstance(b, type(a)) else _read_flat(b)
    elements = [op(x, y) for x, y in zip(a.to_list(), other)]
    return type(a).from_flat(elements, a.row_len())


def _broadcast(a, scalar: Any, op: Callable[[Any, Any], Any], reflected: bool = False):
    if reflected:
        elements = [op(scalar, x) for x in a.to_list()]
    else:
        elements = [op(x, scalar) for x in a.to_list()]
    return type(a).from_flat(elements, a.row_len())


def elementwise_add(a, b: MatrixLike):
    """Elementwise sum of two same-shaped matrices.

    Args:
        a: Left matrix.
        b: Right operand, any ``MatrixLike`` with the same shape.

    Returns:
        New matrix with ``result[i, j] == a[i, j] + b[i, j]``.

    Raises:
        ShapeMismatchError: If the shapes differ.

    Examples:
        >>> from array_matrix import Matrix
        >>> elementwise_add(Matrix([1, 2, 3, 4], 2), Matrix([1, 2, 3, 4], 2))
        Matrix([2, 4, 6, 8], row_len=2)

    """
    return _elementwise(a, b, operator.add, "add")


def elementwise_sub(a, b: MatrixLike):
    """Elementwise difference of two same-shaped matrices.

    Examples:
        >>> from array_matrix import Matrix
        >>> elementwise_sub(Matrix([1, 2, 3, 4], 2), Matrix([1, 2, 3, 4], 2))
        Matrix([0, 0, 0, 0], row_len=2)

    """
    return _elementwise(a, b, operator.sub, "subtract")


def scalar_add(a, scalar: Any, reflected: bool = False):
    """Add ``scalar`` to every element.

    Args:
        a: Matrix to broadcast over.
        scalar: Value of the element type.
        reflected: Compute ``scalar + x`` instead of ``x + scalar``.

    Examples:
        >>> from array_matrix import Matrix
        >>> scalar_add(Matrix([1, 2, 3, 4], 2), 1)
        Matrix([2, 3, 4, 5], row_len=2)

    """
    return _broadcast(a, scalar, operator.add, reflected)


def scalar_sub(a, scalar: Any, reflected: bool = False):
    """Subtract ``scalar`` from every element (or every element from it).

    Examples:
        >>> from array_matrix import Matrix
        >>> scalar_sub(Matrix([1, 2, 3, 4], 2), 1)
        Matrix([0, 1, 2, 3], row_len=2)
        >>> scalar_sub(Matrix([1, 2, 3, 4], 2), 10, reflected=True)
        Matrix([9, 8, 7, 6], row_len=2)

    """
    return _broadcast(a, scalar, operator.sub, reflected)


def scalar_mul(a, scalar: Any, reflected: bool = False):
    """Multiply every element by ``scalar``.

    Examples:
        >>> from array_matrix import Matrix
        >>> scalar_mul(Matrix([1, 2, 3, 4], 2), 3)
        Matrix([3, 6, 9, 12], row_len=2)

    """
    return _broadcast(a, scalar, operator.mul, reflected)


def scalar_div(a, scalar: Any):
    """True-divide every element by ``scalar``.

    No zero check is made: ``int`` and ``float`` elements raise
    ``ZeroDivisionError``, numpy/JAX scalars yield inf or nan.

    Examples:
        >>> from array_matrix import Matrix
        >>> scalar_div(Matrix([9.0, 12.0, 21.0, 36.0], 2), 3.0)
        Matrix([3.0, 4.0, 7.0, 12.0], row_len=2)

    """
    return _broadcast(a, scalar, operator.truediv)


def scalar_floordiv(a, scalar: Any):
    """Floor-divide every element by ``scalar`` (integer division).

    Examples:
        >>> from array_matrix import Matrix
        >>> scalar_floordiv(Matrix([9, 12, 21, 36], 2), 3)
        Matrix([3, 4, 7, 12], row_len=2)

    """
    return _broadcast(a, scalar, operator.floordiv)


def matmul(a, b: MatrixLike):
    """Matrix product ``a x b``.

    Each entry is accumulated left to right, starting from
    ``a[i, 0] * b[0, j]`` and adding ``a[i, k] * b[k, j]`` for
    ``k = 1 .. b.row_len() - 1``. No pairwise or compensated summation.

    Args:
        a: Left matrix. The result has the same shape and type.
        b: Right operand, any ``MatrixLike`` with matching element type.

    Returns:
        New matrix holding the product.

    Raises:
        ShapeMismatchError: See ``check_multiply_shapes``.

    Examples:
        >>> from array_matrix import Matrix
        >>> a = Matrix([1, 2, 3, 4], 2)
        >>> matmul(a, a)
        Matrix([7, 10, 15, 22], row_len=2)

    """
    check_multiply_shapes(a, b)
    rows, cols = a.size()
    inner = b.row_len()
    logger.debug("multiplying %s by %s", (rows, cols), _shape(b))

    elements = []
    for p in range(rows * cols):
        i, j = divmod(p, cols)
        acc = a[i, 0] * b[0, j]
        for k in range(1, inner):
            acc += a[i, k] * b[k, j]
        elements.append(acc)
    return type(a).from_flat(elements, rows)
