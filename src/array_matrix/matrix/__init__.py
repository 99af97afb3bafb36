"""Generic row-major matrix type and its arithmetic.

A ``Matrix`` is a fixed-shape 2D container over any element type that
supports the arithmetic being invoked. Operators work across element
types (int, float, Fraction, numpy scalars, ...) and accept any
``MatrixLike`` right-hand operand.
"""

from array_matrix.matrix.arithmetic import (
    check_multiply_shapes,
    check_same_shape,
    elementwise_add,
    elementwise_sub,
    matmul,
    scalar_add,
    scalar_div,
    scalar_floordiv,
    scalar_mul,
    scalar_sub,
)
from array_matrix.matrix.core import Matrix
from array_matrix.matrix.protocols import MatrixLike

__all__ = [
    "Matrix",
    "MatrixLike",
    "elementwise_add",
    "elementwise_sub",
    "scalar_add",
    "scalar_sub",
    "scalar_mul",
    "scalar_div",
    "scalar_floordiv",
    "matmul",
    "check_same_shape",
    "check_multiply_shapes",
]
