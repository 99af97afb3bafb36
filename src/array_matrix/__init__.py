"""array_matrix: a small generic row-major matrix library.

Modules:
    matrix: The ``Matrix`` type, in-place and allocating transpose,
        elementwise/scalar/matrix arithmetic
    interop: Conversion between ``Matrix`` and ``jax.Array``
    errors: ``ShapeMismatchError`` and ``IndexOutOfRangeError``
    config: Process-wide defaults
"""

from array_matrix.errors import IndexOutOfRangeError, MatrixError, ShapeMismatchError
from array_matrix.matrix import Matrix, MatrixLike

__version__ = "0.1.0"

__all__ = [
    "Matrix",
    "MatrixLike",
    "MatrixError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
]
