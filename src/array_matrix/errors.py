"""Error types for array_matrix.

Every failure is a precondition violation: the operation checks its
operands before touching any element, so a rejected call leaves the
receiver unchanged.

Error codes:
    11: Dimension mismatch (``ShapeMismatchError``)
    14: Index out of bounds (``IndexOutOfRangeError``)

"""

from __future__ import annotations

ERROR_UNKNOWN = 1
ERROR_DIMENSION_MISMATCH = 11
ERROR_INDEX_OUT_OF_BOUNDS = 14

_ERROR_MESSAGES = {
    ERROR_UNKNOWN: "Unknown error",
    ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
}


class MatrixError(Exception):
    """Base exception for all matrix errors.

    Args:
        message: Detail appended to the default message for ``code``.

    Examples:
        >>> err = MatrixError("bad input")
        >>> err.code
        1
        >>> str(err)
        'Unknown error: bad input'

    """

    code = ERROR_UNKNOWN

    def __init__(self, message: str | None = None):
        base = _ERROR_MESSAGES.get(self.code, f"Unknown error (code={self.code})")
        self.message = f"{base}: {message}" if message else base
        super().__init__(self.message)


class ShapeMismatchError(MatrixError, ValueError):
    """Operands (or a construction request) disagree on dimensions."""

    code = ERROR_DIMENSION_MISMATCH


class IndexOutOfRangeError(MatrixError, IndexError):
    """A coordinate falls outside ``[0, rows) x [0, cols)``."""

    code = ERROR_INDEX_OUT_OF_BOUNDS
