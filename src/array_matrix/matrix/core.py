"""Row-major 2D matrix over an arbitrary element type.

A ``Matrix`` owns a flat list of elements plus its row count. Element
``(i, j)`` lives at flat offset ``i * column_len + j``, and
``column_len`` is derived as ``len(elements) // row_len``. The shape is
fixed at construction; nothing resizes a matrix afterwards.

Mutation happens only through indexed assignment, ``swap``,
``transpose_mut`` and the in-place operators. Binary operators build a
new matrix and leave both operands untouched.

References:
    - Row- and column-major order:
      https://en.wikipedia.org/wiki/Row-_and_column-major_order
    - In-place matrix transposition:
      https://en.wikipedia.org/wiki/In-place_matrix_transposition

"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import Any, Generic, TypeVar

from array_matrix.errors import IndexOutOfRangeError, ShapeMismatchError
from array_matrix.matrix import arithmetic
from array_matrix.matrix.protocols import MatrixLike

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Matrix(Generic[T]):
    """Fixed-shape, row-major matrix.

    Args:
        elements: Flat elements in row-major order. The sequence is
            copied, so the matrix never aliases caller storage.
        row_len: Number of rows. Must divide ``len(elements)``.

    Raises:
        ShapeMismatchError: If ``row_len`` is not positive, ``elements``
            is empty, or its length is not a multiple of ``row_len``.

    Examples:
        >>> m = Matrix([1, 2, 3, 4, 5, 6], row_len=2)
        >>> m.size()
        (2, 3)
        >>> m[1, 2]
        6
        >>> m.transpose()
        Matrix([1, 4, 2, 5, 3, 6], row_len=3)

    """

    __slots__ = ("_elements", "_row_len")

    def __init__(self, elements: Iterable[T], row_len: int):
        elements = list(elements)
        if not isinstance(row_len, int) or isinstance(row_len, bool):
            raise ShapeMismatchError(f"row length must be an int, got {row_len!r}")
        if row_len <= 0:
            raise ShapeMismatchError(f"row length must be positive, got {row_len}")
        if not elements or len(elements) % row_len:
            raise ShapeMismatchError(
                f"{len(elements)} elements cannot fill a matrix with {row_len} rows"
            )
        self._elements = elements
        self._row_len = row_len

    @classmethod
    def _adopt(cls, elements: list[T], row_len: int) -> Matrix[T]:
        # Takes ownership of an already validated list without copying it.
        m = cls.__new__(cls)
        m._elements = elements
        m._row_len = row_len
        return m

    @classmethod
    def from_flat(cls, elements: Iterable[T], row_len: int) -> Matrix[T]:
        """Build a matrix from a flat row-major sequence."""
        return cls(elements, row_len)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[T]]) -> Matrix[T]:
        """Build a matrix from nested rows.

        Examples:
            >>> Matrix.from_rows([[1, 2], [3, 4]])
            Matrix([1, 2, 3, 4], row_len=2)

        """
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise ShapeMismatchError("cannot build a matrix from no rows")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ShapeMismatchError(
                    f"row {i} has {len(row)} elements, expected {width}"
                )
        return cls._adopt([x for row in rows for x in row], len(rows))

    @classmethod
    def zeros(cls, row_len: int, column_len: int, zero: Any = 0) -> Matrix[T]:
        """Matrix of the given shape filled with ``zero``."""
        if column_len <= 0:
            raise ShapeMismatchError(f"column length must be positive, got {column_len}")
        return cls([zero] * (row_len * column_len), row_len)

    @classmethod
    def identity(cls, order: int, one: Any = 1, zero: Any = 0) -> Matrix[T]:
        """Square identity matrix.

        Args:
            order: Number of rows and columns.
            one: Multiplicative identity of the element type.
            zero: Additive identity of the element type.

        Examples:
            >>> Matrix.identity(2)
            Matrix([1, 0, 0, 1], row_len=2)
            >>> Matrix.identity(2, one=1.0, zero=0.0).to_list()
            [1.0, 0.0, 0.0, 1.0]

        """
        m = cls.zeros(order, order, zero)
        for i in range(order):
            m._elements[i * order + i] = one
        return m

    # -- shape ---------------------------------------------------------------

    def row_len(self) -> int:
        """Number of rows."""
        return self._row_len

    def column_len(self) -> int:
        """Number of columns."""
        return len(self._elements) // self._row_len

    def size(self) -> tuple[int, int]:
        """``(row_len, column_len)``."""
        return (self._row_len, self.column_len())

    def __len__(self) -> int:
        return len(self._elements)

    # -- element access --------------------------------------------------------

    def _offset(self, index: tuple[int, int]) -> int:
        try:
            i, j = index
        except (TypeError, ValueError):
            raise TypeError(
                f"matrix indices must be (row, column) pairs, got {index!r}"
            ) from None
        cols = self.column_len()
        if not (0 <= i < self._row_len and 0 <= j < cols):
            raise IndexOutOfRangeError(f"{(i, j)} outside matrix of size {self.size()}")
        return i * cols + j

    def get(self, i: int, j: int) -> T:
        """Read element ``(i, j)``.

        Raises:
            IndexOutOfRangeError: If ``(i, j)`` is outside the matrix.

        """
        return self._elements[self._offset((i, j))]

    def set(self, i: int, j: int, value: T) -> None:
        """Write element ``(i, j)``.

        Raises:
            IndexOutOfRangeError: If ``(i, j)`` is outside the matrix.

        """
        self._elements[self._offset((i, j))] = value

    def __getitem__(self, index: tuple[int, int]) -> T:
        return self._elements[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: T) -> None:
        self._elements[self._offset(index)] = value

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        """Exchange the elements at coordinates ``a`` and ``b``.

        Both coordinates are checked before either element moves.

        Examples:
            >>> m = Matrix([1, 2, 3, 4], 2)
            >>> m.swap((0, 0), (1, 1))
            >>> m.to_list()
            [4, 2, 3, 1]

        """
        x = self._offset(a)
        y = self._offset(b)
        self._elements[x], self._elements[y] = self._elements[y], self._elements[x]

    # -- transpose -------------------------------------------------------------

    def transpose(self) -> Matrix[T]:
        """Return a new ``(column_len, row_len)`` matrix with rows and columns swapped.

        Examples:
            >>> Matrix([1, 2, 3, 4], 2).transpose()
            Matrix([1, 3, 2, 4], row_len=2)

        """
        rows, cols = self.size()
        trans = [None] * len(self._elements)
        for p, value in enumerate(self._elements):
            r, c = divmod(p, cols)
            trans[c * rows + r] = value
        logger.debug("transposed %s matrix", (rows, cols))
        return self._adopt(trans, cols)

    @property
    def T(self) -> Matrix[T]:
        """Alias of ``transpose()``."""
        return self.transpose()

    def transpose_mut(self) -> None:
        """Transpose a square matrix in place, without a second buffer.

        Flat positions are walked in row-major order. An off-diagonal
        cell ``(r, c)`` is swapped with its mirror ``(c, r)``. On reaching
        the diagonal cell ``(r, r)`` the rest of row ``r`` is skipped:
        those cells were already swapped from their mirrors in earlier
        rows, and swapping them again would undo the transpose.

        Raises:
            ShapeMismatchError: If the matrix is not square.

        Examples:
            >>> m = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9], 3)
            >>> m.transpose_mut()
            >>> m.to_list()
            [1, 4, 7, 2, 5, 8, 3, 6, 9]

        """
        rows, cols = self.size()
        if rows != cols:
            raise ShapeMismatchError(
                f"in-place transpose needs a square matrix, got {(rows, cols)}"
            )

        data = self._elements
        positions = (divmod(p, cols) for p in range(len(data)))
        for r, c in positions:
            if r == c:
                skip = rows - r - 1
                next(islice(positions, skip, skip), None)
            else:
                a = r * cols + c
                b = c * rows + r
                data[a], data[b] = data[b], data[a]
        logger.debug("transposed %s matrix in place", (rows, cols))

    # -- inspection ------------------------------------------------------------

    def to_list(self) -> list[T]:
        """Copy of the flat elements in row-major order."""
        return list(self._elements)

    def rows(self) -> list[list[T]]:
        """Elements as a list of rows."""
        cols = self.column_len()
        return [self._elements[i : i + cols] for i in range(0, len(self._elements), cols)]

    def copy(self) -> Matrix[T]:
        """Independent matrix with the same shape and elements."""
        return self._adopt(list(self._elements), self._row_len)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._row_len == other._row_len and self._elements == other._elements

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r}, row_len={self._row_len})"

    # -- arithmetic ------------------------------------------------------------

    def _assign(self, result: Matrix[T]) -> Matrix[T]:
        self._elements[:] = result._elements
        return self

    def __add__(self, other: Any) -> Matrix[T]:
        if isinstance(other, MatrixLike):
            return arithmetic.elementwise_add(self, other)
        return arithmetic.scalar_add(self, other)

    def __radd__(self, other: Any) -> Matrix[T]:
        if isinstance(other, MatrixLike):
            return NotImplemented
        return arithmetic.scalar_add(self, other, reflected=True)

    def __iadd__(self, other: Any) -> Matrix[T]:
        return self._assign(self + other)

    def __sub__(self, other: Any) -> Matrix[T]:
        if isinstance(other, MatrixLike):
            return arithmetic.elementwise_sub(self, other)
        return arithmetic.scalar_sub(self, other)

    def __rsub__(self, other: Any) -> Matrix[T]:
        if isinstance(other, MatrixLike):
            return NotImplemented
        return arithmetic.scalar_sub(self, other, reflected=True)

    def __isub__(self, other: Any) -> Matrix[T]:
        return self._assign(self - other)

    def __mul__(self, other: Any) -> Matrix[T]:
        if isinstance(other, MatrixLike):
            return arithmetic.matmul(self, other)
        return arithmetic.scalar_mul(self, other)

    def __rmul__(self, other: Any) -> Matrix[T]:
        if isinstance(other, MatrixLike):
            return NotImplemented
        return arithmetic.scalar_mul(self, other, reflected=True)

    def __imul__(self, other: Any) -> Matrix[T]:
        return self._assign(self * other)

    def __matmul__(self, other: Any) -> Matrix[T]:
        if not isinstance(other, MatrixLike):
            return NotImplemented
        return arithmetic.matmul(self, other)

    def __imatmul__(self, other: Any) -> Matrix[T]:
        if not isinstance(other, MatrixLike):
            return NotImplemented
        return self._assign(arithmetic.matmul(self, other))

    def __truediv__(self, other: Any) -> Matrix[T]:
        if isinstance(other, MatrixLike):
            return NotImplemented
        return arithmetic.scalar_div(self, other)

    def __itruediv__(self, other: Any) -> Matrix[T]:
        if isinstance(other, MatrixLike):
            return NotImplemented
        return self._assign(arithmetic.scalar_div(self, other))

    def __floordiv__(self, other: Any) -> Matrix[T]:
        if isinstance(other, MatrixLike):
            return NotImplemented
        return arithmetic.scalar_floordiv(self, other)

    def __ifloordiv__(self, other: Any) -> Matrix[T]:
        if isinstance(other, MatrixLike):
            return NotImplemented
        return self._assign(arithmetic.scalar_floordiv(self, other))
