"""The capability set a right-hand multiply operand must expose."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MatrixLike(Protocol):
    """Anything with a 2D shape and ``(i, j)`` indexed reads.

    ``Matrix`` satisfies this protocol, as does
    ``array_matrix.interop.ArrayView``. Matrix multiply accepts any
    ``MatrixLike`` on the right-hand side.
    """

    def row_len(self) -> int: ...

    def column_len(self) -> int: ...

    def __getitem__(self, index: tuple[int, int]) -> Any: ...
