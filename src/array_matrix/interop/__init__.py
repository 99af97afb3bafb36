"""Interop between ``Matrix`` and JAX arrays.

Matrices are plain Python containers; these recipes move data to and
from ``jax.Array`` so results can be cross-checked against (or handed
to) jax.numpy.
"""

from array_matrix.interop.arrays import ArrayView, from_array, to_array

__all__ = [
    "to_array",
    "from_array",
    "ArrayView",
]
