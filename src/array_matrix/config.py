"""Global configuration for array_matrix.

Holds the default dtype used when a matrix is converted to a JAX array.
The initial value can be seeded with the ``ARRAY_MATRIX_DTYPE``
environment variable (one of ``float32``, ``float64``, ``int32``,
``int64``).

Note that ``float64`` and ``int64`` arrays are only produced when JAX's
x64 mode is enabled; otherwise JAX silently narrows them to 32 bits.

"""

from __future__ import annotations

import os

import jax.numpy as jnp

SUPPORTED_DTYPES = {
    "float32": jnp.float32,
    "float64": jnp.float64,
    "int32": jnp.int32,
    "int64": jnp.int64,
}

ENV_DTYPE = "ARRAY_MATRIX_DTYPE"


def _resolve_dtype(value) -> str:
    name = value if isinstance(value, str) else jnp.dtype(value).name
    if name not in SUPPORTED_DTYPES:
        raise ValueError(
            f"Unsupported dtype {value!r}; expected one of {sorted(SUPPORTED_DTYPES)}"
        )
    return name


class _Config:
    """Process-wide configuration singleton."""

    def __init__(self):
        self._default_dtype = _resolve_dtype(os.environ.get(ENV_DTYPE, "float32"))

    @property
    def default_dtype(self):
        """Default JAX dtype for ``to_array``."""
        return SUPPORTED_DTYPES[self._default_dtype]

    @default_dtype.setter
    def default_dtype(self, value) -> None:
        self._default_dtype = _resolve_dtype(value)


_config = _Config()


def get_config() -> _Config:
    """Return the global configuration object."""
    return _config


def get_default_dtype():
    """Get the default dtype used for array conversion.

    Examples:
        >>> get_default_dtype()  # doctest: +SKIP
        <class 'jax.numpy.float32'>

    """
    return _config.default_dtype


def set_default_dtype(dtype) -> None:
    """Set the default dtype used for array conversion.

    Args:
        dtype: Dtype name (``"float32"``) or a jnp dtype (``jnp.float32``).

    Raises:
        ValueError: If the dtype is not supported.

    """
    _config.default_dtype = dtype
