"""Argument checks shared by the public wrappers.

Extended Summary
----------------
Public functions validate their arguments in Python before handing
concrete arrays to the JIT-compiled kernels, so invalid input raises
immediately instead of leaking NaN or Inf into the result.

Routine Listings
----------------
finite_scalar : function
    Convert a scalar to float and require it to be finite.
positive_scalar : function
    Convert a scalar to float and require it to be finite and positive.
nonzero_scalar : function
    Convert a scalar to float and require it to be finite and nonzero.
positive_count : function
    Convert an integer-like value to int and require it to be positive.
square_size : function
    Return M for a square (M, M) array.
"""

import math

import jax.numpy as jnp
from beartype.typing import Any, Type

from .errors import DegenerateParameterError, HuygensError, InvalidDimensionError


def finite_scalar(name: str, value: Any) -> float:
    """Return ``value`` as a float, raising if it is NaN or infinite."""
    scalar: float = float(jnp.asarray(value))
    if not math.isfinite(scalar):
        raise InvalidDimensionError(f"{name} must be finite, got {scalar}")
    return scalar


def positive_scalar(name: str, value: Any) -> float:
    """Return ``value`` as a float, raising if it is not positive.

    Raises
    ------
    InvalidDimensionError
        If the value is not finite or not strictly positive.
    """
    scalar: float = finite_scalar(name, value)
    if scalar <= 0:
        raise InvalidDimensionError(f"{name} must be positive, got {scalar}")
    return scalar


def nonzero_scalar(
    name: str,
    value: Any,
    error: Type[HuygensError] = DegenerateParameterError,
) -> float:
    """Return ``value`` as a float, raising ``error`` if it is zero."""
    scalar: float = finite_scalar(name, value)
    if scalar == 0:
        raise error(f"{name} must be nonzero")
    return scalar


def positive_count(name: str, value: Any) -> int:
    """Return ``value`` as an int, raising if it is not positive."""
    count: int = int(jnp.asarray(value))
    if count <= 0:
        raise InvalidDimensionError(f"{name} must be positive, got {count}")
    return count


def square_size(name: str, array: Any) -> int:
    """Return the side M of a square 2D array.

    Raises
    ------
    InvalidDimensionError
        If ``array`` is not 2D, not square, or empty.
    """
    shape: tuple = tuple(array.shape)
    if len(shape) != 2 or shape[0] != shape[1] or shape[0] == 0:
        raise InvalidDimensionError(
            f"{name} must be a non-empty square 2D array, got shape {shape}"
        )
    return int(shape[0])
