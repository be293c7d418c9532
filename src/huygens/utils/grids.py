"""Sampling axes and coordinate grids.

Extended Summary
----------------
Builds the 1D spatial and spatial-frequency axes of a square window of
side L sampled with M points, and meshes them into 2D coordinate arrays.
The spatial axis starts at -L/2 and stops at L/2 - dx so the Nyquist
sample is not duplicated; the sample at index M // 2 is the origin for
even M.

Routine Listings
----------------
build_axis : function
    Spatial axis [-L/2, L/2 - dx] with spacing dx = L/M
build_frequency_axis : function
    Frequency axis [-1/(2dx), 1/(2dx) - 1/L] with spacing 1/L
meshgrid : function
    2D coordinate arrays from two 1D axes
spatial_grid : function
    Meshed spatial coordinates of a window
frequency_grid : function
    Meshed spatial-frequency coordinates of a window

Notes
-----
The underscore-prefixed builders take the sample count as a Python int
and are safe to call inside JIT-compiled kernels. The public functions
validate their arguments first.
"""

import jax
import jax.numpy as jnp
from beartype import beartype
from beartype.typing import Tuple
from jaxtyping import Array, Float, jaxtyped

from huygens.types.common_types import ScalarInteger, ScalarNumeric

from .checks import positive_count, positive_scalar
from .errors import InvalidDimensionError

jax.config.update("jax_enable_x64", True)


def _axis(side_length: Float[Array, " "], num_samples: int) -> Float[Array, " mm"]:
    dx: Float[Array, " "] = side_length / num_samples
    return -side_length / 2.0 + jnp.arange(num_samples) * dx


def _frequency_axis(
    side_length: Float[Array, " "], num_samples: int
) -> Float[Array, " mm"]:
    dx: Float[Array, " "] = side_length / num_samples
    return -1.0 / (2.0 * dx) + jnp.arange(num_samples) / side_length


def _grid(
    axis: Float[Array, " mm"],
) -> Tuple[Float[Array, " mm mm"], Float[Array, " mm mm"]]:
    xx: Float[Array, " mm mm"]
    yy: Float[Array, " mm mm"]
    xx, yy = jnp.meshgrid(axis, axis)
    return xx, yy


@jaxtyped(typechecker=beartype)
def build_axis(
    side_length: ScalarNumeric,
    num_samples: ScalarInteger,
) -> Float[Array, " mm"]:
    """Build the centered spatial sampling axis of a window.

    Parameters
    ----------
    side_length : ScalarNumeric
        Window side length L in meters.
    num_samples : ScalarInteger
        Number of samples M.

    Returns
    -------
    axis : Float[Array, " mm"]
        M values ``-L/2 + n * L/M`` for ``n = 0 .. M-1``.

    Raises
    ------
    InvalidDimensionError
        If L or M is not positive.

    Examples
    --------
    >>> build_axis(1.0, 4)
    Array([-0.5 , -0.25,  0.  ,  0.25], dtype=float64)
    """
    length: float = positive_scalar("side_length", side_length)
    mm: int = positive_count("num_samples", num_samples)
    axis: Float[Array, " mm"] = _axis(jnp.asarray(length, dtype=jnp.float64), mm)
    return axis


@jaxtyped(typechecker=beartype)
def build_frequency_axis(
    side_length: ScalarNumeric,
    num_samples: ScalarInteger,
) -> Float[Array, " mm"]:
    """Build the spatial-frequency axis matching :func:`build_axis`.

    Parameters
    ----------
    side_length : ScalarNumeric
        Window side length L in meters.
    num_samples : ScalarInteger
        Number of samples M.

    Returns
    -------
    frequencies : Float[Array, " mm"]
        M values ``-1/(2dx) + n/L`` in cycles per meter.

    Raises
    ------
    InvalidDimensionError
        If L or M is not positive.
    """
    length: float = positive_scalar("side_length", side_length)
    mm: int = positive_count("num_samples", num_samples)
    frequencies: Float[Array, " mm"] = _frequency_axis(
        jnp.asarray(length, dtype=jnp.float64), mm
    )
    return frequencies


@jaxtyped(typechecker=beartype)
def meshgrid(
    x_axis: Float[Array, " nx"],
    y_axis: Float[Array, " ny"],
) -> Tuple[Float[Array, " ny nx"], Float[Array, " ny nx"]]:
    """Mesh two axes into 2D coordinate arrays.

    ``xx`` varies along columns and ``yy`` along rows.

    Raises
    ------
    InvalidDimensionError
        If either axis is empty.
    """
    if x_axis.shape[0] == 0 or y_axis.shape[0] == 0:
        raise InvalidDimensionError("axes must not be empty")
    xx: Float[Array, " ny nx"]
    yy: Float[Array, " ny nx"]
    xx, yy = jnp.meshgrid(x_axis, y_axis)
    return xx, yy


@jaxtyped(typechecker=beartype)
def spatial_grid(
    side_length: ScalarNumeric,
    num_samples: ScalarInteger,
) -> Tuple[Float[Array, " mm mm"], Float[Array, " mm mm"]]:
    """Meshed spatial coordinates ``(X, Y)`` of an M x M window."""
    axis: Float[Array, " mm"] = build_axis(side_length, num_samples)
    return _grid(axis)


@jaxtyped(typechecker=beartype)
def frequency_grid(
    side_length: ScalarNumeric,
    num_samples: ScalarInteger,
) -> Tuple[Float[Array, " mm mm"], Float[Array, " mm mm"]]:
    """Meshed spatial-frequency coordinates ``(FX, FY)`` of a window."""
    frequencies: Float[Array, " mm"] = build_frequency_axis(
        side_length, num_samples
    )
    return _grid(frequencies)
