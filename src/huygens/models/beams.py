"""Laguerre-Gaussian beam generation.

Extended Summary
----------------
Samples Laguerre-Gaussian modes LG_p^l on a Cartesian grid built from
two coordinate axes. The field is evaluated at a plane ``z_position``
from the waist; the default is the waist itself, where the curvature
and Gouy terms vanish.

Routine Listings
----------------
gaussian_mode : function
    Fundamental Gaussian field (LG_0^0)
laguerre_coefficients : function
    Power-series coefficients of the generalized Laguerre polynomial
lg_mode : function
    Phase, intensity and complex field of an LG_p^l mode

Notes
-----
The field is

    U = U00 · R^|l| · L_p^|l|(R²) · exp(i l φ) · exp(-i (2p + |l| + 1) atan(z/zR))

with zR = k w0² / 2, U00 = exp(-r² / w0² / (1 + i z/zR)) / (1 + i z/zR),
w(z) = w0 sqrt(1 + (z/zR)²) and R = sqrt(2) r / w(z). Only the
azimuthal phase carries the sign of l, so LG_p^-l is the complex
conjugate vortex of LG_p^l with the same intensity.

The output is not normalised: callers must not assume unit peak
amplitude or unit power.

References
----------
1. Voelz, D. G. "Computational Fourier Optics: A MATLAB Tutorial" (2011)
2. Siegman, A. E. "Lasers" (1986)
"""

import math
from functools import partial

import jax
import jax.numpy as jnp
from beartype import beartype
from beartype.typing import Tuple
from jaxtyping import Array, Complex, Float, jaxtyped

from huygens.types import (
    LaguerreGaussianMode,
    ScalarInteger,
    ScalarNumeric,
)
from huygens.utils.checks import finite_scalar, positive_scalar
from huygens.utils.errors import InvalidDimensionError

jax.config.update("jax_enable_x64", True)


def laguerre_coefficients(
    radial_index: int, azimuthal_order: int
) -> Tuple[float, ...]:
    """Coefficients c_m of L_p^a(x) = Σ c_m x^m, m = 0 .. p.

    ``c_m = (-1)^m C(p + a, p - m) / m!``. The binomial coefficient and
    the factorial are exact integers; each coefficient is rounded to
    float once. Tested for p <= 10.
    """
    order: int = radial_index + azimuthal_order
    return tuple(
        (-1) ** m * math.comb(order, radial_index - m) / math.factorial(m)
        for m in range(radial_index + 1)
    )


@partial(jax.jit, static_argnums=(0, 1))
def _lg_mode_impl(
    radial_index: int,
    azimuthal_index: int,
    wavenumber: Float[Array, " "],
    waist: Float[Array, " "],
    x_axis: Float[Array, " ww"],
    y_axis: Float[Array, " hh"],
    z_position: Float[Array, " "],
) -> Complex[Array, " hh ww"]:
    """JIT-compiled implementation of lg_mode."""
    order: int = abs(azimuthal_index)
    rayleigh_range: Float[Array, " "] = wavenumber * waist**2 / 2.0

    xx: Float[Array, " hh ww"]
    yy: Float[Array, " hh ww"]
    xx, yy = jnp.meshgrid(x_axis, y_axis)
    phi: Float[Array, " hh ww"] = jnp.arctan2(yy, xx)
    r: Float[Array, " hh ww"] = jnp.sqrt(xx**2 + yy**2)

    q: Complex[Array, " "] = 1.0 + 1j * z_position / rayleigh_range
    u00: Complex[Array, " hh ww"] = (1.0 / q) * jnp.exp(
        -(r**2) / waist**2 / q
    )

    w: Float[Array, " "] = waist * jnp.sqrt(
        1.0 + (z_position / rayleigh_range) ** 2
    )
    rho: Float[Array, " hh ww"] = jnp.sqrt(2.0) * r / w
    rho_sq: Float[Array, " hh ww"] = rho**2

    laguerre: Float[Array, " hh ww"] = jnp.zeros_like(rho)
    for m, coefficient in enumerate(
        laguerre_coefficients(radial_index, order)
    ):
        laguerre = laguerre + coefficient * rho_sq**m

    gouy: Float[Array, " "] = (2 * radial_index + order + 1) * jnp.arctan(
        z_position / rayleigh_range
    )
    field: Complex[Array, " hh ww"] = (
        u00
        * rho**order
        * laguerre
        * jnp.exp(1j * azimuthal_index * phi)
        * jnp.exp(-1j * gouy)
    )
    return field


@jaxtyped(typechecker=beartype)
def lg_mode(
    radial_index: ScalarInteger,
    azimuthal_index: ScalarInteger,
    wavenumber: ScalarNumeric,
    waist: ScalarNumeric,
    x_axis: Float[Array, " ww"],
    y_axis: Float[Array, " hh"],
    z_position: ScalarNumeric = 0.0,
) -> LaguerreGaussianMode:
    """Generate a Laguerre-Gaussian LG_p^l mode on a 2D grid.

    Parameters
    ----------
    radial_index : ScalarInteger
        Radial index p, non-negative.
    azimuthal_index : ScalarInteger
        Azimuthal index l (topological charge), any sign.
    wavenumber : ScalarNumeric
        Wavenumber k = 2π/λ in rad/m.
    waist : ScalarNumeric
        Beam waist w0 in meters.
    x_axis : Float[Array, " ww"]
        x coordinates in meters, usually from
        :func:`huygens.utils.build_axis`.
    y_axis : Float[Array, " hh"]
        y coordinates in meters.
    z_position : ScalarNumeric, optional
        Distance from the waist in meters. Default is 0.0.

    Returns
    -------
    mode : LaguerreGaussianMode
        ``(phase, intensity, field)`` on the ``(hh, ww)`` grid. Phase is
        wrapped to (-π, π]; intensity is ``|field|²``.

    Raises
    ------
    InvalidDimensionError
        If p is negative, k or w0 is not positive, or z_position is not
        finite.

    Examples
    --------
    >>> import jax.numpy as jnp
    >>> from huygens.utils import build_axis
    >>> x = build_axis(1.28e-2, 256)
    >>> phase, intensity, field = lg_mode(0, 1, 2 * jnp.pi / 500e-9, 3e-3, x, x)
    """
    p: int = int(jnp.asarray(radial_index))
    ell: int = int(jnp.asarray(azimuthal_index))
    if p < 0:
        raise InvalidDimensionError(f"radial_index must be >= 0, got {p}")
    k: float = positive_scalar("wavenumber", wavenumber)
    w0: float = positive_scalar("waist", waist)
    z: float = finite_scalar("z_position", z_position)

    field: Complex[Array, " hh ww"] = _lg_mode_impl(
        p,
        ell,
        jnp.asarray(k, dtype=jnp.float64),
        jnp.asarray(w0, dtype=jnp.float64),
        x_axis,
        y_axis,
        jnp.asarray(z, dtype=jnp.float64),
    )
    mode: LaguerreGaussianMode = LaguerreGaussianMode(
        phase=jnp.angle(field),
        intensity=jnp.abs(field) ** 2,
        field=field,
    )
    return mode


@jaxtyped(typechecker=beartype)
def gaussian_mode(
    wavenumber: ScalarNumeric,
    waist: ScalarNumeric,
    x_axis: Float[Array, " ww"],
    y_axis: Float[Array, " hh"],
) -> Complex[Array, " hh ww"]:
    """Fundamental Gaussian field exp(-r²/w0²) at the waist.

    Equivalent to ``lg_mode(0, 0, ...).field``.
    """
    return lg_mode(0, 0, wavenumber, waist, x_axis, y_axis).field
