"""Thin lens transmittance.

Extended Summary
----------------
Applies an ideal thin lens to a sampled field: a circular pupil of
finite radius times the paraxial quadratic phase of focal length zf.

Routine Listings
----------------
thin_lens : function
    Multiply a field by the pupil and quadratic phase of a thin lens

Notes
-----
The lens sits in the plane of the field, centered on the optical axis
of the window built by :func:`huygens.utils.build_axis`.
"""

import jax
import jax.numpy as jnp
from beartype import beartype
from beartype.typing import Optional
from jaxtyping import Array, Complex, Float, jaxtyped

from huygens.simul.apertures import circular_pupil
from huygens.types import ScalarNumeric
from huygens.utils.backend import Backend
from huygens.utils.checks import nonzero_scalar, positive_scalar, square_size
from huygens.utils.grids import _axis, _grid

jax.config.update("jax_enable_x64", True)


@jax.jit
def _thin_lens_impl(
    field: Complex[Array, " mm mm"],
    pupil: Float[Array, " mm mm"],
    xx: Float[Array, " mm mm"],
    yy: Float[Array, " mm mm"],
    wavenumber: Float[Array, " "],
    focal_distance: Float[Array, " "],
) -> Complex[Array, " mm mm"]:
    """JIT-compiled implementation of thin_lens."""
    phase: Complex[Array, " mm mm"] = jnp.exp(
        -1j * wavenumber / (2.0 * focal_distance) * (xx**2 + yy**2)
    )
    return field * pupil * phase


@jaxtyped(typechecker=beartype)
def thin_lens(
    field: Complex[Array, " hh ww"],
    side_length: ScalarNumeric,
    wavelength: ScalarNumeric,
    focal_distance: ScalarNumeric,
    radius: ScalarNumeric,
    backend: Optional[Backend] = None,
) -> Complex[Array, " hh ww"]:
    """Apply a thin lens with a circular pupil to a field.

    Parameters
    ----------
    field : Complex[Array, " hh ww"]
        Square complex field in the lens plane.
    side_length : ScalarNumeric
        Window side L in meters.
    wavelength : ScalarNumeric
        Wavelength in meters.
    focal_distance : ScalarNumeric
        Focal length zf in meters. Positive converges, negative diverges.
    radius : ScalarNumeric
        Pupil radius in meters.
    backend : Backend, optional
        Device to run on. Default is JAX's default placement.

    Returns
    -------
    transmitted : Complex[Array, " hh ww"]
        ``field · P(x, y) · exp(-i k (x² + y²) / (2 zf))`` where P is 1
        for ``sqrt(x² + y²) <= radius`` and 0 elsewhere.

    Raises
    ------
    InvalidDimensionError
        If the field is not square, or L, λ or the radius is not
        positive.
    DegenerateParameterError
        If ``focal_distance`` is zero.

    Examples
    --------
    >>> import jax.numpy as jnp
    >>> field = jnp.ones((512, 512), dtype=jnp.complex128)
    >>> out = thin_lens(field, 1.28e-2, 500e-9, 0.3, 2.54e-2)
    """
    num_samples: int = square_size("field", field)
    length: float = positive_scalar("side_length", side_length)
    lam: float = positive_scalar("wavelength", wavelength)
    zf: float = nonzero_scalar("focal_distance", focal_distance)
    rr: float = positive_scalar("radius", radius)

    xx: Float[Array, " hh ww"]
    yy: Float[Array, " hh ww"]
    xx, yy = _grid(_axis(jnp.asarray(length, dtype=jnp.float64), num_samples))
    pupil: Float[Array, " hh ww"] = circular_pupil(xx, yy, rr)
    if backend is not None:
        field = backend.to_device(field)
        pupil = backend.to_device(pupil)
        xx = backend.to_device(xx)
        yy = backend.to_device(yy)
    transmitted: Complex[Array, " hh ww"] = _thin_lens_impl(
        field,
        pupil,
        xx,
        yy,
        jnp.asarray(2.0 * jnp.pi / lam, dtype=jnp.float64),
        jnp.asarray(zf, dtype=jnp.float64),
    )
    return transmitted
