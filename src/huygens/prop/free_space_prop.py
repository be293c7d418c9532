"""Free-space propagation of scalar fields.

Extended Summary
----------------
Two independent FFT-based propagators for square M x M fields:

- the Angular Spectrum Method, which multiplies the spectrum by the
  exact transfer function and keeps the sampling grid unchanged;
- the two-step Fresnel method, which goes through an intermediate plane
  and lets the observation window differ in size from the source
  window.

Routine Listings
----------------
angular_spectrum : function
    Angular spectrum propagation with the exact transfer function
two_step_fresnel : function
    Two-step scaled Fresnel propagation
transfer_function : function
    Exact transfer function exp(i kz z) on a frequency grid

Notes
-----
Spectra are computed as ``fftshift(fft2(u))`` and transformed back with
``ifft2(ifftshift(.))``. With the axis conventions of
:mod:`huygens.utils.grids` this keeps the origin at index ``M // 2`` in
both planes.

For equal windows both methods approximate the same diffraction
integral: the two-step result differs from the angular spectrum result
by the paraxial approximation of kz only.

References
----------
1. Voelz, D. G. "Computational Fourier Optics: A MATLAB Tutorial",
   SPIE Press (2011), angular spectrum and Appendix B.
2. Goodman, J. W. "Introduction to Fourier Optics", 3rd ed. (2005)
"""

import jax
import jax.numpy as jnp
from beartype import beartype
from beartype.typing import Optional
from jaxtyping import Array, Complex, Float, jaxtyped

from huygens.types import ScalarNumeric
from huygens.utils.backend import Backend
from huygens.utils.checks import (
    finite_scalar,
    nonzero_scalar,
    positive_scalar,
    square_size,
)
from huygens.utils.grids import _axis, _frequency_axis, _grid

jax.config.update("jax_enable_x64", True)


@jaxtyped(typechecker=beartype)
def transfer_function(
    fx: Float[Array, " hh ww"],
    fy: Float[Array, " hh ww"],
    wavelength: Float[Array, " "],
    distance: Float[Array, " "],
) -> Complex[Array, " hh ww"]:
    """Exact free-space transfer function H = exp(i kz z).

    Parameters
    ----------
    fx : Float[Array, " hh ww"]
        Spatial frequencies along x in cycles per meter.
    fy : Float[Array, " hh ww"]
        Spatial frequencies along y in cycles per meter.
    wavelength : Float[Array, " "]
        Wavelength in meters.
    distance : Float[Array, " "]
        Propagation distance in meters.

    Returns
    -------
    transfer : Complex[Array, " hh ww"]
        Transfer function samples.

    Notes
    -----
    With Δ = (2π)² ((1/λ)² - fx² - fy²), kz = sqrt(|Δ|) for Δ >= 0 and
    kz = i sqrt(|Δ|) for Δ < 0. Evanescent orders therefore get the
    real factor exp(-sqrt(|Δ|) z), which decays for z > 0. For z < 0
    that factor would grow without bound, so evanescent orders are set
    to zero and back-propagation keeps the propagating band only.
    """
    argument: Float[Array, " hh ww"] = (2.0 * jnp.pi) ** 2 * (
        (1.0 / wavelength) ** 2 - fx**2 - fy**2
    )
    root: Float[Array, " hh ww"] = jnp.sqrt(jnp.abs(argument))
    propagating: Complex[Array, " hh ww"] = jnp.exp(1j * root * distance)
    decaying: Float[Array, " hh ww"] = jnp.exp(-root * jnp.abs(distance))
    evanescent: Float[Array, " hh ww"] = jnp.where(
        distance >= 0, decaying, 0.0
    )
    transfer: Complex[Array, " hh ww"] = jnp.where(
        argument >= 0, propagating, evanescent + 0j
    )
    return transfer


@jax.jit
def _angular_spectrum_impl(
    field: Complex[Array, " mm mm"],
    side_length: Float[Array, " "],
    wavelength: Float[Array, " "],
    distance: Float[Array, " "],
) -> Complex[Array, " mm mm"]:
    """JIT-compiled implementation of angular_spectrum."""
    num_samples: int = field.shape[0]
    fx: Float[Array, " mm mm"]
    fy: Float[Array, " mm mm"]
    fx, fy = _grid(_frequency_axis(side_length, num_samples))
    spectrum: Complex[Array, " mm mm"] = jnp.fft.fftshift(jnp.fft.fft2(field))
    transfer: Complex[Array, " mm mm"] = transfer_function(
        fx, fy, wavelength, distance
    )
    propagated: Complex[Array, " mm mm"] = jnp.fft.ifft2(
        jnp.fft.ifftshift(spectrum * transfer)
    )
    return propagated


@jaxtyped(typechecker=beartype)
def angular_spectrum(
    field: Complex[Array, " hh ww"],
    side_length: ScalarNumeric,
    wavelength: ScalarNumeric,
    distance: ScalarNumeric,
    backend: Optional[Backend] = None,
) -> Complex[Array, " hh ww"]:
    """Propagate a field with the Angular Spectrum Method.

    Input and output share the same M x M grid of side ``side_length``;
    there is no magnification.

    Parameters
    ----------
    field : Complex[Array, " hh ww"]
        Square complex source field.
    side_length : ScalarNumeric
        Window side length L in meters, dx = L / M.
    wavelength : ScalarNumeric
        Wavelength in meters.
    distance : ScalarNumeric
        Propagation distance z in meters. ``0`` returns the input up to
        floating-point error. Negative z back-propagates the orders
        inside 1/λ; evanescent orders are dropped.
    backend : Backend, optional
        Device to run on. The field is moved there once before the
        computation. Default is JAX's default placement.

    Returns
    -------
    propagated : Complex[Array, " hh ww"]
        Field in the observation plane.

    Raises
    ------
    InvalidDimensionError
        If the field is not square, or L or λ is not positive, or z is
        not finite.

    Notes
    -----
    Algorithm:

    - Build the frequency grid fx = -1/(2dx) .. 1/(2dx) - 1/L
    - Spectrum = fftshift(fft2(field))
    - Multiply by :func:`transfer_function`
    - Return ifft2(ifftshift(spectrum · H))

    Examples
    --------
    >>> import jax.numpy as jnp
    >>> field = jnp.ones((256, 256), dtype=jnp.complex128)
    >>> out = angular_spectrum(field, 1e-2, 633e-9, 0.1)
    """
    square_size("field", field)
    length: float = positive_scalar("side_length", side_length)
    lam: float = positive_scalar("wavelength", wavelength)
    z: float = finite_scalar("distance", distance)
    if backend is not None:
        field = backend.to_device(field)
    propagated: Complex[Array, " hh ww"] = _angular_spectrum_impl(
        field,
        jnp.asarray(length, dtype=jnp.float64),
        jnp.asarray(lam, dtype=jnp.float64),
        jnp.asarray(z, dtype=jnp.float64),
    )
    return propagated


@jax.jit
def _two_step_fresnel_impl(
    field: Complex[Array, " mm mm"],
    input_side_length: Float[Array, " "],
    output_side_length: Float[Array, " "],
    wavelength: Float[Array, " "],
    distance: Float[Array, " "],
) -> Complex[Array, " mm mm"]:
    """JIT-compiled implementation of two_step_fresnel."""
    num_samples: int = field.shape[0]
    k: Float[Array, " "] = 2.0 * jnp.pi / wavelength
    window_change: Float[Array, " "] = input_side_length - output_side_length

    # source plane
    dx1: Float[Array, " "] = input_side_length / num_samples
    x1: Float[Array, " mm mm"]
    y1: Float[Array, " mm mm"]
    x1, y1 = _grid(_axis(input_side_length, num_samples))
    source_phase: Complex[Array, " mm mm"] = jnp.exp(
        1j
        * k
        / (2.0 * distance * input_side_length)
        * window_change
        * (x1**2 + y1**2)
    )
    spectrum: Complex[Array, " mm mm"] = jnp.fft.fftshift(
        jnp.fft.fft2(field * source_phase)
    )

    # intermediate plane
    fx1: Float[Array, " mm mm"]
    fy1: Float[Array, " mm mm"]
    fx1, fy1 = _grid(_frequency_axis(input_side_length, num_samples))
    intermediate_phase: Complex[Array, " mm mm"] = jnp.exp(
        -1j
        * jnp.pi
        * wavelength
        * distance
        * input_side_length
        / output_side_length
        * (fx1**2 + fy1**2)
    )
    intermediate: Complex[Array, " mm mm"] = jnp.fft.ifft2(
        jnp.fft.ifftshift(spectrum * intermediate_phase)
    )

    # observation plane
    dx2: Float[Array, " "] = output_side_length / num_samples
    x2: Float[Array, " mm mm"]
    y2: Float[Array, " mm mm"]
    x2, y2 = _grid(_axis(output_side_length, num_samples))
    observation_phase: Complex[Array, " mm mm"] = jnp.exp(
        1j * k * distance
        - 1j
        * k
        / (2.0 * distance * output_side_length)
        * window_change
        * (x2**2 + y2**2)
    )
    scale: Float[Array, " "] = (output_side_length / input_side_length) * (
        dx1**2 / dx2**2
    )
    propagated: Complex[Array, " mm mm"] = (
        scale * observation_phase * intermediate
    )
    return propagated


@jaxtyped(typechecker=beartype)
def two_step_fresnel(
    field: Complex[Array, " hh ww"],
    input_side_length: ScalarNumeric,
    output_side_length: ScalarNumeric,
    wavelength: ScalarNumeric,
    distance: ScalarNumeric,
    backend: Optional[Backend] = None,
) -> Complex[Array, " hh ww"]:
    """Propagate a field with the two-step scaled Fresnel method.

    The observation window may differ in size from the source window,
    which magnifies or demagnifies the sampled field.

    Parameters
    ----------
    field : Complex[Array, " hh ww"]
        Square complex source field.
    input_side_length : ScalarNumeric
        Source window side L_in in meters, dx1 = L_in / M.
    output_side_length : ScalarNumeric
        Observation window side L_out in meters, dx2 = L_out / M.
    wavelength : ScalarNumeric
        Wavelength in meters.
    distance : ScalarNumeric
        Propagation distance z in meters, nonzero.
    backend : Backend, optional
        Device to run on. Default is JAX's default placement.

    Returns
    -------
    propagated : Complex[Array, " hh ww"]
        Field sampled on the observation window.

    Raises
    ------
    InvalidDimensionError
        If the field is not square, or a window side or λ is not
        positive.
    DegenerateParameterError
        If ``distance`` is zero; the source and observation phase terms
        divide by z.

    Notes
    -----
    Algorithm:

    1. Multiply by exp(i k/(2 z L_in) (L_in - L_out)(x1² + y1²)) and take
       fftshift(fft2(.)).
    2. Multiply by exp(-i π λ z L_in/L_out (fx² + fy²)) on the source
       frequency grid and take ifft2(ifftshift(.)).
    3. Multiply by exp(i k z - i k/(2 z L_out)(L_in - L_out)(x2² + y2²))
       and scale by (L_out/L_in)(dx1²/dx2²).

    The scale keeps Σ|u|² dx² equal in both planes. With L_out = L_in the
    quadratic phases reduce to exp(i k z) and the result matches
    :func:`angular_spectrum` within the paraxial approximation.
    """
    square_size("field", field)
    l_in: float = positive_scalar("input_side_length", input_side_length)
    l_out: float = positive_scalar("output_side_length", output_side_length)
    lam: float = positive_scalar("wavelength", wavelength)
    z: float = nonzero_scalar("distance", distance)
    if backend is not None:
        field = backend.to_device(field)
    propagated: Complex[Array, " hh ww"] = _two_step_fresnel_impl(
        field,
        jnp.asarray(l_in, dtype=jnp.float64),
        jnp.asarray(l_out, dtype=jnp.float64),
        jnp.asarray(lam, dtype=jnp.float64),
        jnp.asarray(z, dtype=jnp.float64),
    )
    return propagated
