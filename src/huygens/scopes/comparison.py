"""Side-by-side propagation with both free-space methods.

Extended Summary
----------------
Runs the angular spectrum and the two-step Fresnel propagators on the
same source and collects what is needed to compare them: intensities,
unwrapped phase along the middle column and the phase difference.
:func:`simulate_lg_propagation` builds the whole chain from a
Laguerre-Gaussian source, with an optional ring aperture and thin lens.

Routine Listings
----------------
compare_propagators : function
    Propagate one field with both methods and compare the results
simulate_lg_propagation : function
    LG source, optional ring and lens, diagnostics, then comparison

Notes
-----
The two methods are only directly comparable when the observation
window equals the source window; the angular spectrum output always
lives on the source window.
"""

import logging

import jax
from beartype import beartype
from beartype.typing import Optional, Tuple
from jaxtyping import Array, Complex, Float, jaxtyped

from huygens.lenses import thin_lens
from huygens.models import lg_mode
from huygens.prop import (
    angular_spectrum,
    fresnel_number,
    sampling_status,
    two_step_fresnel,
)
from huygens.simul import draw_ring
from huygens.types import (
    FresnelReport,
    LaguerreGaussianMode,
    PropagationParams,
    PropagatorComparison,
    SamplingReport,
    ScalarInteger,
    ScalarNumeric,
    make_propagator_comparison,
)
from huygens.utils.backend import Backend
from huygens.utils.checks import square_size
from huygens.utils.errors import InconsistentGridError
from huygens.utils.grids import build_axis

jax.config.update("jax_enable_x64", True)

logger = logging.getLogger(__name__)


@jaxtyped(typechecker=beartype)
def compare_propagators(
    field: Complex[Array, " mm mm"],
    params: PropagationParams,
    backend: Optional[Backend] = None,
) -> PropagatorComparison:
    """Propagate a field with both methods and compare the outputs.

    Parameters
    ----------
    field : Complex[Array, " mm mm"]
        Source field sampled on the input window of ``params``.
    params : PropagationParams
        Wavelength, distance, windows and sample count.
    backend : Backend, optional
        Device to run both propagators on.

    Returns
    -------
    comparison : PropagatorComparison
        Both fields, their intensities, their unwrapped midline phases
        and the phase difference (angular spectrum minus two-step).

    Raises
    ------
    InconsistentGridError
        If the field side differs from ``params.num_samples``.
    DegenerateParameterError
        If the propagation distance is zero.
    """
    size: int = square_size("field", field)
    if size != params.num_samples:
        raise InconsistentGridError(
            f"field has {size} samples per side, params expect "
            f"{params.num_samples}"
        )
    if float(params.input_side_length) != float(params.output_side_length):
        logger.warning(
            "Observation window differs from the source window; the angular "
            "spectrum output stays on the source window"
        )

    logger.debug(
        f"Angular spectrum propagation over z = {float(params.distance):.4g} m"
    )
    asm_field: Complex[Array, " mm mm"] = angular_spectrum(
        field,
        params.input_side_length,
        params.wavelength,
        params.distance,
        backend=backend,
    )
    logger.debug("Two-step Fresnel propagation")
    two_step_field: Complex[Array, " mm mm"] = two_step_fresnel(
        field,
        params.input_side_length,
        params.output_side_length,
        params.wavelength,
        params.distance,
        backend=backend,
    )
    comparison: PropagatorComparison = make_propagator_comparison(
        asm_field, two_step_field
    )
    return comparison


@jaxtyped(typechecker=beartype)
def simulate_lg_propagation(
    params: PropagationParams,
    radial_index: ScalarInteger,
    azimuthal_index: ScalarInteger,
    beam_radius: ScalarNumeric,
    focal_distance: Optional[ScalarNumeric] = None,
    lens_radius: Optional[ScalarNumeric] = None,
    ring_diameters: Optional[Tuple[ScalarNumeric, ScalarNumeric]] = None,
    backend: Optional[Backend] = None,
) -> Tuple[PropagatorComparison, FresnelReport, SamplingReport]:
    """Propagate a Laguerre-Gaussian beam with both methods.

    Parameters
    ----------
    params : PropagationParams
        Wavelength, distance, windows and sample count.
    radial_index : ScalarInteger
        Radial index p of the source mode.
    azimuthal_index : ScalarInteger
        Azimuthal index l of the source mode.
    beam_radius : ScalarNumeric
        Waist w0 of the source in meters. Also used as the aperture
        half-width of the Fresnel-number check.
    focal_distance : ScalarNumeric, optional
        When given, a thin lens of this focal length is applied to the
        source before propagation.
    lens_radius : ScalarNumeric, optional
        Pupil radius of the lens in meters. Defaults to the input side
        length, which leaves the whole window unobstructed.
    ring_diameters : Tuple[ScalarNumeric, ScalarNumeric], optional
        ``(inner, outer)`` ring aperture diameters in pixels, applied
        to the source before the lens.
    backend : Backend, optional
        Device to run the propagators on.

    Returns
    -------
    comparison : PropagatorComparison
        Output of :func:`compare_propagators`.
    fresnel_report : FresnelReport
        Fresnel number for ``a = beam_radius``.
    sampling_report : SamplingReport
        Sampling status of the source grid, dx = L_in / M.

    Examples
    --------
    >>> from huygens.types import make_propagation_params
    >>> from huygens.utils import cm, nm
    >>> params = make_propagation_params(500 * nm, 30 * cm, 1.28 * cm, 2048)
    >>> comparison, fresnel, sampling = simulate_lg_propagation(
    ...     params, 0, 1, 0.3 * cm, focal_distance=30 * cm,
    ...     lens_radius=2.54 * cm,
    ... )
    """
    num_samples: int = params.num_samples
    x_axis: Float[Array, " mm"] = build_axis(
        params.input_side_length, num_samples
    )
    logger.debug(
        f"LG source p = {int(radial_index)}, l = {int(azimuthal_index)} on "
        f"{num_samples} x {num_samples} samples"
    )
    mode: LaguerreGaussianMode = lg_mode(
        radial_index,
        azimuthal_index,
        params.wavenumber,
        beam_radius,
        x_axis,
        x_axis,
    )

    fresnel_report: FresnelReport = fresnel_number(
        params.wavelength, params.distance, beam_radius
    )
    sampling_report: SamplingReport = sampling_status(
        params.wavelength,
        params.distance,
        params.input_side_length,
        params.input_spacing,
        num_samples,
    )

    source: Complex[Array, " mm mm"] = mode.field
    if ring_diameters is not None:
        inner, outer = ring_diameters
        logger.debug(f"Ring aperture {inner} / {outer} px")
        source = source * draw_ring(num_samples, inner, outer)
    if focal_distance is not None:
        if lens_radius is None:
            lens_radius = params.input_side_length
        logger.debug(f"Thin lens zf = {float(focal_distance):.4g} m")
        source = thin_lens(
            source,
            params.input_side_length,
            params.wavelength,
            focal_distance,
            lens_radius,
            backend=backend,
        )

    comparison: PropagatorComparison = compare_propagators(
        source, params, backend=backend
    )
    return comparison, fresnel_report, sampling_report
