"""Fresnel-number and sampling diagnostics.

Extended Summary
----------------
Scalar checks run before a propagation to judge whether the Fresnel
approximation holds and whether the grid samples the quadratic phase
chirp of the propagation kernel adequately. Both functions classify and
report; they never raise and never modify the propagation parameters.

Routine Listings
----------------
fresnel_number : function
    Fresnel number a²/(λz) with its regime
sampling_status : function
    Compare dx with the critical interval λz/L

Notes
-----
Invalid input (NaN, infinite or non-positive values) produces an
``INVALID`` classification with NaN values in the report.

References
----------
1. Voelz, D. G. and Roggemann, M. C. "Digital simulation of scalar
   optical diffraction: revisiting chirp function sampling criteria and
   consequences", Applied Optics 48(32) (2009)
"""

import logging
import math

import jax
import jax.numpy as jnp
from beartype import beartype
from jaxtyping import jaxtyped

from huygens.types import (
    FresnelRegime,
    FresnelReport,
    SamplingReport,
    SamplingStatus,
    ScalarNumeric,
)

jax.config.update("jax_enable_x64", True)

logger = logging.getLogger(__name__)

_FRESNEL_GOOD_LIMIT: float = 1.0
_FRESNEL_BORDERLINE_LIMIT: float = 30.0


def _as_positive(value: ScalarNumeric) -> float:
    """Float value, or NaN when it is not finite and positive."""
    scalar: float = float(jnp.asarray(value))
    if not math.isfinite(scalar) or scalar <= 0:
        return math.nan
    return scalar


def _ratio(numerator: float, denominator: float) -> float:
    if not math.isfinite(numerator) or not math.isfinite(denominator):
        return math.nan
    if denominator == 0:
        return math.nan
    return numerator / denominator


@jaxtyped(typechecker=beartype)
def fresnel_number(
    wavelength: ScalarNumeric,
    distance: ScalarNumeric,
    aperture_radius: ScalarNumeric,
) -> FresnelReport:
    """Fresnel number of an aperture and its validity regime.

    Parameters
    ----------
    wavelength : ScalarNumeric
        Wavelength λ in meters.
    distance : ScalarNumeric
        Propagation distance z in meters.
    aperture_radius : ScalarNumeric
        Aperture (or beam) half-width a in meters.

    Returns
    -------
    report : FresnelReport
        ``N_f = a² / (λ z)`` and its regime: GOOD for ``N_f <= 1``,
        BORDERLINE for ``1 < N_f <= 30``, OUTSIDE above 30. INVALID with
        ``N_f = nan`` if any input is not finite and positive.

    Examples
    --------
    >>> fresnel_number(500e-9, 0.3, 3e-3).regime
    <FresnelRegime.OUTSIDE: 2>
    """
    lam: float = _as_positive(wavelength)
    z: float = _as_positive(distance)
    a: float = _as_positive(aperture_radius)
    number: float = _ratio(a**2, lam * z)

    if math.isnan(number):
        regime: FresnelRegime = FresnelRegime.INVALID
    elif number <= _FRESNEL_GOOD_LIMIT:
        regime = FresnelRegime.GOOD
    elif number <= _FRESNEL_BORDERLINE_LIMIT:
        regime = FresnelRegime.BORDERLINE
    else:
        regime = FresnelRegime.OUTSIDE

    logger.info(f"Fresnel number {number:.4g}: {regime.name}")
    return FresnelReport(fresnel_number=number, regime=regime)


@jaxtyped(typechecker=beartype)
def sampling_status(
    wavelength: ScalarNumeric,
    distance: ScalarNumeric,
    side_length: ScalarNumeric,
    sample_interval: ScalarNumeric,
    num_samples: ScalarNumeric,
) -> SamplingReport:
    """Classify a grid against the critical sample interval λz/L.

    Parameters
    ----------
    wavelength : ScalarNumeric
        Wavelength λ in meters.
    distance : ScalarNumeric
        Propagation distance z in meters.
    side_length : ScalarNumeric
        Window side L in meters.
    sample_interval : ScalarNumeric
        Sample interval dx in meters.
    num_samples : ScalarNumeric
        Samples per dimension M.

    Returns
    -------
    report : SamplingReport
        CRITICAL when ``dx == λz/L``, OVERSAMPLED when ``dx`` is larger,
        UNDERSAMPLED when smaller, INVALID otherwise. The suggested
        distance ``L²/(Mλ)``, side length ``λz/(dx M)`` and sample count
        ``L/dx_crit`` each bring the grid to critical sampling; they are
        NaN when they cannot be computed.

    Notes
    -----
    The comparison is exact on float64 values; a grid built as
    ``dx = λz/L`` in the same arithmetic classifies as CRITICAL.

    Examples
    --------
    >>> report = sampling_status(500e-9, 0.3, 1.28e-2, 1.28e-2 / 2048, 2048)
    >>> report.status
    <SamplingStatus.UNDERSAMPLED: -1>
    """
    lam: float = _as_positive(wavelength)
    z: float = _as_positive(distance)
    length: float = _as_positive(side_length)
    dx: float = _as_positive(sample_interval)
    mm: float = _as_positive(num_samples)

    critical: float = _ratio(lam * z, length)
    if math.isnan(critical) or math.isnan(dx):
        status: SamplingStatus = SamplingStatus.INVALID
    elif dx == critical:
        status = SamplingStatus.CRITICAL
    elif dx > critical:
        status = SamplingStatus.OVERSAMPLED
    else:
        status = SamplingStatus.UNDERSAMPLED

    report: SamplingReport = SamplingReport(
        status=status,
        critical_interval=critical,
        suggested_distance=_ratio(_ratio(length**2, mm), lam),
        suggested_side_length=_ratio(lam * z, dx * mm),
        suggested_samples=_ratio(length, critical),
    )

    logger.info(
        f"Sampling {status.name}: dx = {dx:.4g} m, critical dx = {critical:.4g} m"
    )
    if status is not SamplingStatus.CRITICAL:
        logger.info(
            f"Critical sampling needs z = {report.suggested_distance:.4g} m, "
            f"L = {report.suggested_side_length:.4g} m "
            f"or M = {report.suggested_samples:.1f}"
        )
    return report
