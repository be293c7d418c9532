"""Type definitions and factory functions for huygens.

Extended Summary
----------------
Core type definitions including PyTree value objects, scalar type
aliases, diagnostic enumerations and factory functions for type-safe
construction.

Routine Listings
----------------
:func:`make_propagation_params`
    Factory function for PropagationParams creation.
:func:`make_propagator_comparison`
    Factory function for PropagatorComparison creation.
:class:`PropagationParams`
    PyTree for wavelength, distance, windows and sample count.
:class:`LaguerreGaussianMode`
    PyTree for phase, intensity and field of an LG mode.
:class:`PropagatorComparison`
    PyTree for the outputs of both propagators.
:class:`SamplingStatus`
    Enumeration of sampling check outcomes.
:class:`FresnelRegime`
    Enumeration of Fresnel-number regimes.
:class:`FresnelReport`
    Fresnel number with its regime.
:class:`SamplingReport`
    Sampling status with advisory corrections.

Notes
-----
Always use factory functions for creating PyTree instances to ensure
proper validation. All PyTrees are registered with JAX.
"""

from .common_types import (
    FresnelRegime,
    FresnelReport,
    LaguerreGaussianMode,
    PropagationParams,
    PropagatorComparison,
    SamplingReport,
    SamplingStatus,
    ScalarInteger,
    ScalarNumeric,
)
from .factory import make_propagation_params, make_propagator_comparison

__all__: list[str] = [
    "FresnelRegime",
    "FresnelReport",
    "LaguerreGaussianMode",
    "make_propagation_params",
    "make_propagator_comparison",
    "PropagationParams",
    "PropagatorComparison",
    "SamplingReport",
    "SamplingStatus",
    "ScalarInteger",
    "ScalarNumeric",
]
