"""Common type definitions for huygens.

Extended Summary
----------------
Scalar type aliases, PyTree value objects and enumerations shared by
every subpackage. All PyTrees are immutable ``NamedTuple`` classes
registered with JAX so they can cross ``jit`` and ``vmap`` boundaries.

Routine Listings
----------------
ScalarInteger : TypeAlias
    Python int or 0-d JAX integer array.
ScalarNumeric : TypeAlias
    Any real scalar accepted as a physical parameter.
PropagationParams : PyTree
    Wavelength, distance, window sizes and sample count of a run.
LaguerreGaussianMode : PyTree
    Phase, intensity and complex field of a generated LG mode.
PropagatorComparison : PyTree
    Fields and midline phases produced by both propagators.
SamplingStatus : IntEnum
    Outcome of the critical sampling check.
FresnelRegime : IntEnum
    Outcome of the Fresnel-number check.
FresnelReport : NamedTuple
    Fresnel number paired with its regime.
SamplingReport : NamedTuple
    Sampling status paired with advisory corrections.

Notes
-----
Always use the factory functions in :mod:`huygens.types.factory` to
create PyTree instances; they validate their inputs.
"""

from enum import IntEnum

import jax
import jax.numpy as jnp
from beartype.typing import NamedTuple, Tuple, TypeAlias, Union
from jax.tree_util import register_pytree_node_class
from jaxtyping import Array, Complex, Float, Int, Num

jax.config.update("jax_enable_x64", True)

ScalarInteger: TypeAlias = Union[int, Int[Array, " "]]
ScalarNumeric: TypeAlias = Union[int, float, Num[Array, " "]]


@register_pytree_node_class
class PropagationParams(NamedTuple):
    """PyTree for the parameters shared by both propagators.

    Attributes
    ----------
    wavelength : Float[Array, " "]
        Wavelength in meters.
    distance : Float[Array, " "]
        Propagation distance in meters.
    input_side_length : Float[Array, " "]
        Side length of the source-plane window in meters.
    output_side_length : Float[Array, " "]
        Side length of the observation-plane window in meters. Only the
        two-step Fresnel method uses it.
    num_samples : int
        Samples per dimension. Kept as static auxiliary data since it
        fixes array shapes.
    """

    wavelength: Float[Array, " "]
    distance: Float[Array, " "]
    input_side_length: Float[Array, " "]
    output_side_length: Float[Array, " "]
    num_samples: int

    def tree_flatten(
        self,
    ) -> Tuple[
        Tuple[
            Float[Array, " "],
            Float[Array, " "],
            Float[Array, " "],
            Float[Array, " "],
        ],
        int,
    ]:
        """Flatten into array leaves, keeping the sample count static."""
        return (
            (
                self.wavelength,
                self.distance,
                self.input_side_length,
                self.output_side_length,
            ),
            self.num_samples,
        )

    @classmethod
    def tree_unflatten(
        cls,
        aux_data: int,
        children: Tuple[
            Float[Array, " "],
            Float[Array, " "],
            Float[Array, " "],
            Float[Array, " "],
        ],
    ) -> "PropagationParams":
        """Rebuild PropagationParams from its leaves."""
        return cls(*children, num_samples=aux_data)

    @property
    def wavenumber(self) -> Float[Array, " "]:
        """Free-space wavenumber 2π/λ."""
        return 2.0 * jnp.pi / self.wavelength

    @property
    def input_spacing(self) -> Float[Array, " "]:
        """Source-plane sample interval L_in / M."""
        return self.input_side_length / self.num_samples

    @property
    def output_spacing(self) -> Float[Array, " "]:
        """Observation-plane sample interval L_out / M."""
        return self.output_side_length / self.num_samples


@register_pytree_node_class
class LaguerreGaussianMode(NamedTuple):
    """PyTree for a Laguerre-Gaussian mode sampled on a grid.

    Unpacks as ``phase, intensity, field``.

    Attributes
    ----------
    phase : Float[Array, " hh ww"]
        Wrapped phase of the field in (-π, π].
    intensity : Float[Array, " hh ww"]
        Squared modulus of the field.
    field : Complex[Array, " hh ww"]
        Complex amplitude. Not normalised to unit peak or unit power.
    """

    phase: Float[Array, " hh ww"]
    intensity: Float[Array, " hh ww"]
    field: Complex[Array, " hh ww"]

    def tree_flatten(
        self,
    ) -> Tuple[
        Tuple[
            Float[Array, " hh ww"],
            Float[Array, " hh ww"],
            Complex[Array, " hh ww"],
        ],
        None,
    ]:
        """Flatten the mode into its three arrays."""
        return ((self.phase, self.intensity, self.field), None)

    @classmethod
    def tree_unflatten(
        cls,
        _aux_data: None,
        children: Tuple[
            Float[Array, " hh ww"],
            Float[Array, " hh ww"],
            Complex[Array, " hh ww"],
        ],
    ) -> "LaguerreGaussianMode":
        """Rebuild the mode from its three arrays."""
        return cls(*children)


@register_pytree_node_class
class PropagatorComparison(NamedTuple):
    """PyTree holding the outputs of both propagators for one input.

    Attributes
    ----------
    asm_field : Complex[Array, " mm mm"]
        Angular spectrum output on the source grid.
    two_step_field : Complex[Array, " mm mm"]
        Two-step Fresnel output on the observation grid.
    asm_intensity : Float[Array, " mm mm"]
        ``|asm_field|²``.
    two_step_intensity : Float[Array, " mm mm"]
        ``|two_step_field|²``.
    asm_midline_phase : Float[Array, " mm"]
        Unwrapped phase of the middle column of ``asm_field``.
    two_step_midline_phase : Float[Array, " mm"]
        Unwrapped phase of the middle column of ``two_step_field``.
    midline_phase_difference : Float[Array, " mm"]
        ``asm_midline_phase - two_step_midline_phase``.
    """

    asm_field: Complex[Array, " mm mm"]
    two_step_field: Complex[Array, " mm mm"]
    asm_intensity: Float[Array, " mm mm"]
    two_step_intensity: Float[Array, " mm mm"]
    asm_midline_phase: Float[Array, " mm"]
    two_step_midline_phase: Float[Array, " mm"]
    midline_phase_difference: Float[Array, " mm"]

    def tree_flatten(
        self,
    ) -> Tuple[
        Tuple[
            Complex[Array, " mm mm"],
            Complex[Array, " mm mm"],
            Float[Array, " mm mm"],
            Float[Array, " mm mm"],
            Float[Array, " mm"],
            Float[Array, " mm"],
            Float[Array, " mm"],
        ],
        None,
    ]:
        """Flatten the comparison into its arrays."""
        return (
            (
                self.asm_field,
                self.two_step_field,
                self.asm_intensity,
                self.two_step_intensity,
                self.asm_midline_phase,
                self.two_step_midline_phase,
                self.midline_phase_difference,
            ),
            None,
        )

    @classmethod
    def tree_unflatten(
        cls,
        _aux_data: None,
        children: Tuple[
            Complex[Array, " mm mm"],
            Complex[Array, " mm mm"],
            Float[Array, " mm mm"],
            Float[Array, " mm mm"],
            Float[Array, " mm"],
            Float[Array, " mm"],
            Float[Array, " mm"],
        ],
    ) -> "PropagatorComparison":
        """Rebuild the comparison from its arrays."""
        return cls(*children)


class SamplingStatus(IntEnum):
    """Result of comparing dx with the critical interval λz/L.

    Values follow the -1 / 0 / 1 convention of the sampling check, with
    ``INVALID`` for inputs where no comparison is possible.
    """

    UNDERSAMPLED = -1
    CRITICAL = 0
    OVERSAMPLED = 1
    INVALID = 2


class FresnelRegime(IntEnum):
    """Classification of a Fresnel number against the 1 and 30 limits."""

    GOOD = 0
    BORDERLINE = 1
    OUTSIDE = 2
    INVALID = 3


class FresnelReport(NamedTuple):
    """Fresnel number a²/(λz) and its regime.

    Attributes
    ----------
    fresnel_number : float
        Dimensionless Fresnel number, ``nan`` when not computable.
    regime : FresnelRegime
        Classification of ``fresnel_number``.
    """

    fresnel_number: float
    regime: FresnelRegime


class SamplingReport(NamedTuple):
    """Sampling status with advisory corrections.

    The suggested values are never applied automatically.

    Attributes
    ----------
    status : SamplingStatus
        Outcome of the comparison of dx with ``critical_interval``.
    critical_interval : float
        Critical sample interval λz/L in meters.
    suggested_distance : float
        Distance L²/(Mλ) that would make the current grid critical.
    suggested_side_length : float
        Window λz/(dx M) that would make the current grid critical.
    suggested_samples : float
        Sample count L/dx_crit that would make the current grid critical.
    """

    status: SamplingStatus
    critical_interval: float
    suggested_distance: float
    suggested_side_length: float
    suggested_samples: float
