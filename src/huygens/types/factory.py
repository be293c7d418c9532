"""Factory functions for creating data structures.

Extended Summary
----------------
Factory functions for the PyTrees in :mod:`huygens.types.common_types`
with runtime type checking. Validation runs eagerly on concrete values
and raises on invalid input.

Routine Listings
----------------
make_propagation_params : function
    Creates a PropagationParams instance with validation
make_propagator_comparison : function
    Creates a PropagatorComparison from two propagated fields

Notes
-----
Always use these factory functions instead of directly instantiating the
NamedTuple classes to ensure proper runtime type checking of the
contents.
"""

import jax
import jax.numpy as jnp
from beartype import beartype
from beartype.typing import Optional
from jaxtyping import Array, Complex, Float, jaxtyped

from huygens.utils.checks import finite_scalar, positive_count, positive_scalar
from huygens.utils.errors import InvalidDimensionError

from .common_types import (
    PropagationParams,
    PropagatorComparison,
    ScalarInteger,
    ScalarNumeric,
)

jax.config.update("jax_enable_x64", True)


@jaxtyped(typechecker=beartype)
def make_propagation_params(
    wavelength: ScalarNumeric,
    distance: ScalarNumeric,
    input_side_length: ScalarNumeric,
    num_samples: ScalarInteger,
    output_side_length: Optional[ScalarNumeric] = None,
) -> PropagationParams:
    """Factory function for PropagationParams with data validation.

    Parameters
    ----------
    wavelength : ScalarNumeric
        Wavelength in meters.
    distance : ScalarNumeric
        Propagation distance in meters. Zero is accepted here; the
        two-step propagator rejects it on its own.
    input_side_length : ScalarNumeric
        Source window side length in meters.
    num_samples : ScalarInteger
        Samples per dimension.
    output_side_length : ScalarNumeric, optional
        Observation window side length in meters. Defaults to
        ``input_side_length``.

    Returns
    -------
    validated_params : PropagationParams
        Validated parameter set.

    Raises
    ------
    InvalidDimensionError
        If the wavelength, a side length or the sample count is not
        positive, or the distance is not finite.

    Notes
    -----
    Algorithm:

    - Validate wavelength, side lengths and sample count are positive
    - Validate distance is finite
    - Convert scalars to float64 JAX arrays
    - Create and return PropagationParams instance
    """
    if output_side_length is None:
        output_side_length = input_side_length

    def validate_and_create() -> PropagationParams:
        def check_lengths() -> tuple:
            return (
                positive_scalar("wavelength", wavelength),
                positive_scalar("input_side_length", input_side_length),
                positive_scalar("output_side_length", output_side_length),
            )

        def check_distance() -> float:
            return finite_scalar("distance", distance)

        lam, l_in, l_out = check_lengths()
        z: float = check_distance()
        mm: int = positive_count("num_samples", num_samples)

        return PropagationParams(
            wavelength=jnp.asarray(lam, dtype=jnp.float64),
            distance=jnp.asarray(z, dtype=jnp.float64),
            input_side_length=jnp.asarray(l_in, dtype=jnp.float64),
            output_side_length=jnp.asarray(l_out, dtype=jnp.float64),
            num_samples=mm,
        )

    validated_params: PropagationParams = validate_and_create()
    return validated_params


@jaxtyped(typechecker=beartype)
def make_propagator_comparison(
    asm_field: Complex[Array, " mm mm"],
    two_step_field: Complex[Array, " mm mm"],
) -> PropagatorComparison:
    """Build a PropagatorComparison from two propagated fields.

    Intensities are ``|u|²``. Midline phases are taken along the middle
    column (index ``M // 2``) and unwrapped along the column.

    Parameters
    ----------
    asm_field : Complex[Array, " mm mm"]
        Angular spectrum output.
    two_step_field : Complex[Array, " mm mm"]
        Two-step Fresnel output.

    Returns
    -------
    comparison : PropagatorComparison
        Both fields with their derived quantities.

    Raises
    ------
    InvalidDimensionError
        If either field contains non-finite samples.
    """
    if not bool(jnp.all(jnp.isfinite(asm_field))) or not bool(
        jnp.all(jnp.isfinite(two_step_field))
    ):
        raise InvalidDimensionError("propagated fields must be finite")
    mid: int = asm_field.shape[1] // 2
    asm_phase: Float[Array, " mm"] = jnp.unwrap(jnp.angle(asm_field[:, mid]))
    two_step_phase: Float[Array, " mm"] = jnp.unwrap(
        jnp.angle(two_step_field[:, mid])
    )
    comparison: PropagatorComparison = PropagatorComparison(
        asm_field=asm_field,
        two_step_field=two_step_field,
        asm_intensity=jnp.abs(asm_field) ** 2,
        two_step_intensity=jnp.abs(two_step_field) ** 2,
        asm_midline_phase=asm_phase,
        two_step_midline_phase=two_step_phase,
        midline_phase_difference=asm_phase - two_step_phase,
    )
    return comparison
