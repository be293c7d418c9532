"""Tests for factory functions in huygens.types.factory module."""

import chex
import jax
import jax.numpy as jnp
import pytest
from absl.testing import parameterized

from huygens.types import (
    PropagationParams,
    PropagatorComparison,
    make_propagation_params,
    make_propagator_comparison,
)
from huygens.utils import (
    InvalidDimensionError,
    cm,
    nm,
)


class TestMakePropagationParams(chex.TestCase, parameterized.TestCase):
    """Test the make_propagation_params factory function."""

    @chex.variants(without_jit=True)
    def test_basic_creation(self) -> None:
        """Scalars are stored as float64 arrays, M as a plain int."""
        var_make_params = self.variant(make_propagation_params)
        params = var_make_params(500e-9, 0.3, 1.28e-2, 2048)
        chex.assert_equal(isinstance(params, PropagationParams), True)
        chex.assert_equal(isinstance(params.wavelength, jax.Array), True)
        chex.assert_type(params.wavelength, jnp.float64)
        chex.assert_equal(params.num_samples, 2048)
        chex.assert_trees_all_close(params.distance, 0.3)

    @chex.variants(without_jit=True)
    def test_output_window_defaults_to_input(self) -> None:
        var_make_params = self.variant(make_propagation_params)
        params = var_make_params(500e-9, 0.3, 1.28e-2, 256)
        chex.assert_trees_all_close(
            params.output_side_length, params.input_side_length
        )

    @chex.variants(without_jit=True)
    def test_derived_quantities(self) -> None:
        """Wavenumber and sample intervals follow from the fields."""
        var_make_params = self.variant(make_propagation_params)
        params = var_make_params(
            500e-9, 0.1, 1e-3, 100, output_side_length=2e-3
        )
        chex.assert_trees_all_close(
            params.wavenumber, 2 * jnp.pi / 500e-9, rtol=1e-12
        )
        chex.assert_trees_all_close(params.input_spacing, 1e-5, rtol=1e-12)
        chex.assert_trees_all_close(params.output_spacing, 2e-5, rtol=1e-12)

    def test_unit_multipliers(self) -> None:
        params = make_propagation_params(500 * nm, 30 * cm, 1.28 * cm, 2048)
        chex.assert_trees_all_close(params.wavelength, 5e-7, rtol=1e-12)
        chex.assert_trees_all_close(params.distance, 0.3, rtol=1e-12)
        chex.assert_trees_all_close(
            params.input_side_length, 1.28e-2, rtol=1e-12
        )

    def test_zero_distance_accepted(self) -> None:
        params = make_propagation_params(500e-9, 0.0, 1e-3, 64)
        chex.assert_trees_all_close(params.distance, 0.0)

    def test_pytree_round_trip_keeps_samples(self) -> None:
        """num_samples stays static through flatten / unflatten."""
        params = make_propagation_params(500e-9, 0.1, 1e-3, 64)
        leaves, treedef = jax.tree_util.tree_flatten(params)
        chex.assert_equal(len(leaves), 4)
        rebuilt = jax.tree_util.tree_unflatten(treedef, leaves)
        chex.assert_equal(rebuilt.num_samples, 64)

    @parameterized.named_parameters(
        ("zero_wavelength", 0.0, 0.1, 1e-3, 64),
        ("negative_wavelength", -500e-9, 0.1, 1e-3, 64),
        ("zero_side_length", 500e-9, 0.1, 0.0, 64),
        ("zero_samples", 500e-9, 0.1, 1e-3, 0),
        ("negative_samples", 500e-9, 0.1, 1e-3, -8),
        ("infinite_distance", 500e-9, float("inf"), 1e-3, 64),
        ("nan_distance", 500e-9, float("nan"), 1e-3, 64),
    )
    def test_invalid_values_raise(
        self, wavelength, distance, side_length, num_samples
    ) -> None:
        with pytest.raises(InvalidDimensionError):
            make_propagation_params(
                wavelength, distance, side_length, num_samples
            )

    def test_invalid_output_window_raises(self) -> None:
        with pytest.raises(InvalidDimensionError):
            make_propagation_params(
                500e-9, 0.1, 1e-3, 64, output_side_length=-1e-3
            )


class TestMakePropagatorComparison(chex.TestCase):
    """Test the make_propagator_comparison factory function."""

    def setUp(self) -> None:
        super().setUp()
        self.size = 16
        rows = jnp.arange(self.size, dtype=jnp.float64)
        self.ramp = jnp.tile(
            jnp.exp(1j * 0.5 * rows)[:, None], (1, self.size)
        )

    @chex.variants(without_jit=True)
    def test_intensities_and_shapes(self) -> None:
        var_make_comparison = self.variant(make_propagator_comparison)
        two_step = 2.0 * self.ramp
        comparison = var_make_comparison(self.ramp, two_step)
        chex.assert_equal(isinstance(comparison, PropagatorComparison), True)
        chex.assert_shape(comparison.asm_intensity, (self.size, self.size))
        chex.assert_shape(comparison.asm_midline_phase, (self.size,))
        chex.assert_trees_all_close(
            comparison.asm_intensity, jnp.ones((self.size, self.size))
        )
        chex.assert_trees_all_close(
            comparison.two_step_intensity,
            4.0 * jnp.ones((self.size, self.size)),
        )

    @chex.variants(without_jit=True)
    def test_midline_phase_is_unwrapped(self) -> None:
        """A linear phase ramp along the column comes back unwrapped."""
        var_make_comparison = self.variant(make_propagator_comparison)
        comparison = var_make_comparison(self.ramp, self.ramp)
        expected = 0.5 * jnp.arange(self.size, dtype=jnp.float64)
        chex.assert_trees_all_close(
            comparison.asm_midline_phase, expected, atol=1e-12
        )
        chex.assert_trees_all_close(
            comparison.midline_phase_difference,
            jnp.zeros(self.size),
            atol=1e-12,
        )

    @chex.variants(without_jit=True)
    def test_phase_difference(self) -> None:
        var_make_comparison = self.variant(make_propagator_comparison)
        shifted = self.ramp * jnp.exp(-0.25j)
        comparison = var_make_comparison(self.ramp, shifted)
        chex.assert_trees_all_close(
            comparison.midline_phase_difference,
            jnp.full((self.size,), 0.25),
            atol=1e-12,
        )

    def test_non_finite_field_raises(self) -> None:
        bad = self.ramp.at[3, 3].set(jnp.nan)
        with pytest.raises(InvalidDimensionError):
            make_propagator_comparison(self.ramp, bad)
