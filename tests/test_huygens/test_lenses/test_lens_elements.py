"""Tests for the thin lens in huygens.lenses.lens_elements module."""

import chex
import jax.numpy as jnp
import pytest
from absl.testing import parameterized

from huygens.lenses import thin_lens
from huygens.prop import angular_spectrum
from huygens.utils import (
    DegenerateParameterError,
    InvalidDimensionError,
    spatial_grid,
)


class TestThinLens(chex.TestCase, parameterized.TestCase):
    """Test the thin_lens function."""

    def setUp(self) -> None:
        super().setUp()
        self.wavelength = 500e-9
        self.side_length = 2e-3
        self.num_samples = 256
        self.field = jnp.ones(
            (self.num_samples, self.num_samples), dtype=jnp.complex128
        )
        self.xx, self.yy = spatial_grid(self.side_length, self.num_samples)

    @chex.variants(without_jit=True)
    def test_pupil_amplitude(self) -> None:
        """Unit amplitude inside the pupil and zero outside."""
        radius = 5e-4
        var_thin_lens = self.variant(thin_lens)
        out = var_thin_lens(
            self.field, self.side_length, self.wavelength, 0.1, radius
        )
        inside = jnp.sqrt(self.xx**2 + self.yy**2) <= radius
        chex.assert_shape(out, (self.num_samples, self.num_samples))
        chex.assert_trees_all_close(
            jnp.abs(out), inside.astype(jnp.float64), atol=1e-12
        )

    @chex.variants(without_jit=True)
    @parameterized.named_parameters(
        ("converging", 0.1),
        ("diverging", -0.1),
    )
    def test_quadratic_phase(self, focal_distance: float) -> None:
        var_thin_lens = self.variant(thin_lens)
        out = var_thin_lens(
            self.field, self.side_length, self.wavelength, focal_distance, 1.0
        )
        k = 2 * jnp.pi / self.wavelength
        expected = jnp.exp(
            -1j * k / (2 * focal_distance) * (self.xx**2 + self.yy**2)
        )
        chex.assert_trees_all_close(out, expected, atol=1e-9)

    @chex.variants(without_jit=True)
    def test_plane_wave_focuses(self) -> None:
        """A plane wave through the lens peaks on axis at the focus."""
        focal_distance = 0.1
        var_thin_lens = self.variant(thin_lens)
        lensed = var_thin_lens(
            self.field, self.side_length, self.wavelength, focal_distance, 5e-4
        )
        focused = angular_spectrum(
            lensed, self.side_length, self.wavelength, focal_distance
        )
        intensity = jnp.abs(focused) ** 2
        center = self.num_samples // 2
        chex.assert_equal(bool(intensity[center, center] > 50.0), True)

    def test_zero_focal_distance_raises(self) -> None:
        with pytest.raises(DegenerateParameterError):
            thin_lens(self.field, self.side_length, self.wavelength, 0.0, 1e-3)

    @parameterized.named_parameters(
        ("zero_radius", 2e-3, 500e-9, 0.0),
        ("negative_side_length", -2e-3, 500e-9, 1e-3),
        ("zero_wavelength", 2e-3, 0.0, 1e-3),
    )
    def test_invalid_scalars_raise(
        self, side_length, wavelength, radius
    ) -> None:
        with pytest.raises(InvalidDimensionError):
            thin_lens(self.field, side_length, wavelength, 0.1, radius)

    def test_non_square_field_raises(self) -> None:
        with pytest.raises(InvalidDimensionError):
            thin_lens(
                jnp.ones((4, 8), dtype=jnp.complex128),
                self.side_length,
                self.wavelength,
                0.1,
                1e-3,
            )
