"""Tests for sampling grids in huygens.utils.grids module."""

import chex
import jax.numpy as jnp
import pytest
from absl.testing import parameterized

from huygens.utils import (
    InvalidDimensionError,
    build_axis,
    build_frequency_axis,
    frequency_grid,
    meshgrid,
    spatial_grid,
)


class TestBuildAxis(chex.TestCase, parameterized.TestCase):
    """Test the build_axis function."""

    @chex.variants(without_jit=True)
    @parameterized.named_parameters(
        ("m_8", 8),
        ("m_64", 64),
        ("m_256", 256),
    )
    def test_axis_shape_and_spacing(self, num_samples: int) -> None:
        """Axis has M samples spaced L / M apart."""
        side_length = 1e-3
        var_build_axis = self.variant(build_axis)
        x = var_build_axis(side_length, num_samples)
        chex.assert_shape(x, (num_samples,))
        chex.assert_trees_all_close(
            jnp.diff(x),
            jnp.full((num_samples - 1,), side_length / num_samples),
            rtol=1e-10,
        )

    @chex.variants(without_jit=True)
    def test_axis_endpoints(self) -> None:
        """Axis starts at -L/2 and stops one sample short of L/2."""
        var_build_axis = self.variant(build_axis)
        x = var_build_axis(1e-3, 8)
        chex.assert_trees_all_close(x[0], -5e-4, rtol=1e-12)
        chex.assert_trees_all_close(x[-1], 5e-4 - 1.25e-4, rtol=1e-12)

    @chex.variants(without_jit=True)
    def test_origin_at_center_index(self) -> None:
        """Origin sits at index M // 2 for even M."""
        var_build_axis = self.variant(build_axis)
        x = var_build_axis(1.28e-2, 64)
        chex.assert_trees_all_close(x[32], 0.0, atol=1e-15)

    def test_non_positive_side_length_raises(self) -> None:
        with pytest.raises(InvalidDimensionError):
            build_axis(-1e-3, 8)
        with pytest.raises(InvalidDimensionError):
            build_axis(0.0, 8)

    def test_non_positive_samples_raises(self) -> None:
        with pytest.raises(InvalidDimensionError):
            build_axis(1e-3, 0)


class TestBuildFrequencyAxis(chex.TestCase):
    """Test the build_frequency_axis function."""

    @chex.variants(without_jit=True)
    def test_frequency_endpoints(self) -> None:
        """Frequencies run from -1/(2 dx) in steps of 1/L."""
        var_build_frequency_axis = self.variant(build_frequency_axis)
        fx = var_build_frequency_axis(1e-3, 8)
        chex.assert_shape(fx, (8,))
        chex.assert_trees_all_close(fx[0], -4000.0, rtol=1e-12)
        chex.assert_trees_all_close(fx[1] - fx[0], 1000.0, rtol=1e-10)
        chex.assert_trees_all_close(fx[4], 0.0, atol=1e-9)

    @chex.variants(without_jit=True)
    def test_matches_shifted_fftfreq(self) -> None:
        """For even M the axis equals fftshift(fftfreq(M, dx))."""
        side_length, num_samples = 2e-3, 128
        var_build_frequency_axis = self.variant(build_frequency_axis)
        fx = var_build_frequency_axis(side_length, num_samples)
        expected = jnp.fft.fftshift(
            jnp.fft.fftfreq(num_samples, side_length / num_samples)
        )
        chex.assert_trees_all_close(fx, expected, rtol=1e-10, atol=1e-8)


class TestMeshgrid(chex.TestCase):
    """Test meshgrid, spatial_grid and frequency_grid."""

    @chex.variants(without_jit=True)
    def test_meshgrid_orientation(self) -> None:
        """xx varies along columns and yy along rows."""
        x = jnp.linspace(-1.0, 1.0, 5)
        y = jnp.linspace(-2.0, 2.0, 3)
        var_meshgrid = self.variant(meshgrid)
        xx, yy = var_meshgrid(x, y)
        chex.assert_shape(xx, (3, 5))
        chex.assert_shape(yy, (3, 5))
        chex.assert_trees_all_close(xx[1, :], x)
        chex.assert_trees_all_close(yy[:, 2], y)

    def test_meshgrid_empty_axis_raises(self) -> None:
        with pytest.raises(InvalidDimensionError):
            meshgrid(jnp.zeros((0,)), jnp.linspace(0.0, 1.0, 4))

    @chex.variants(without_jit=True)
    def test_spatial_grid(self) -> None:
        """Spatial grid meshes build_axis with itself."""
        var_spatial_grid = self.variant(spatial_grid)
        xx, yy = var_spatial_grid(1e-3, 16)
        x = build_axis(1e-3, 16)
        chex.assert_shape(xx, (16, 16))
        chex.assert_trees_all_close(xx[0, :], x)
        chex.assert_trees_all_close(yy[:, 0], x)
        chex.assert_trees_all_close(xx[8, 8], 0.0, atol=1e-15)
        chex.assert_trees_all_close(yy[8, 8], 0.0, atol=1e-15)

    @chex.variants(without_jit=True)
    def test_frequency_grid(self) -> None:
        """Frequency grid meshes build_frequency_axis with itself."""
        var_frequency_grid = self.variant(frequency_grid)
        fx, fy = var_frequency_grid(1e-3, 16)
        f = build_frequency_axis(1e-3, 16)
        chex.assert_shape(fx, (16, 16))
        chex.assert_trees_all_close(fx[3, :], f)
        chex.assert_trees_all_close(fy[:, 3], f)
