"""Tests for aperture masks in huygens.simul.apertures module."""

import chex
import jax.numpy as jnp
import pytest
from absl.testing import parameterized

from huygens.simul import center_place, circular_pupil, draw_disk, draw_ring
from huygens.utils import (
    InconsistentGridError,
    InvalidDimensionError,
    spatial_grid,
)


class TestCenterPlace(chex.TestCase, parameterized.TestCase):
    """Test the center_place function."""

    @chex.variants(without_jit=True)
    def test_places_block_at_center(self) -> None:
        var_center_place = self.variant(center_place)
        placed = var_center_place(8, 8, jnp.ones((3, 3)))
        chex.assert_shape(placed, (8, 8))
        chex.assert_trees_all_close(jnp.sum(placed), 9.0)
        chex.assert_trees_all_close(placed[4, 4], 1.0)
        chex.assert_trees_all_close(placed[3:6, 3:6], jnp.ones((3, 3)))

    @chex.variants(without_jit=True)
    @parameterized.named_parameters(
        ("odd_in_odd", 7, 3, 2),
        ("even_in_even", 8, 4, 2),
        ("odd_in_even", 8, 3, 3),
        ("even_in_odd", 9, 4, 2),
    )
    def test_anchor(self, background: int, width: int, anchor: int) -> None:
        """The first placed row and column sit at bg // 2 - w // 2."""
        var_center_place = self.variant(center_place)
        placed = var_center_place(
            background, background, jnp.ones((width, width))
        )
        rows = jnp.nonzero(jnp.sum(placed, axis=1))[0]
        chex.assert_equal(int(rows[0]), anchor)
        chex.assert_equal(int(rows[-1]), anchor + width - 1)

    @chex.variants(without_jit=True)
    def test_odd_array_center_lands_on_grid_origin(self) -> None:
        """In an even background the middle element sits at bg // 2."""
        marked = jnp.zeros((5, 5)).at[2, 2].set(1.0)
        var_center_place = self.variant(center_place)
        placed = var_center_place(16, 16, marked)
        chex.assert_trees_all_close(placed[8, 8], 1.0)
        chex.assert_trees_all_close(jnp.sum(placed), 1.0)

    @chex.variants(without_jit=True)
    def test_non_square_background(self) -> None:
        var_center_place = self.variant(center_place)
        placed = var_center_place(10, 6, jnp.ones((2, 4)))
        chex.assert_shape(placed, (6, 10))
        chex.assert_trees_all_close(jnp.sum(placed), 8.0)

    def test_bool_input_is_converted(self) -> None:
        placed = center_place(5, 5, jnp.ones((1, 1), dtype=bool))
        chex.assert_type(placed, jnp.float64)
        chex.assert_trees_all_close(placed[2, 2], 1.0)

    def test_too_large_raises(self) -> None:
        with pytest.raises(InconsistentGridError):
            center_place(4, 4, jnp.ones((5, 5)))


class TestDrawDisk(chex.TestCase, parameterized.TestCase):
    """Test the draw_disk function."""

    @chex.variants(without_jit=True)
    def test_pixel_count(self) -> None:
        """A 10-pixel disk covers the 81 offsets with x² + y² <= 25."""
        var_draw_disk = self.variant(draw_disk)
        disk = var_draw_disk(64, 10)
        chex.assert_shape(disk, (64, 64))
        chex.assert_trees_all_close(jnp.sum(disk), 81.0)

    @chex.variants(without_jit=True)
    def test_centered_at_half_size(self) -> None:
        var_draw_disk = self.variant(draw_disk)
        disk = var_draw_disk(64, 10)
        chex.assert_trees_all_close(disk[32, 32], 1.0)
        chex.assert_trees_all_close(disk[32, 27], 1.0)
        chex.assert_trees_all_close(disk[32, 37], 1.0)
        chex.assert_trees_all_close(disk[27, 32], 1.0)
        chex.assert_trees_all_close(disk[32, 26], 0.0)
        chex.assert_trees_all_close(disk[32, 38], 0.0)
        chex.assert_trees_all_close(disk, disk.T)

    @chex.variants(without_jit=True)
    def test_binary_values(self) -> None:
        var_draw_disk = self.variant(draw_disk)
        disk = var_draw_disk(33, 17.5)
        chex.assert_equal(
            bool(jnp.all((disk == 0.0) | (disk == 1.0))), True
        )

    @chex.variants(without_jit=True)
    def test_oversized_disk_is_cropped(self) -> None:
        """A disk wider than the array fills it after cropping."""
        var_draw_disk = self.variant(draw_disk)
        disk = var_draw_disk(8, 20)
        chex.assert_shape(disk, (8, 8))
        chex.assert_trees_all_close(disk, jnp.ones((8, 8)))

    @parameterized.named_parameters(
        ("zero_size", 0, 4.0),
        ("zero_diameter", 16, 0.0),
        ("negative_diameter", 16, -3.0),
    )
    def test_invalid_raises(self, size: int, diameter: float) -> None:
        with pytest.raises(InvalidDimensionError):
            draw_disk(size, diameter)


class TestDrawRing(chex.TestCase):
    """Test the draw_ring function."""

    @chex.variants(without_jit=True)
    def test_ring_is_disk_difference(self) -> None:
        var_draw_ring = self.variant(draw_ring)
        ring = var_draw_ring(64, 4, 40)
        expected = draw_disk(64, 40) * (1.0 - draw_disk(64, 4))
        chex.assert_trees_all_close(ring, expected)
        chex.assert_trees_all_close(ring[32, 32], 0.0)

    @chex.variants(without_jit=True)
    def test_zero_inner_diameter_gives_disk(self) -> None:
        var_draw_ring = self.variant(draw_ring)
        ring = var_draw_ring(32, 0, 10)
        chex.assert_trees_all_close(ring, draw_disk(32, 10))

    @chex.variants(without_jit=True)
    def test_inverted_diameters_give_empty_mask(self) -> None:
        var_draw_ring = self.variant(draw_ring)
        ring = var_draw_ring(32, 12, 10)
        chex.assert_trees_all_close(ring, jnp.zeros((32, 32)))

    def test_negative_inner_raises(self) -> None:
        with pytest.raises(InvalidDimensionError):
            draw_ring(32, -1, 10)


class TestCircularPupil(chex.TestCase):
    """Test the circular_pupil function."""

    @chex.variants(without_jit=True)
    def test_threshold(self) -> None:
        xx, yy = spatial_grid(1e-2, 64)
        radius = 2e-3
        var_circular_pupil = self.variant(circular_pupil)
        pupil = var_circular_pupil(xx, yy, radius)
        chex.assert_shape(pupil, (64, 64))
        chex.assert_trees_all_close(pupil[32, 32], 1.0)
        chex.assert_trees_all_close(pupil[0, 0], 0.0)
        inside = jnp.sqrt(xx**2 + yy**2) <= radius
        chex.assert_trees_all_close(pupil, inside.astype(jnp.float64))

    def test_non_positive_radius_raises(self) -> None:
        xx, yy = spatial_grid(1e-2, 16)
        with pytest.raises(InvalidDimensionError):
            circular_pupil(xx, yy, 0.0)
