"""Binary aperture masks.

Extended Summary
----------------
Pixel-space disk and ring masks placed at the center of a square array,
and a radial pupil evaluated on physical coordinates. Masks are float64
arrays of zeros and ones meant to multiply a complex field elementwise.

Routine Listings
----------------
center_place : function
    Place a small array at the center of a zero background
circular_pupil : function
    Radial threshold sqrt(x² + y²) <= radius on a coordinate grid
draw_disk : function
    Binary disk of a given pixel diameter
draw_ring : function
    Binary annulus between two pixel diameters

Notes
-----
Masks are centered on index ``size // 2`` along both axes. This is the
sample where :func:`huygens.utils.build_axis` places the origin for an
even sample count, so a mask and a field built on the same window share
their optical axis.
"""

import math

import jax
import jax.numpy as jnp
from beartype import beartype
from beartype.typing import Union
from jaxtyping import Array, Bool, Float, Num, jaxtyped

from huygens.types import ScalarInteger, ScalarNumeric
from huygens.utils.checks import positive_count, positive_scalar
from huygens.utils.errors import InconsistentGridError, InvalidDimensionError

jax.config.update("jax_enable_x64", True)


def _local_disk(diameter: float) -> Float[Array, " nn nn"]:
    """Disk on a pixel grid of half-extent ceil(diameter / 2)."""
    half: int = math.ceil(diameter / 2.0)
    offsets: Float[Array, " nn"] = jnp.arange(-half, half + 1, dtype=jnp.float64)
    xx: Float[Array, " nn nn"]
    yy: Float[Array, " nn nn"]
    xx, yy = jnp.meshgrid(offsets, offsets)
    radius: float = diameter / 2.0
    return (xx**2 + yy**2 <= radius**2).astype(jnp.float64)


@jaxtyped(typechecker=beartype)
def center_place(
    bg_width: ScalarInteger,
    bg_height: ScalarInteger,
    small_array: Union[Num[Array, " hh ww"], Bool[Array, " hh ww"]],
) -> Float[Array, " bh bw"]:
    """Place an array at the center of a zero-valued background.

    Parameters
    ----------
    bg_width : ScalarInteger
        Number of columns of the background.
    bg_height : ScalarInteger
        Number of rows of the background.
    small_array : Union[Num[Array, " hh ww"], Bool[Array, " hh ww"]]
        Array to place. Converted to float64.

    Returns
    -------
    placed : Float[Array, " bh bw"]
        Background with ``small_array`` written so that its element
        ``[hh // 2, ww // 2]`` sits at ``[bh // 2, bw // 2]``.

    Raises
    ------
    InvalidDimensionError
        If a background dimension is not positive.
    InconsistentGridError
        If ``small_array`` is larger than the background along either
        axis.

    Notes
    -----
    The anchor is ``bg // 2 - w // 2`` along each axis, which keeps the
    array center on index ``bg // 2``, the origin of an even grid built
    by :func:`huygens.utils.build_axis` and the center of every disk and
    ring mask. It equals the symmetric overlay anchor
    ``(bg - w) // 2`` except for an odd array in an even background,
    where it sits one pixel further along each axis.
    """
    bw: int = positive_count("bg_width", bg_width)
    bh: int = positive_count("bg_height", bg_height)
    hh: int
    ww: int
    hh, ww = small_array.shape
    if hh > bh or ww > bw:
        raise InconsistentGridError(
            f"array of shape {(hh, ww)} does not fit in background {(bh, bw)}"
        )
    row: int = bh // 2 - hh // 2
    col: int = bw // 2 - ww // 2
    placed: Float[Array, " bh bw"] = (
        jnp.zeros((bh, bw), dtype=jnp.float64)
        .at[row : row + hh, col : col + ww]
        .set(small_array.astype(jnp.float64))
    )
    return placed


@jaxtyped(typechecker=beartype)
def draw_disk(
    size: ScalarInteger,
    diameter: ScalarNumeric,
) -> Float[Array, " hh ww"]:
    """Create a centered binary disk mask.

    Parameters
    ----------
    size : ScalarInteger
        Side of the square output array in pixels.
    diameter : ScalarNumeric
        Disk diameter in pixels.

    Returns
    -------
    disk : Float[Array, " hh ww"]
        ``size x size`` array, 1 where ``x² + y² <= (diameter / 2)²``
        in pixel offsets from the center and 0 elsewhere.

    Raises
    ------
    InvalidDimensionError
        If ``size`` or ``diameter`` is not positive.

    Notes
    -----
    The disk is drawn on a local grid of half-extent
    ``ceil(diameter / 2)`` and placed with :func:`center_place`. A disk
    wider than the array is cropped around its center.
    """
    side: int = positive_count("size", size)
    width: float = positive_scalar("diameter", diameter)
    local: Float[Array, " nn nn"] = _local_disk(width)
    extent: int = local.shape[0]
    if extent > side:
        start: int = extent // 2 - side // 2
        local = local[start : start + side, start : start + side]
    disk: Float[Array, " hh ww"] = center_place(side, side, local)
    return disk


@jaxtyped(typechecker=beartype)
def draw_ring(
    size: ScalarInteger,
    inner_diameter: ScalarNumeric,
    outer_diameter: ScalarNumeric,
) -> Float[Array, " hh ww"]:
    """Create a centered binary ring (annulus) mask.

    Parameters
    ----------
    size : ScalarInteger
        Side of the square output array in pixels.
    inner_diameter : ScalarNumeric
        Diameter of the hole in pixels. Zero draws no hole.
    outer_diameter : ScalarNumeric
        Outer diameter in pixels.

    Returns
    -------
    ring : Float[Array, " hh ww"]
        1 inside the outer disk and outside the inner disk, 0 elsewhere.
        All zeros when ``inner_diameter >= outer_diameter``.

    Raises
    ------
    InvalidDimensionError
        If ``size`` or ``outer_diameter`` is not positive, or
        ``inner_diameter`` is negative.
    """
    side: int = positive_count("size", size)
    outer: Float[Array, " hh ww"] = draw_disk(side, outer_diameter)
    hole: float = float(jnp.asarray(inner_diameter))
    if not math.isfinite(hole) or hole < 0:
        raise InvalidDimensionError(
            f"inner_diameter must be non-negative, got {hole}"
        )
    if hole == 0:
        return outer
    inner: Float[Array, " hh ww"] = draw_disk(side, hole)
    ring: Float[Array, " hh ww"] = jnp.logical_and(
        outer > 0, jnp.logical_not(inner > 0)
    ).astype(jnp.float64)
    return ring


@jaxtyped(typechecker=beartype)
def circular_pupil(
    xx: Float[Array, " hh ww"],
    yy: Float[Array, " hh ww"],
    radius: ScalarNumeric,
) -> Float[Array, " hh ww"]:
    """Circular pupil on physical coordinates.

    Parameters
    ----------
    xx : Float[Array, " hh ww"]
        x coordinates in meters.
    yy : Float[Array, " hh ww"]
        y coordinates in meters.
    radius : ScalarNumeric
        Pupil radius in meters.

    Returns
    -------
    pupil : Float[Array, " hh ww"]
        1 where ``sqrt(x² + y²) <= radius``, 0 elsewhere.

    Raises
    ------
    InvalidDimensionError
        If ``radius`` is not positive.
    """
    rr: float = positive_scalar("radius", radius)
    pupil: Float[Array, " hh ww"] = jnp.where(
        jnp.sqrt(xx**2 + yy**2) <= rr, 1.0, 0.0
    )
    return pupil
