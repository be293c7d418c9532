"""Aperture masks for optical field simulation.

Extended Summary
----------------
Binary masks that multiply a complex field elementwise: pixel-space
disks and rings centered on the grid origin, and a circular pupil on
physical coordinates.

Submodules
----------
apertures
    Aperture mask generators

Routine Listings
----------------
center_place
    Place a small array at the center of a zero background
circular_pupil
    Circular pupil from physical coordinates
draw_disk
    Binary disk of a given pixel diameter
draw_ring
    Binary annulus between two pixel diameters
"""

from .apertures import center_place, circular_pupil, draw_disk, draw_ring

__all__: list[str] = [
    "center_place",
    "circular_pupil",
    "draw_disk",
    "draw_ring",
]
