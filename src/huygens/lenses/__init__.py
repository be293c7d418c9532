"""Lens elements for optical simulations.

Extended Summary
----------------
Ideal thin lenses applied as a transmittance to a sampled field.

Submodules
----------
lens_elements
    Thin lens with a circular pupil

Routine Listings
----------------
thin_lens : function
    Multiply a field by a circular pupil and a quadratic lens phase.
"""

from .lens_elements import thin_lens

__all__: list[str] = [
    "thin_lens",
]
