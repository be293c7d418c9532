"""Beam models for source fields.

Extended Summary
----------------
Generators for the complex source fields fed to the propagators.

Submodules
----------
beams
    Beam generation functions

Routine Listings
----------------
gaussian_mode : function
    Creates the fundamental Gaussian field at the waist
laguerre_coefficients : function
    Power-series coefficients of the generalized Laguerre polynomial
lg_mode : function
    Creates Laguerre-Gaussian modes with phase and intensity

Notes
-----
Fields are sampled on grids built by :mod:`huygens.utils.grids` and are
returned unnormalised.
"""

from .beams import gaussian_mode, laguerre_coefficients, lg_mode

__all__: list[str] = [
    "gaussian_mode",
    "laguerre_coefficients",
    "lg_mode",
]
