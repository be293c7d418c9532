"""Scalar free-space propagation of coherent optical fields in JAX.

Extended Summary
----------------
Propagates complex scalar fields sampled on square grids with the
Angular Spectrum Method and the two-step scaled Fresnel method, and
provides the sources, apertures, lenses and sampling diagnostics needed
to set up and compare a propagation.

Routine Listings
----------------
:mod:`lenses`
    Thin lens with a circular pupil.
:mod:`models`
    Laguerre-Gaussian and Gaussian source fields.
:mod:`prop`
    Free-space propagators and Fresnel / sampling diagnostics.
:mod:`scopes`
    End-to-end comparison chains.
:mod:`simul`
    Binary aperture masks.
:mod:`types`
    PyTree data structures, report types and factory functions.
:mod:`utils`
    Grids, errors, units and device placement.

Examples
--------
>>> import huygens as hg
>>> x = hg.utils.build_axis(1.28e-2, 512)
>>> mode = hg.models.lg_mode(0, 1, 2 * 3.141592653589793 / 500e-9, 3e-3, x, x)
>>> out = hg.prop.angular_spectrum(mode.field, 1.28e-2, 500e-9, 0.3)

Notes
-----
All computations run in double precision.
"""

import os
from importlib.metadata import version

# Enable multi-threaded CPU execution for JAX (before importing JAX)
os.environ.setdefault(
    "XLA_FLAGS",
    "--xla_cpu_multi_thread_eigen=true intra_op_parallelism_threads=0",
)

# Enable 64-bit precision in JAX (must be set before importing submodules)
import jax  # noqa: E402

jax.config.update("jax_enable_x64", True)

from . import (  # noqa: E402, I001
    lenses,
    models,
    prop,
    scopes,
    simul,
    types,
    utils,
)

__version__: str = version("huygens")

__all__: list[str] = [
    "__version__",
    "lenses",
    "models",
    "prop",
    "scopes",
    "simul",
    "types",
    "utils",
]
