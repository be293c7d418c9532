"""End-to-end propagation chains.

Extended Summary
----------------
Chains that assemble a source, optional optical elements and both
free-space propagators into a single comparison run.

Routine Listings
----------------
:func:`compare_propagators`
    Propagates one field with both methods and compares the outputs.
:func:`simulate_lg_propagation`
    Builds a Laguerre-Gaussian source, applies an optional ring and
    lens, runs the diagnostics and compares both propagators.

Notes
-----
Stages are logged at DEBUG level through the ``huygens.scopes``
loggers; no handlers are installed by the library.
"""

from .comparison import compare_propagators, simulate_lg_propagation

__all__: list[str] = [
    "compare_propagators",
    "simulate_lg_propagation",
]
