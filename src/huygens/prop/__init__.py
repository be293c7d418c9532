"""Free-space propagation and its diagnostics.

Extended Summary
----------------
FFT-based propagators for scalar fields sampled on square grids, and
the scalar checks that tell whether a propagation setup is valid and
adequately sampled.

Submodules
----------
free_space_prop
    Angular spectrum and two-step Fresnel propagators
criteria
    Fresnel-number and sampling diagnostics

Routine Listings
----------------
angular_spectrum : function
    Angular spectrum propagation with the exact transfer function.
fresnel_number : function
    Fresnel number a²/(λz) with its validity regime.
sampling_status : function
    Compare the sample interval with the critical interval λz/L.
transfer_function : function
    Exact free-space transfer function exp(i kz z).
two_step_fresnel : function
    Two-step scaled Fresnel propagation.

Notes
-----
All propagators return complex128 fields with the same shape as their
input. Diagnostics never raise; they report ``INVALID`` instead.
"""

from .criteria import fresnel_number, sampling_status
from .free_space_prop import (
    angular_spectrum,
    transfer_function,
    two_step_fresnel,
)

__all__: list[str] = [
    "angular_spectrum",
    "fresnel_number",
    "sampling_status",
    "transfer_function",
    "two_step_fresnel",
]
