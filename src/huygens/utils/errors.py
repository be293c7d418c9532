"""Exception taxonomy for invalid propagation inputs.

Extended Summary
----------------
Propagators, mask generators and beam generators fail fast on invalid
input instead of producing NaN or Inf arrays. Every exception raised by
the package derives from :class:`HuygensError`, which is itself a
``ValueError`` so callers catching ``ValueError`` keep working.

Routine Listings
----------------
HuygensError : class
    Base class of all package errors.
InvalidDimensionError : class
    Non-positive lengths, sample counts, radii or wrongly shaped arrays.
DegenerateParameterError : class
    Parameters that would divide by zero (distance, focal length).
InconsistentGridError : class
    Arrays whose size does not fit the requested placement or grid.

Notes
-----
Diagnostics in :mod:`huygens.prop.criteria` never raise these errors,
they report an ``INVALID`` classification instead.
"""


class HuygensError(ValueError):
    """Base class for all errors raised by huygens."""


class InvalidDimensionError(HuygensError):
    """Raised for non-positive sizes or badly shaped arrays.

    Covers side lengths, sample counts, wavelengths, radii, diameters,
    beam waists, negative mode indices and fields that are not square
    2D arrays.
    """


class DegenerateParameterError(HuygensError):
    """Raised when a parameter makes the operator singular.

    A zero propagation distance in the two-step Fresnel method and a
    zero focal length in the thin lens both divide by zero.
    """


class InconsistentGridError(HuygensError):
    """Raised when array sizes do not fit the target grid."""
