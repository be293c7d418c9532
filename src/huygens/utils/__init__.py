"""Common utility functions used throughout the code.

Extended Summary
----------------
Sampling grids, execution backends, unit constants, argument checks and
the exception taxonomy shared by every subpackage.

Submodules
----------
backend
    Device placement of field arrays
checks
    Argument validation helpers
errors
    Exception classes
grids
    Spatial and spatial-frequency sampling grids
units
    SI length submultiples

Routine Listings
----------------
Backend : NamedTuple
    Device handle with to_device and to_host
build_axis : function
    Spatial axis of a window
build_frequency_axis : function
    Spatial-frequency axis of a window
frequency_grid : function
    Meshed spatial-frequency coordinates
get_device_count : function
    Gets the number of available JAX devices
make_backend : function
    Creates a Backend for a platform
meshgrid : function
    2D coordinate arrays from two axes
spatial_grid : function
    Meshed spatial coordinates
DegenerateParameterError : class
    Zero distance or focal length
HuygensError : class
    Base class of package errors
InconsistentGridError : class
    Array sizes that do not fit the target grid
InvalidDimensionError : class
    Non-positive sizes or badly shaped arrays
"""

from .backend import Backend, get_device_count, make_backend
from .errors import (
    DegenerateParameterError,
    HuygensError,
    InconsistentGridError,
    InvalidDimensionError,
)
from .grids import (
    build_axis,
    build_frequency_axis,
    frequency_grid,
    meshgrid,
    spatial_grid,
)
from .units import cm, mm, nm, um

__all__: list[str] = [
    "Backend",
    "build_axis",
    "build_frequency_axis",
    "cm",
    "DegenerateParameterError",
    "frequency_grid",
    "get_device_count",
    "HuygensError",
    "InconsistentGridError",
    "InvalidDimensionError",
    "make_backend",
    "meshgrid",
    "mm",
    "nm",
    "spatial_grid",
    "um",
]
