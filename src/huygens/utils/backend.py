"""Execution backend selection for field arrays.

Extended Summary
----------------
Placing arrays on an accelerator is an execution concern kept out of the
propagation kernels. A :class:`Backend` wraps one JAX device and moves
arrays to it or back to host memory. Propagators accept an optional
backend and call ``to_device`` once per call on their input field.

Routine Listings
----------------
Backend : NamedTuple
    Device handle with ``to_device`` and ``to_host``.
get_device_count : function
    Gets the number of available JAX devices.
make_backend : function
    Creates a Backend for the first device of a platform.

Examples
--------
>>> import jax.numpy as jnp
>>> from huygens.utils.backend import make_backend
>>> backend = make_backend("cpu")
>>> on_device = backend.to_device(jnp.ones((4, 4)))
>>> host_copy = backend.to_host(on_device)
"""

import jax
import numpy as np
from beartype import beartype
from beartype.typing import Any, NamedTuple, Optional, Union
from jaxtyping import Array, Shaped, jaxtyped


class Backend(NamedTuple):
    """Device on which field arrays are computed.

    Attributes
    ----------
    name : str
        Platform name reported by JAX (``"cpu"``, ``"gpu"``, ``"tpu"``).
    device : Any
        The ``jax.Device`` arrays are placed on.
    """

    name: str
    device: Any

    def to_device(
        self, array: Union[Shaped[Array, " ..."], np.ndarray]
    ) -> Shaped[Array, " ..."]:
        """Place ``array`` on this backend's device."""
        return jax.device_put(array, self.device)

    def to_host(self, array: Shaped[Array, " ..."]) -> np.ndarray:
        """Copy ``array`` back to a host NumPy array."""
        return np.asarray(jax.device_get(array))


@jaxtyped(typechecker=beartype)
def get_device_count() -> int:
    """Get number of available JAX devices.

    Returns
    -------
    n_devices : int
        Number of devices on the default platform.
    """
    n_devices: int = jax.device_count()
    return n_devices


@beartype
def make_backend(platform: Optional[str] = None) -> Backend:
    """Create a backend for the first device of a platform.

    Parameters
    ----------
    platform : str, optional
        JAX platform name such as ``"cpu"`` or ``"gpu"``. If None, uses
        the default platform chosen by JAX (default: None).

    Returns
    -------
    backend : Backend
        Backend bound to the first device of the platform.

    Raises
    ------
    RuntimeError
        If JAX has no device for the requested platform.
    """
    devices: list = jax.devices(platform) if platform else jax.devices()
    device: Any = devices[0]
    return Backend(name=device.platform, device=device)
