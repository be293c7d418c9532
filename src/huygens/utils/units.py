"""SI length submultiples.

Plain module-level literals, multiply a number by one of these to get
meters, e.g. ``30 * cm``.
"""

cm: float = 1e-2
mm: float = 1e-3
um: float = 1e-6
nm: float = 1e-9

__all__: list[str] = ["cm", "mm", "nm", "um"]
