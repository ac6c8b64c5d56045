"""Orientation lookup by body.

Maps each :class:`~wgccrejax.bodies.Body` to the report model that
defines it and exposes the two entry points:

- :func:`get_orientation`: the raw WGCCRE orientation (pole right
  ascension, declination and prime-meridian angle).
- :func:`get_orientation_vsop87`: the same orientation converted into the
  VSOP87-aligned frame by :func:`~wgccrejax.frames.to_vsop87`.

The body argument is resolved in Python, so under ``jax.jit`` it must be
marked static (``static_argnums=0``).  Time may be a scalar or an array of
any shape.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable

from jax.typing import ArrayLike

from wgccrejax.bodies import Body, resolve_body
from wgccrejax.frames import to_vsop87
from wgccrejax.reports import FrameOrientation, Orientation, report_2009, report_2015

OrientationModel = Callable[[ArrayLike], Orientation]

REPORT_2015_MODELS: MappingProxyType[Body, OrientationModel] = MappingProxyType({
    Body.SOL: report_2015.sol,
    Body.MERCURY: report_2015.mercury,
    Body.VENUS: report_2015.venus,
    Body.MARS: report_2015.mars,
    Body.JUPITER: report_2015.jupiter,
    Body.SATURN: report_2015.saturn,
    Body.URANUS: report_2015.uranus,
    Body.NEPTUNE: report_2015.neptune,
})

REPORT_2009_MODELS: MappingProxyType[Body, OrientationModel] = MappingProxyType({
    Body.EARTH: report_2009.earth,
    Body.MOON: report_2009.moon,
})

ORIENTATION_MODELS: MappingProxyType[Body, OrientationModel] = MappingProxyType(
    {**REPORT_2015_MODELS, **REPORT_2009_MODELS}
)


def get_orientation(body: Body | str, t: ArrayLike) -> Orientation:
    """Raw orientation of a body from its WGCCRE model.

    Args:
        body: A :class:`Body` or its canonical name, e.g. ``"Mars"``.
        t: Julian centuries from J2000.0 (negative before the epoch).
            Non-finite values propagate to ``NaN`` output.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.

    Raises:
        UnknownBodyError: If *body* has no orientation model.

    Examples:
        ```python
        from wgccrejax import get_orientation
        get_orientation("Earth", 0.0)  # Orientation(ra=0.0, dec=90.0, w=190.147)
        ```
    """
    return ORIENTATION_MODELS[resolve_body(body)](t)


def get_orientation_vsop87(body: Body | str, t: ArrayLike) -> FrameOrientation:
    """Orientation of a body in the VSOP87-aligned frame.

    Args:
        body: A :class:`Body` or its canonical name, e.g. ``"Mars"``.
        t: Julian centuries from J2000.0.

    Returns:
        Frame orientation ``(lat, lon, roll)`` with ``lat`` and ``lon`` in
        ``[0, 360)`` degrees and ``roll`` zero.

    Raises:
        UnknownBodyError: If *body* has no orientation model.

    Examples:
        ```python
        import jax
        import jax.numpy as jnp
        from wgccrejax import Body, get_orientation_vsop87
        t = jnp.linspace(0.0, 0.01, 100)
        frame = get_orientation_vsop87(Body.JUPITER, t)
        jitted = jax.jit(get_orientation_vsop87, static_argnums=0)
        jitted(Body.JUPITER, 0.005)
        ```
    """
    return to_vsop87(get_orientation(body, t))
