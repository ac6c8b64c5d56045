"""Frame conversions for body orientations.

Provides two views of an :class:`~wgccrejax.reports.Orientation`:

- **VSOP87 frame**: the pole tilt and meridian longitude consumed by
  renderers that place bodies with a VSOP87 position model.  The pole
  declination is tilted by the Earth's axial tilt into the
  ecliptic-aligned frame, and the meridian angle is folded into the pole
  longitude.  Both components are reduced into ``[0, 360)`` degrees.
- **Body-fixed frame**: the IAU rotation matrix from the ICRF to the
  body-fixed frame, ``Rz(W) @ Rx(90 - delta) @ Rz(90 + alpha)``.

The tilt and longitude offset follow Stellarium's ``StelCore``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from wgccrejax.angles import wrap_360
from wgccrejax.constants import EARTH_AXIAL_TILT, VSOP87_LONGITUDE_OFFSET
from wgccrejax.reports import FrameOrientation, Orientation


def earth_axial_tilt() -> float:
    """Obliquity used to align pole directions with the ecliptic.

    Returns:
        Earth's axial tilt in degrees (23.4392803...).
    """
    return EARTH_AXIAL_TILT


def to_vsop87(orientation: Orientation) -> FrameOrientation:
    """Convert a raw orientation into the VSOP87-aligned frame.

    Computes::

        lat = (dec + (90 - tilt)) mod 360
        lon = (ra + W - 180 + 0.0000275) mod 360

    with a non-negative modulo, and a zero ``roll``.

    Args:
        orientation: Raw pole direction and meridian angle in degrees.

    Returns:
        Frame orientation with ``lat`` and ``lon`` in ``[0, 360)``.

    Examples:
        ```python
        from wgccrejax.frames import to_vsop87
        from wgccrejax.reports import report_2009
        to_vsop87(report_2009.earth(0.0))  # lat ~156.5607, lon ~10.1470275
        ```
    """
    ra, dec, w = orientation

    lat = wrap_360(dec + (90.0 - EARTH_AXIAL_TILT))
    lon = wrap_360((ra + w) - 180.0 + VSOP87_LONGITUDE_OFFSET)

    return FrameOrientation(lat, lon, jnp.zeros_like(lat))


def _Rx(angle: ArrayLike) -> Array:
    """Rotation matrix about the x-axis for an angle in degrees."""
    angle = jnp.deg2rad(angle)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0, 0.0, 0.0],
                      [0.0,  +c,  +s],
                      [0.0,  -s,  +c]])


def _Rz(angle: ArrayLike) -> Array:
    """Rotation matrix about the z-axis for an angle in degrees."""
    angle = jnp.deg2rad(angle)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,  +s, 0.0],
                      [ -s,  +c, 0.0],
                      [0.0, 0.0, 1.0]])


def rotation_icrf_to_body_fixed(orientation: Orientation) -> Array:
    """Compute the 3x3 rotation matrix from the ICRF to the body-fixed frame.

    The body-fixed z-axis is the north pole and the x-axis lies on the
    prime meridian.  Angles are range-reduced before the trigonometric
    evaluation so large ``W`` values keep their precision.

    Args:
        orientation: Raw orientation of a single epoch (scalar fields).
            Use ``jax.vmap`` for batches.

    Returns:
        3x3 rotation matrix (ICRF -> body-fixed).

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    ra, dec, w = orientation

    return _Rz(wrap_360(w)) @ _Rx(90.0 - dec) @ _Rz(wrap_360(90.0 + ra))


def rotation_body_fixed_to_icrf(orientation: Orientation) -> Array:
    """Compute the 3x3 rotation matrix from the body-fixed frame to the ICRF.

    This is the transpose of :func:`rotation_icrf_to_body_fixed`.

    Args:
        orientation: Raw orientation of a single epoch.

    Returns:
        3x3 rotation matrix (body-fixed -> ICRF).
    """
    return rotation_icrf_to_body_fixed(orientation).T


def pole_vector(orientation: Orientation) -> Array:
    """Unit vector of the body's north pole in the ICRF.

    Args:
        orientation: Raw orientation; fields may be batched.

    Returns:
        Pole direction ``[cos(dec) cos(ra), cos(dec) sin(ra), sin(dec)]``,
        with the vector components on the last axis.
    """
    ra = jnp.deg2rad(orientation.ra)
    dec = jnp.deg2rad(orientation.dec)

    return jnp.stack(
        [jnp.cos(dec) * jnp.cos(ra), jnp.cos(dec) * jnp.sin(ra), jnp.sin(dec)],
        axis=-1,
    )
