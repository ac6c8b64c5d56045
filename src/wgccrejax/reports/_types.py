"""Type definitions for orientation results.

- :class:`Orientation`: Raw output of every report model, the pole
  direction and prime-meridian angle in the ICRF.
- :class:`FrameOrientation`: Orientation re-expressed in the frame used
  alongside VSOP87 positions.

Both types are :class:`~typing.NamedTuple` instances, which JAX treats as
pytrees automatically. This means they work seamlessly with ``jax.jit``,
``jax.vmap``, and ``jax.lax`` control flow primitives.
"""

from __future__ import annotations

from typing import NamedTuple

from jax import Array


class Orientation(NamedTuple):
    """Body orientation as published in the WGCCRE reports.

    All angles are in degrees and are not range-reduced; ``w`` in
    particular grows without bound with time.

    Attributes:
        ra: Right ascension of the north pole, alpha.
        dec: Declination of the north pole, delta.
        w: Prime-meridian angle, W.
    """

    ra: Array
    dec: Array
    w: Array


class FrameOrientation(NamedTuple):
    """Body orientation in the VSOP87-aligned consumer frame.

    Attributes:
        lat: Pole tilt from the ecliptic-aligned frame, in ``[0, 360)`` degrees.
        lon: Combined pole longitude and meridian angle, in ``[0, 360)`` degrees.
        roll: Placeholder, always zero.
    """

    lat: Array
    lon: Array
    roll: Array
