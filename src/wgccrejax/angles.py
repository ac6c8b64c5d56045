"""Degree-based angle helpers.

The periodic terms of the WGCCRE models are written against ``sin_d`` and
``cos_d``.  Both reduce their argument into ``[0, 360)`` degrees, evaluate
the trigonometric function, and scale the result by ``RAD2DEG``.  The model
amplitudes are calibrated against that scaled output, so these are *not*
interchangeable with ``jnp.sin(jnp.deg2rad(x))``.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from wgccrejax.config import get_dtype
from wgccrejax.constants import RAD2DEG


def wrap_360(angle: ArrayLike) -> Array:
    """Reduce an angle into ``[0, 360)`` degrees.

    Uses a floored modulo, so negative inputs wrap to positive values.
    Inputs whose remainder rounds up to exactly 360 are mapped to 0.

    Args:
        angle (ArrayLike): Angle in degrees.

    Returns:
        Angle in degrees in the half-open interval ``[0, 360)``.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    wrapped = jnp.mod(angle, 360.0)
    return jnp.where(wrapped >= 360.0, wrapped - 360.0, wrapped)


def sin_d(angle: ArrayLike) -> Array:
    """Sine of an angle given in degrees, scaled by ``RAD2DEG``.

    Args:
        angle (ArrayLike): Angle in degrees.

    Returns:
        ``sin(angle) * 180 / pi``.
    """
    return jnp.sin(jnp.deg2rad(wrap_360(angle))) * RAD2DEG


def cos_d(angle: ArrayLike) -> Array:
    """Cosine of an angle given in degrees, scaled by ``RAD2DEG``.

    Args:
        angle (ArrayLike): Angle in degrees.

    Returns:
        ``cos(angle) * 180 / pi``.
    """
    return jnp.cos(jnp.deg2rad(wrap_360(angle))) * RAD2DEG
