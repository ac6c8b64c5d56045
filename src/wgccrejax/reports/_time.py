"""Time arguments shared by the report models."""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from wgccrejax.config import get_dtype
from wgccrejax.constants import ROTATION_DAYS_SCALE


def time_arguments(t: ArrayLike) -> tuple[Array, Array]:
    """Cast ``t`` to the configured dtype and derive the rotation day count.

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Tuple ``(T, d)`` with ``d = T * 365250``, both in the dtype
        returned by :func:`~wgccrejax.config.get_dtype`.
    """
    T = jnp.asarray(t, dtype=get_dtype())
    return T, T * ROTATION_DAYS_SCALE
