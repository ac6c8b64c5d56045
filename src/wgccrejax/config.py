"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
by every orientation model in wgccrejax.  The default is ``jnp.float32``
for GPU/TPU compatibility.  Switching to ``jnp.float64`` automatically
enables JAX's 64-bit mode (``jax_enable_x64``).

Prime-meridian angles grow by hundreds of degrees per day, so the dtype
bounds how well ``W`` is resolved away from J2000.0.  Under ``float32``
the Earth's VSOP87 longitude is already off by about 0.27 degrees at
``T = 0.25`` (2025), and the error keeps growing with ``|T|``.  Use
``jnp.float64`` whenever the absolute meridian angle matters.

``jnp.float16`` is not accepted: its largest finite value is 65504, and
the Earth's ``360.99 * d`` rotation term passes it about 18 days from
J2000.0, turning ``W`` into ``inf``.  ``jnp.bfloat16`` keeps the float32
exponent range, so it stays finite at a coarse resolution.

Call ``set_dtype`` **before** any JIT compilation, just like JAX's own
``jax.config.update("jax_enable_x64", True)``.  Under JIT, ``get_dtype()``
runs during tracing and its result is baked into the compiled program.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for wgccrejax.

    Must be called **before** any ``jax.jit`` compilation.  In eager mode
    the change takes effect immediately.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.bfloat16``, ``jnp.float32``, or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type, including
            ``jnp.float16``, whose range cannot hold the rotation terms.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float32``).
    """
    return _dtype
