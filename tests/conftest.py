import jax.numpy as jnp
import pytest

from wgccrejax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Prime-meridian angles reach 1e7 degrees within a few decades of
    J2000.0, so the known-value tests need float64.  test_config.py has its
    own autouse fixture that sets float32.
    """
    set_dtype(jnp.float64)
