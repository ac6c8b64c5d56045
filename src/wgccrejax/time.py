"""Conversions from dates to J2000.0-relative time.

Every orientation model takes ``T``, the number of Julian centuries elapsed
since J2000.0 (negative before the epoch).  These helpers produce ``T``
from Julian Dates, Modified Julian Dates or calendar dates.

.. note::

    No time-scale conversion is applied.  Dates are assumed to already be
    in TDB/TT; passing UTC introduces an error of about a minute, which is
    negligible for pole directions but shifts fast rotators' ``W`` by
    a fraction of a degree.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from wgccrejax.config import get_dtype
from wgccrejax.constants import DAYS_PER_JULIAN_CENTURY, JD2000, MJD2000


def julian_centuries_from_jd(jd: ArrayLike) -> Array:
    """Julian centuries since J2000.0 for a Julian Date.

    Args:
        jd (ArrayLike): Julian Date. Units: *days*

    Returns:
        Julian centuries from J2000.0.

    Examples:
        ```python
        from wgccrejax.time import julian_centuries_from_jd
        julian_centuries_from_jd(2451545.0)  # 0.0
        ```
    """
    _float = get_dtype()
    jd = jnp.asarray(jd, dtype=_float)
    return (jd - _float(JD2000)) / _float(DAYS_PER_JULIAN_CENTURY)


def julian_centuries_from_mjd(mjd: ArrayLike) -> Array:
    """Julian centuries since J2000.0 for a Modified Julian Date.

    Args:
        mjd (ArrayLike): Modified Julian Date. Units: *days*

    Returns:
        Julian centuries from J2000.0.
    """
    _float = get_dtype()
    mjd = jnp.asarray(mjd, dtype=_float)
    return (mjd - _float(MJD2000)) / _float(DAYS_PER_JULIAN_CENTURY)


def julian_centuries_from_caldate(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> Array:
    """Julian centuries since J2000.0 for a calendar date. Algorithm is only valid from year 1583 onward.

    The whole-day count is formed in integers before subtracting the epoch,
    so the fractional day keeps its precision under ``float32``.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date.
        day (ArrayLike): Day of the calendar date.
        hour (ArrayLike): Hour of the calendar date. Default: ``0``
        minute (ArrayLike): Minute of the calendar date. Default: ``0``
        second (ArrayLike): Second of the calendar date. Default: ``0.0``

    Returns:
        Julian centuries from J2000.0.

    References:

        1. Montenbruck, O., & Gill, E. (2012). *Satellite Orbits: Models, Methods and Applications*. Springer Science & Business Media.
    """
    _float = get_dtype()

    is_jan_or_feb = month <= 2
    year = jnp.where(is_jan_or_feb, year - 1, year)
    month = jnp.where(is_jan_or_feb, month + 12, month)

    B = jnp.floor(year / 400) - jnp.floor(year / 100) + jnp.floor(year / 4)

    mjd = 365 * year - 679004 + B + jnp.floor(30.6001 * (month + 1)) + day
    whole_days = jnp.floor(mjd).astype(jnp.int32) - jnp.int32(int(MJD2000))

    frac_day = (hour + (minute + second / 60.0) / 60.0) / 24.0

    days = _float(whole_days) + (frac_day - (MJD2000 - int(MJD2000)))
    return days / _float(DAYS_PER_JULIAN_CENTURY)
