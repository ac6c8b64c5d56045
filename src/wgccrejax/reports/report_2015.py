"""Body orientations from the 2015 WGCCRE report.

Provides the pole direction and prime-meridian angle of the Sun and the
planets other than Earth.  Each model is a closed-form function of ``T``,
Julian centuries from J2000.0, and returns an :class:`Orientation` in
degrees.

The periodic terms use :func:`~wgccrejax.angles.sin_d` and
:func:`~wgccrejax.angles.cos_d`, and the rotation terms are linear in
``d = T * 365250``.

References:
    B.A. Archinal et al., "Report of the IAU Working Group on Cartographic
    Coordinates and Rotational Elements: 2015", Celestial Mechanics and
    Dynamical Astronomy 130, 2018.
    https://astropedia.astrogeology.usgs.gov/download/Docs/WGCCRE/WGCCRE2015reprint.pdf
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from wgccrejax.angles import cos_d, sin_d
from wgccrejax.reports._time import time_arguments
from wgccrejax.reports._types import Orientation


def sol(t: ArrayLike) -> Orientation:
    """Orientation of the Sun.

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.

    Examples:
        ```python
        from wgccrejax.reports import report_2015
        report_2015.sol(0.0).w  # 84.176
        ```
    """
    T, d = time_arguments(t)

    return Orientation(
        jnp.full_like(T, 286.13),
        jnp.full_like(T, 63.87),
        84.176 + (14.1844000 * d),
    )


def mercury(t: ArrayLike) -> Orientation:
    """Orientation of Mercury.

    The prime meridian carries five libration terms driven by multiples of
    Mercury's mean anomaly.

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.
    """
    T, d = time_arguments(t)

    M1 = 174.7910857 + (4.092335 * d)
    M2 = 349.5821714 + (8.184670 * d)
    M3 = 164.3732571 + (12.277005 * d)
    M4 = 339.1643429 + (16.369340 * d)
    M5 = 153.9554286 + (20.461675 * d)

    ra = 281.0103 - (0.0328 * T)
    dec = 61.4155 - (0.0049 * T)
    w = (
        329.5988 + (6.1385108 * d)  # +/- 0.0037
        + 0.01067257 * sin_d(M1)
        - 0.00112309 * sin_d(M2)
        - 0.00011040 * sin_d(M3)
        - 0.00002539 * sin_d(M4)
        - 0.00000571 * sin_d(M5)
    )
    return Orientation(ra, dec, w)


def venus(t: ArrayLike) -> Orientation:
    """Orientation of Venus (retrograde rotation).

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.
    """
    T, d = time_arguments(t)

    return Orientation(
        jnp.full_like(T, 272.76),
        jnp.full_like(T, 67.16),
        160.20 - (1.4813688 * d),
    )


def mars(t: ArrayLike) -> Orientation:
    """Orientation of Mars.

    Every angle carries periodic nutation terms whose arguments are linear
    in ``T``.

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.
    """
    T, d = time_arguments(t)

    ra = (
        317.269202 - (0.10927547 * T)
        + (0.000068 * sin_d(198.991226 + (19139.4819985 * T)))
        + (0.000238 * sin_d(226.292679 + (38280.8511281 * T)))
        + (0.000052 * sin_d(249.663391 + (57420.7251593 * T)))
        + (0.000009 * sin_d(266.183510 + (76560.6367950 * T)))
        + (0.419057 * sin_d(79.398797 + (0.5042615 * T)))
    )
    dec = (
        54.432516 - (0.05827105 * T)
        + (0.000051 * cos_d(122.433576 + (19139.9407476 * T)))
        + (0.000141 * cos_d(43.058401 + (38280.8753272 * T)))
        + (0.000031 * cos_d(57.663379 + (57420.7517205 * T)))
        + (0.000005 * cos_d(79.476401 + (76560.6495004 * T)))
        + (1.591274 * cos_d(166.325722 + (0.5042615 * T)))
    )
    w = (
        176.049863 + (350.891982443297 * d)
        + (0.000145 * sin_d(129.071773 + (19140.0328244 * T)))
        + (0.000157 * sin_d(36.352167 + (38281.0473591 * T)))
        + (0.000040 * sin_d(56.668646 + (57420.9295360 * T)))
        + (0.000001 * sin_d(67.364003 + (76560.2552215 * T)))
        + (0.000001 * sin_d(104.792680 + (95700.4387578 * T)))
        + (0.584542 * sin_d(95.391654 + (0.5042615 * T)))
    )
    return Orientation(ra, dec, w)


def jupiter(t: ArrayLike) -> Orientation:
    """Orientation of Jupiter (System III prime meridian).

    The pole carries five periodic terms driven by the Galilean-satellite
    arguments ``Ja`` through ``Je``.

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.
    """
    T, d = time_arguments(t)

    Ja = 99.360714 + (4850.4046 * T)
    Jb = 175.895369 + (1191.9605 * T)
    Jc = 300.323162 + (262.5475 * T)
    Jd = 114.012305 + (6070.2476 * T)
    Je = 49.511251 + (64.3000 * T)

    ra = (
        268.056595 - (0.006499 * T)
        + (0.000117 * sin_d(Ja)) + (0.000938 * sin_d(Jb))
        + (0.001432 * sin_d(Jc)) + (0.000030 * sin_d(Jd))
        + (0.002150 * sin_d(Je))
    )
    dec = (
        64.495303 + (0.002413 * T)
        + (0.000050 * cos_d(Ja)) + (0.000404 * cos_d(Jb))
        + (0.000617 * cos_d(Jc)) - (0.000013 * cos_d(Jd))
        + (0.000926 * cos_d(Je))
    )
    w = 284.95 + (870.5360000 * d)
    return Orientation(ra, dec, w)


def saturn(t: ArrayLike) -> Orientation:
    """Orientation of Saturn (System III prime meridian).

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.
    """
    T, d = time_arguments(t)

    return Orientation(
        40.589 - (0.036 * T),
        83.537 - (0.004 * T),
        38.90 + (810.7939024 * d),
    )


def uranus(t: ArrayLike) -> Orientation:
    """Orientation of Uranus (retrograde rotation).

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.
    """
    T, d = time_arguments(t)

    return Orientation(
        jnp.full_like(T, 257.311),
        jnp.full_like(T, -15.175),
        203.81 - (501.1600928 * d),
    )


def neptune(t: ArrayLike) -> Orientation:
    """Orientation of Neptune.

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.
    """
    T, d = time_arguments(t)

    N = 357.85 + (52.316 * T)

    return Orientation(
        299.36 + (0.70 * sin_d(N)),
        43.46 - (0.51 * cos_d(N)),
        249.978 + (541.1397757 * d) - (0.48 * sin_d(N)),
    )
