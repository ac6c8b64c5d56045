"""Earth and Moon orientations from the 2009 WGCCRE report.

References:
    B.A. Archinal et al., "Report of the IAU Working Group on Cartographic
    Coordinates and Rotational Elements: 2009", Celestial Mechanics and
    Dynamical Astronomy 109, 2011.
    https://astropedia.astrogeology.usgs.gov/download/Docs/WGCCRE/WGCCRE2009reprint.pdf
"""

from __future__ import annotations

from jax.typing import ArrayLike

from wgccrejax.angles import cos_d, sin_d
from wgccrejax.reports._time import time_arguments
from wgccrejax.reports._types import Orientation


def earth(t: ArrayLike) -> Orientation:
    """Orientation of the Earth.

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.

    Examples:
        ```python
        from wgccrejax.reports import report_2009
        report_2009.earth(0.0)  # Orientation(ra=0.0, dec=90.0, w=190.147)
        ```
    """
    T, d = time_arguments(t)

    return Orientation(
        0.00 - (0.641 * T),
        90.00 - (0.557 * T),
        190.147 + (360.9856235 * d),
    )


def moon(t: ArrayLike) -> Orientation:
    """Orientation of the Moon (mean Earth / polar axis frame).

    Thirteen lunar arguments ``E1`` through ``E13``, all linear in ``d``,
    drive the periodic terms.  The prime meridian also carries a small
    quadratic secular drift in ``d``.

    Args:
        t: Julian centuries from J2000.0.

    Returns:
        Pole right ascension, declination and prime meridian in degrees.
    """
    T, d = time_arguments(t)

    E1 = 125.045 - (0.0529921 * d)
    E2 = 250.089 - (0.1059842 * d)
    E3 = 260.008 + (13.0120009 * d)
    E4 = 176.625 + (13.3407154 * d)
    E5 = 357.529 + (0.9856003 * d)
    E6 = 311.589 + (26.4057084 * d)
    E7 = 134.963 + (13.0649930 * d)
    E8 = 276.617 + (0.3287146 * d)
    E9 = 34.226 + (1.7484877 * d)
    E10 = 15.134 - (0.1589763 * d)
    E11 = 119.743 + (0.0036096 * d)
    E12 = 239.961 + (0.1643573 * d)
    E13 = 25.053 + (12.9590088 * d)

    ra = (
        269.9949 + (0.0031 * T)
        - (3.8787 * sin_d(E1)) - (0.1204 * sin_d(E2))
        + (0.0700 * sin_d(E3)) - (0.0172 * sin_d(E4))
        + (0.0072 * sin_d(E6)) - (0.0052 * sin_d(E10))
        + (0.0043 * sin_d(E13))
    )
    dec = (
        66.5392 + (0.0130 * T)
        + (1.5419 * cos_d(E1)) + (0.0239 * cos_d(E2))
        - (0.0278 * cos_d(E3)) + (0.0068 * cos_d(E4))
        - (0.0029 * cos_d(E6)) + (0.0009 * cos_d(E7))
        + (0.0008 * cos_d(E10)) - (0.0009 * cos_d(E13))
    )
    w = (
        38.3213 + (13.17635815 * d) - (1.4e-12 * (d * d))
        + (3.5610 * sin_d(E1)) + (0.1208 * sin_d(E2))
        - (0.0642 * sin_d(E3)) + (0.0158 * sin_d(E4))
        + (0.0252 * sin_d(E5)) - (0.0066 * sin_d(E6))
        - (0.0047 * sin_d(E7)) - (0.0046 * sin_d(E8))
        + (0.0028 * sin_d(E9)) + (0.0052 * sin_d(E10))
        + (0.0040 * sin_d(E11)) + (0.0019 * sin_d(E12))
        - (0.0044 * sin_d(E13))
    )
    return Orientation(ra, dec, w)
