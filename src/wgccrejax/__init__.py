"""
wgccrejax computes the orientation of solar-system bodies from the WGCCRE report models, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    JD2000,
    MJD2000,
    DAYS_PER_JULIAN_CENTURY,
    EARTH_AXIAL_TILT,
    VSOP87_LONGITUDE_OFFSET,
)

from .config import set_dtype, get_dtype

from .angles import sin_d, cos_d, wrap_360

from .time import (
    julian_centuries_from_caldate,
    julian_centuries_from_jd,
    julian_centuries_from_mjd,
)

from .bodies import Body, UnknownBodyError, resolve_body

from .reports import (
    Orientation,
    FrameOrientation,
    report_2009,
    report_2015,
)

from .frames import (
    earth_axial_tilt,
    to_vsop87,
    rotation_icrf_to_body_fixed,
    rotation_body_fixed_to_icrf,
    pole_vector,
)

from .orientation import (
    ORIENTATION_MODELS,
    REPORT_2009_MODELS,
    REPORT_2015_MODELS,
    get_orientation,
    get_orientation_vsop87,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "JD2000",
    "MJD2000",
    "DAYS_PER_JULIAN_CENTURY",
    "EARTH_AXIAL_TILT",
    "VSOP87_LONGITUDE_OFFSET",
    # Config
    "set_dtype",
    "get_dtype",
    # Angles
    "sin_d",
    "cos_d",
    "wrap_360",
    # Time
    "julian_centuries_from_caldate",
    "julian_centuries_from_jd",
    "julian_centuries_from_mjd",
    # Bodies
    "Body",
    "UnknownBodyError",
    "resolve_body",
    # Reports
    "Orientation",
    "FrameOrientation",
    "report_2009",
    "report_2015",
    # Frames
    "earth_axial_tilt",
    "to_vsop87",
    "rotation_icrf_to_body_fixed",
    "rotation_body_fixed_to_icrf",
    "pole_vector",
    # Orientation
    "ORIENTATION_MODELS",
    "REPORT_2009_MODELS",
    "REPORT_2015_MODELS",
    "get_orientation",
    "get_orientation_vsop87",
]
