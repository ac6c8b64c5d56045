"""
The `constants` module defines the angle, time and frame constants used by the orientation models.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

# Time Constants

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
JD2000 = 2451545.0

"""
Modified Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
MJD2000 = 51544.5

"""
Length of a Julian century. Units: *days*
"""
DAYS_PER_JULIAN_CENTURY = 36525.0

"""
Scale applied to the time argument to obtain the day count ``d`` used by the
prime-meridian rotation terms of every model. Units: *days per time unit*
"""
ROTATION_DAYS_SCALE = 365250.0

# Frame Constants

"""
Obliquity used to tilt body pole directions into the ecliptic-aligned frame
expected by VSOP87 consumers. Units: *deg*

References:

1. Stellarium, ``StelCore.cpp``
"""
EARTH_AXIAL_TILT = 23.4392803055555555556

"""
Calibration offset added to the VSOP87-frame longitude. Units: *deg*

References:

1. Stellarium, ``StelCore.cpp``
"""
VSOP87_LONGITUDE_OFFSET = 0.0000275
