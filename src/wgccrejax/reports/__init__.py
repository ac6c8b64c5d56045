"""WGCCRE report models.

This sub-module groups the closed-form orientation models by report
edition:

- **report_2015**: the Sun, Mercury, Venus, Mars, Jupiter, Saturn, Uranus
  and Neptune.
- **report_2009**: the Earth and the Moon.

Each model maps ``T`` (Julian centuries from J2000.0) to an
:class:`Orientation`.
"""

from . import report_2009, report_2015
from ._types import FrameOrientation, Orientation

__all__ = [
    "FrameOrientation",
    "Orientation",
    "report_2009",
    "report_2015",
]
