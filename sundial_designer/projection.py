"""
Shadow-tip projection onto the dial plane.

The gnomon stands at the origin; x runs east-west across the plate and y
along the meridian (Horizontal), the plate height (Vertical) or the tilted
plate axis (Equatorial).
"""
import math
from enum import Enum
from typing import Tuple


class Orientation(str, Enum):
    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"
    EQUATORIAL = "Equatorial"


def shadow_length(altitude: float, gnomon_height: float) -> float | None:
    """Length of the gnomon shadow; None when the sun is at the horizon."""
    if not math.isfinite(altitude):
        return None
    tan_alt = math.tan(altitude)
    if not math.isfinite(tan_alt) or tan_alt == 0:
        return None
    return gnomon_height / tan_alt


def project_shadow(altitude: float,
                   azimuth: float,
                   gnomon_height: float,
                   orientation: Orientation,
                   latitude: float) -> Tuple[float, float] | None:
    """
    Map a sun altitude/azimuth (radians) to the shadow tip on the dial face.
    Returns None when no shadow length can be formed.
    """
    length = shadow_length(altitude, gnomon_height)
    if length is None:
        return None

    sx = length * math.sin(azimuth)
    sy = length * math.cos(azimuth)

    if orientation == Orientation.HORIZONTAL:
        return sx, -sy
    if orientation == Orientation.VERTICAL:
        return sx, gnomon_height
    if orientation == Orientation.EQUATORIAL:
        tilt = math.radians(latitude)
        return sx, gnomon_height * math.cos(tilt) - sy * math.sin(tilt)
    raise ValueError(f"unknown dial orientation: {orientation!r}")
