"""
Solar position model used by the dial generators.

Low-precision approximations (declination sine fit and the NOAA-style
equation of time) are plenty for an inscribed dial plate. Days are numbered
1..365 with Jan 1 = 1; angles going in are degrees, angles coming out of
`solar_position` are radians.
"""
import math
from dataclasses import dataclass

OBLIQUITY_DEG = 23.44
DAYS_PER_YEAR = 365
VERNAL_EQUINOX_DAY = 81


@dataclass(frozen=True)
class SolarPosition:
    altitude: float  # radians above the horizon
    azimuth: float   # radians clockwise from north, 0..2π

    @property
    def above_horizon(self) -> bool:
        return self.altitude > 0.0


def _year_angle(day: float) -> float:
    return 2 * math.pi * (day - VERNAL_EQUINOX_DAY) / DAYS_PER_YEAR


def solar_declination(day: float) -> float:
    """Solar declination in degrees for a day of the year."""
    return OBLIQUITY_DEG * math.sin(_year_angle(day))


def equation_of_time(day: float) -> float:
    """Apparent minus mean solar time, in minutes."""
    B = _year_angle(day)
    return 9.87 * math.sin(2 * B) - 7.53 * math.cos(B) - 1.5 * math.sin(B)


def longitude_correction_minutes(lng: float, tz_meridian: float) -> float:
    return 4.0 * (tz_meridian - lng)


def solar_time(day: float, lng: float, tz_meridian: float, hour: float) -> float:
    """Clock hour converted to apparent solar time (hours)."""
    correction = longitude_correction_minutes(lng, tz_meridian) + equation_of_time(day)
    return hour + correction / 60.0


def hour_angle(solar_hour: float) -> float:
    """Hour angle in radians; negative in the morning, 15 degrees per hour."""
    return math.radians(15.0 * (solar_hour - 12.0))


def position_for_declination(lat: float, declination: float, H: float) -> SolarPosition:
    """
    Altitude/azimuth for latitude and declination in degrees and an hour angle in radians.
    """
    phi = math.radians(lat)
    dec = math.radians(declination)

    sin_alt = math.sin(phi) * math.sin(dec) + math.cos(phi) * math.cos(dec) * math.cos(H)
    altitude = math.asin(max(-1.0, min(1.0, sin_alt)))

    denom = math.cos(altitude) * math.cos(phi)
    if denom == 0.0:
        return SolarPosition(altitude=altitude, azimuth=math.nan)
    cos_az = (math.sin(dec) - math.sin(altitude) * math.sin(phi)) / denom
    azimuth = math.acos(max(-1.0, min(1.0, cos_az)))
    if H > 0:
        azimuth = 2 * math.pi - azimuth
    return SolarPosition(altitude=altitude, azimuth=azimuth)


def solar_position(day: int, lat: float, lng: float, tz_meridian: float, hour: float) -> SolarPosition:
    """Sun position for a location, day of year and clock hour (standard time)."""
    H = hour_angle(solar_time(day, lng, tz_meridian, hour))
    return position_for_declination(lat, solar_declination(day), H)
