"""
Curve generators.

Analemmas fix the clock hour and sweep the year; declination curves fix the
sun's declination and sweep the day. Samples with the sun at or below the
horizon cast no shadow and are skipped.
"""
import math
from dataclasses import dataclass
from typing import List

import numpy as np

from sundial_designer.astronomy import (hour_angle, longitude_correction_minutes,
                                        position_for_declination, solar_position)
from sundial_designer.config import DialConfig, Location, TimeWindow
from sundial_designer.projection import project_shadow

DAYS = range(1, 366)
MIN_SEGMENT_POINTS = 2


@dataclass(frozen=True)
class AnalemmaPoint:
    day: int
    x: float
    y: float


@dataclass(frozen=True)
class CurvePoint:
    hour: float
    x: float
    y: float


def as_xy(points) -> np.ndarray:
    """(N, 2) array of a curve's coordinates."""
    if not points:
        return np.empty((0, 2))
    return np.array([(p.x, p.y) for p in points], dtype=float)


def generate_analemma(location: Location, dial: DialConfig, hour: float) -> List[AnalemmaPoint]:
    """Shadow tip at a fixed clock hour for every day of the year the sun is up."""
    points = []
    for day in DAYS:
        pos = solar_position(day, location.latitude, location.longitude, location.tz_meridian, hour)
        if pos.altitude <= 0:
            continue
        xy = project_shadow(pos.altitude, pos.azimuth, dial.gnomon_height,
                            dial.orientation, location.latitude)
        if xy is None:
            continue
        points.append(AnalemmaPoint(day=day, x=xy[0], y=xy[1]))
    return points


def generate_declination_curve(location: Location,
                               dial: DialConfig,
                               window: TimeWindow,
                               declination_deg: float,
                               max_radius: float) -> List[List[CurvePoint]]:
    """
    Shadow tip across the day for a fixed declination, as disjoint segments.

    A new segment starts wherever the sun drops below the horizon inside the
    window. The equinox line (declination 0) is kept as one continuous
    sweep. Points farther than max_radius from the gnomon foot are dropped.
    """
    offset = longitude_correction_minutes(location.longitude, location.tz_meridian) / 60.0
    split_at_horizon = declination_deg != 0.0

    segments = []
    current: List[CurvePoint] = []
    for hour in window.minute_samples():
        pos = position_for_declination(location.latitude, declination_deg, hour_angle(hour + offset))
        if pos.altitude <= 0:
            if split_at_horizon:
                if len(current) >= MIN_SEGMENT_POINTS:
                    segments.append(current)
                current = []
            continue
        xy = project_shadow(pos.altitude, pos.azimuth, dial.gnomon_height,
                            dial.orientation, location.latitude)
        if xy is None or math.hypot(xy[0], xy[1]) > max_radius:
            continue
        current.append(CurvePoint(hour=hour, x=xy[0], y=xy[1]))

    if len(current) >= MIN_SEGMENT_POINTS:
        segments.append(current)
    return segments
