"""
Hour-label placement along analemma curves.

Labels sit a fixed physical distance off the curve, along its local normal
pointing away from the gnomon foot, so the text never lands on the line.
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
from numpy.linalg import norm

from sundial_designer.astronomy import DAYS_PER_YEAR
from sundial_designer.config import LabelSettings
from sundial_designer.curves import AnalemmaPoint, as_xy
from sundial_designer.daterange import SUMMER_SOLSTICE_DAY, WINTER_SOLSTICE_DAY, DateRange

SUMMER = "summer"
WINTER = "winter"


@dataclass(frozen=True)
class HourLabel:
    text: str
    side: str  # "summer" or "winter"
    day: int
    x: float
    y: float


def unit(v: np.ndarray) -> np.ndarray:
    v = np.asarray(v, dtype=float)
    n = norm(v)
    if n == 0:
        return v
    return v / n


def tangent(xy: np.ndarray, index: int) -> np.ndarray:
    """Central difference inside the curve, one-sided at its ends."""
    last = xy.shape[0] - 1
    lo = max(index - 1, 0)
    hi = min(index + 1, last)
    return unit(xy[hi] - xy[lo])


def outward_normal(xy: np.ndarray, index: int) -> np.ndarray:
    t = tangent(xy, index)
    n = np.array([-t[1], t[0]])
    # face away from the origin (gnomon foot)
    if float(np.dot(n, xy[index])) < 0:
        n = -n
    return n


def label_anchor(xy: np.ndarray, index: int, offset: float) -> Tuple[float, float]:
    p = xy[index] + offset * outward_normal(xy, index)
    return float(p[0]), float(p[1])


def _day_distance(a: int, b: int) -> int:
    d = abs(a - b) % DAYS_PER_YEAR
    return min(d, DAYS_PER_YEAR - d)


def find_day_index(days: Sequence[int], target: int) -> int:
    """Index of target in days, else of the nearest day, counting across New Year."""
    best = 0
    for i, day in enumerate(days):
        if day == target:
            return i
        if _day_distance(day, target) < _day_distance(days[best], target):
            best = i
    return best


def format_hour_label(hour: float, use_24_hour: bool = True) -> str:
    minutes = int(round(hour * 60))
    h, m = divmod(minutes, 60)
    h %= 24
    if not use_24_hour:
        h = h % 12 or 12
    return f"{h}:{m:02d}"


def _side_positions(segments: Sequence[Sequence[AnalemmaPoint]],
                    selector: DateRange) -> List[Tuple[str, int, int]]:
    """(side, segment index, point index) for the two label sides."""
    if not segments:
        return []
    if selector == DateRange.FULL_YEAR:
        days = [p.day for p in segments[0]]
        if not days:
            return []
        return [(SUMMER, 0, find_day_index(days, SUMMER_SOLSTICE_DAY)),
                (WINTER, 0, find_day_index(days, WINTER_SOLSTICE_DAY))]
    if selector == DateRange.SUMMER_TO_WINTER:
        return [(SUMMER, 0, 0), (WINTER, 0, len(segments[0]) - 1)]
    # Winter to summer: winter opens the first segment, summer closes the last
    last = len(segments) - 1
    return [(WINTER, 0, 0), (SUMMER, last, len(segments[last]) - 1)]


def hour_labels(segments: Sequence[Sequence[AnalemmaPoint]],
                selector: DateRange,
                hour: float,
                settings: LabelSettings) -> List[HourLabel]:
    """
    Summer- and winter-side labels for one hour curve.

    `segments` is the date-window split of the curve (one list per resolved
    interval, sorted by day). A side is skipped when it is switched off or
    when its segment is too short to have a direction.
    """
    enabled = {SUMMER: settings.summer_side, WINTER: settings.winter_side}
    text = format_hour_label(hour, settings.use_24_hour)
    labels = []
    for side, seg, idx in _side_positions(segments, selector):
        points = segments[seg]
        if not enabled[side] or len(points) < 2:
            continue
        x, y = label_anchor(as_xy(points), idx, settings.offset)
        labels.append(HourLabel(text=text, side=side, day=points[idx].day, x=x, y=y))
    return labels
