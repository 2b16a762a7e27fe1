"""
Date windows for hour curves.

Day numbers 172 and 355 stand in for the northern summer and winter
solstices. A Winter-to-Summer window crosses the new year, so it resolves to
two intervals and a full-year curve is partitioned rather than regenerated.
"""
from enum import Enum
from typing import List, Sequence, Tuple, TypeVar

SUMMER_SOLSTICE_DAY = 172
WINTER_SOLSTICE_DAY = 355
FIRST_DAY = 1
LAST_DAY = 365

P = TypeVar("P")


class DateRange(str, Enum):
    FULL_YEAR = "FullYear"
    SUMMER_TO_WINTER = "SummerToWinter"
    WINTER_TO_SUMMER = "WinterToSummer"


def resolve_day_range(selector: DateRange) -> List[Tuple[int, int]]:
    if selector == DateRange.FULL_YEAR:
        return [(FIRST_DAY, LAST_DAY)]
    if selector == DateRange.SUMMER_TO_WINTER:
        return [(SUMMER_SOLSTICE_DAY, WINTER_SOLSTICE_DAY)]
    if selector == DateRange.WINTER_TO_SUMMER:
        return [(WINTER_SOLSTICE_DAY, LAST_DAY), (FIRST_DAY, SUMMER_SOLSTICE_DAY)]
    raise ValueError(f"unknown date range: {selector!r}")


def split_by_day_range(points: Sequence[P], selector: DateRange) -> List[List[P]]:
    """
    Partition day-tagged points (anything with a `.day`) into one list per
    resolved interval, each sorted by day. Lists keep their interval position
    even when empty so callers can tell the first window from the last.
    """
    parts = []
    for start, end in resolve_day_range(selector):
        part = [p for p in points if start <= p.day <= end]
        part.sort(key=lambda p: p.day)
        parts.append(part)
    return parts
