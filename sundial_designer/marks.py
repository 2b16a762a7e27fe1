"""
Declination marks: the date lines drawn across the hour curves.

A mark's date text is either a named solar event ("Equinox", "Summer
Solstice", ...) or a calendar date in any of the usual spellings ("March 12",
"12 Mar", "3/12", "2024-03-12"). `parse_mark_date` returns a tagged result
and never raises; text that matches nothing comes back as `Unparseable` and
the mark simply draws nothing.
"""
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import List, Union

from sundial_designer.astronomy import OBLIQUITY_DEG, solar_declination

# Non-leap reference year for day-of-year numbering
REFERENCE_YEAR = 2001


class SolarEvent(Enum):
    EQUINOX = 0.0
    SUMMER_SOLSTICE = OBLIQUITY_DEG
    WINTER_SOLSTICE = -OBLIQUITY_DEG

    @property
    def declination(self) -> float:
        return self.value


EVENT_NAMES = {
    "equinox": SolarEvent.EQUINOX,
    "vernal equinox": SolarEvent.EQUINOX,
    "spring equinox": SolarEvent.EQUINOX,
    "autumnal equinox": SolarEvent.EQUINOX,
    "autumn equinox": SolarEvent.EQUINOX,
    "fall equinox": SolarEvent.EQUINOX,
    "summer solstice": SolarEvent.SUMMER_SOLSTICE,
    "june solstice": SolarEvent.SUMMER_SOLSTICE,
    "winter solstice": SolarEvent.WINTER_SOLSTICE,
    "december solstice": SolarEvent.WINTER_SOLSTICE,
}

# Formats without a year get REFERENCE_YEAR appended before parsing.
_DATE_FORMATS = [
    "%B %d",
    "%b %d",
    "%m/%d",
    "%m-%d",
    "%m.%d",
]
_DATED_FORMATS = [
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%B %d %Y",
    "%b %d %Y",
]


@dataclass(frozen=True)
class NamedEvent:
    event: SolarEvent


@dataclass(frozen=True)
class CalendarDate:
    month: int
    day: int

    @property
    def day_of_year(self) -> int:
        return date(REFERENCE_YEAR, self.month, self.day).timetuple().tm_yday


@dataclass(frozen=True)
class Unparseable:
    text: str


MarkDate = Union[NamedEvent, CalendarDate, Unparseable]


@dataclass(frozen=True)
class DeclinationMark:
    date: str
    style: int  # index into DialDesign.styles
    id: str
    active: bool = True


def _normalize(text: str) -> str:
    return " ".join(text.replace(",", " ").split())


def _candidates(text: str) -> List[str]:
    """The text as given, then with its leading month/day tokens swapped."""
    candidates = [text]
    tokens = text.split(" ")
    if len(tokens) >= 2:
        swapped = " ".join([tokens[1], tokens[0]] + tokens[2:])
        candidates.append(swapped)
    for sep in "/-.":
        parts = text.split(sep)
        if len(parts) == 2:
            candidates.append(sep.join(reversed(parts)))
    return candidates


def _parse_calendar(text: str) -> CalendarDate | None:
    for candidate in _candidates(text):
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(f"{candidate} {REFERENCE_YEAR}", f"{fmt} %Y")
            except ValueError:
                continue
            return CalendarDate(month=parsed.month, day=parsed.day)
        for fmt in _DATED_FORMATS:
            try:
                parsed = datetime.strptime(candidate, fmt)
            except ValueError:
                continue
            if parsed.month == 2 and parsed.day == 29:
                # no Feb 29 in the reference year
                continue
            return CalendarDate(month=parsed.month, day=parsed.day)
    return None


def parse_mark_date(text: str) -> MarkDate:
    normalized = _normalize(text)
    if not normalized:
        return Unparseable(text)

    event = EVENT_NAMES.get(normalized.lower())
    if event is not None:
        return NamedEvent(event)

    calendar = _parse_calendar(normalized)
    if calendar is not None:
        return calendar
    return Unparseable(text)


def mark_declination(mark: DeclinationMark) -> float | None:
    """Declination in degrees for a mark, or None when its date text is unusable."""
    parsed = parse_mark_date(mark.date)
    if isinstance(parsed, NamedEvent):
        return parsed.event.declination
    if isinstance(parsed, CalendarDate):
        return solar_declination(parsed.day_of_year)
    return None
